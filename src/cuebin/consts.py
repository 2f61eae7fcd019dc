import importlib.metadata

VERSION = importlib.metadata.version("cuebin")
SECTORS_PER_SECOND = 75
MAX_SECTOR = 2**32 - 1
CHUNK_SIZE = 1024 * 1024
sector_sizes: dict[str, int] = {
    "AUDIO": 2352,
    "CDG": 2448,
    "MODE1/2048": 2048,
    "MODE1/2352": 2352,
    "MODE2/2336": 2336,
    "MODE2/2352": 2352,
    "CDI/2336": 2336,
    "CDI/2352": 2352,
}
