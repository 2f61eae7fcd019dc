import re

from cuebin.consts import MAX_SECTOR, SECTORS_PER_SECOND
from cuebin.errors import MalformedTimestamp

__all__ = ["cuestamp_to_sectors", "sectors_to_cuestamp"]

# Fields are not range checked; 00:99:99 is a valid (if odd) offset
stamp_pattern = re.compile(r"(\d+):(\d+):(\d+)", re.ASCII)


def cuestamp_to_sectors(stamp: str) -> int:
    match = stamp_pattern.fullmatch(stamp)
    if match is None:
        raise MalformedTimestamp(stamp)
    minutes, seconds, frames = (int(field, 10) for field in match.groups())
    sectors = frames + seconds * SECTORS_PER_SECOND + minutes * 60 * SECTORS_PER_SECOND
    if sectors > MAX_SECTOR:
        raise MalformedTimestamp(stamp, f"offset exceeds {MAX_SECTOR} sectors")
    return sectors


def sectors_to_cuestamp(sectors: int) -> str:
    if sectors < 0:
        raise ValueError(f"Sector offsets cannot be negative: {sectors}")
    minutes, remainder = divmod(sectors, 60 * SECTORS_PER_SECOND)
    seconds, frames = divmod(remainder, SECTORS_PER_SECOND)
    return f"{minutes:02d}:{seconds:02d}:{frames:02d}"
