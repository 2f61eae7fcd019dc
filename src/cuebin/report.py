from cuebin.cue.models import FileEntry, ParseResult
from cuebin.cue.timestamp import sectors_to_cuestamp
from cuebin.errors import BinFileNotFound


def describe_file(bin_file: FileEntry) -> list[str]:
    lines = [f"File: {bin_file.path.name}"]
    try:
        lines.append(f"  Size: {bin_file.size} bytes")
        lengths = bin_file.track_sectors()
    except BinFileNotFound:
        lines.append("  Size: missing")
        lengths = tuple(None for _ in bin_file.tracks)
    for track, length in zip(bin_file.tracks, lengths):
        track_line = f"  Track {track.number:02d} {track.mode}"
        if length is not None:
            track_line += f" ({length} sectors, {sectors_to_cuestamp(length)})"
        lines.append(track_line)
        for index in track.indexes:
            lines.append(
                f"    Index {index.number:02d} {index.stamp} -> sector {index.sector}"
            )
    return lines


def describe_disc(result: ParseResult) -> list[str]:
    lines: list[str] = []
    for bin_file in result.disc.files:
        lines.extend(describe_file(bin_file))
    lines.append(
        f"{len(result.disc.files)} files, {len(result.disc.tracks)} tracks, {len(result.diagnostics)} warnings"
    )
    for diagnostic in result.diagnostics:
        lines.append(f"Warning: {diagnostic}")
    return lines
