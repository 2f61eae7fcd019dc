from .models import (
    Diagnostic,
    DiagnosticKind,
    DiscImage,
    FileEntry,
    IndexEntry,
    ParseResult,
    TrackEntry,
)
from .parse import CueScanner, parse_cue_str, parse_cuefile
from .timestamp import cuestamp_to_sectors, sectors_to_cuestamp

__all__ = [
    "CueScanner",
    "Diagnostic",
    "DiagnosticKind",
    "DiscImage",
    "FileEntry",
    "IndexEntry",
    "ParseResult",
    "TrackEntry",
    "cuestamp_to_sectors",
    "parse_cue_str",
    "parse_cuefile",
    "sectors_to_cuestamp",
]
