from __future__ import annotations

import dataclasses
import functools
import pathlib
from enum import Enum, auto

from cuebin.consts import sector_sizes
from cuebin.errors import BinFileNotFound

__all__ = [
    "DiagnosticKind",
    "Diagnostic",
    "IndexEntry",
    "TrackEntry",
    "FileEntry",
    "DiscImage",
    "ParseResult",
]


class DiagnosticKind(Enum):
    BIN_FILE_NOT_FOUND = auto()
    ORPHAN_TRACK = auto()
    ORPHAN_INDEX = auto()
    MALFORMED_TIMESTAMP = auto()
    INDEX_OUT_OF_ORDER = auto()
    MALFORMED_DIRECTIVE = auto()


@dataclasses.dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    line_number: int
    line: str
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"


@dataclasses.dataclass(frozen=True)
class IndexEntry:
    number: int
    stamp: str
    sector: int


@dataclasses.dataclass(frozen=True)
class TrackEntry:
    number: int
    mode: str
    indexes: tuple[IndexEntry, ...] = ()

    @property
    def sector_size(self) -> int | None:
        return sector_sizes.get(self.mode.upper())

    @property
    def is_audio(self) -> bool:
        return self.mode.upper() == "AUDIO"

    @property
    def file_offset(self) -> int | None:
        """Sector where the track proper starts: INDEX 01, else the first index."""
        if not self.indexes:
            return None
        for index in self.indexes:
            if index.number == 1:
                return index.sector
        return self.indexes[0].sector


@dataclasses.dataclass(frozen=True)
class FileEntry:
    path: pathlib.Path
    tracks: tuple[TrackEntry, ...] = ()
    missing: bool = False

    # Frozen dataclasses still have an instance __dict__, so the stat is cached
    # there on first success and retried after a failure.
    @functools.cached_property
    def size(self) -> int:
        if self.missing:
            raise BinFileNotFound(self.path)
        try:
            return self.path.stat().st_size
        except OSError as e:
            raise BinFileNotFound(self.path) from e

    @property
    def sector_size(self) -> int | None:
        if not self.tracks:
            return None
        return self.tracks[0].sector_size

    @property
    def sector_count(self) -> int | None:
        if self.sector_size is None:
            return None
        return self.size // self.sector_size

    def track_sectors(self) -> tuple[int | None, ...]:
        """Length of each track in sectors.

        A track runs from its start to the start of the next track; the last
        track runs to the end of the file. Tracks without indexes, or files
        whose mode has no known sector size, give None.
        """
        end = self.sector_count
        lengths: list[int | None] = []
        for track in reversed(self.tracks):
            start = track.file_offset
            if start is None or end is None:
                lengths.append(None)
            else:
                lengths.append(max(end - start, 0))
            if start is not None:
                end = start
        lengths.reverse()
        return tuple(lengths)


@dataclasses.dataclass(frozen=True)
class DiscImage:
    files: tuple[FileEntry, ...] = ()

    @property
    def bin_paths(self) -> list[pathlib.Path]:
        return [file.path for file in self.files]

    @property
    def tracks(self) -> list[TrackEntry]:
        return [track for file in self.files for track in file.tracks]

    @property
    def missing_files(self) -> list[FileEntry]:
        return [file for file in self.files if file.missing]


@dataclasses.dataclass(frozen=True)
class ParseResult:
    disc: DiscImage
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.kind == kind]
