from __future__ import annotations

import pathlib

__all__ = [
    "CueBinError",
    "SheetNotFound",
    "SheetUnreadable",
    "MalformedTimestamp",
    "BinFileNotFound",
    "MergeError",
    "TargetAlreadyExists",
    "SourceNotFound",
    "MergeIOError",
]


class CueBinError(Exception):
    pass


class SheetNotFound(CueBinError):
    def __init__(self, path: pathlib.Path):
        self.path: pathlib.Path = path
        super().__init__(f"Cue sheet does not exist: {path}")


class SheetUnreadable(CueBinError):
    def __init__(self, path: pathlib.Path, reason: str):
        self.path: pathlib.Path = path
        super().__init__(f"Cue sheet could not be read: {path} ({reason})")


class MalformedTimestamp(CueBinError, ValueError):
    def __init__(self, stamp: str, reason: str = "expected mm:ss:ff"):
        self.stamp: str = stamp
        super().__init__(f"Malformed timestamp {stamp!r}: {reason}")


class BinFileNotFound(CueBinError, FileNotFoundError):
    def __init__(self, path: pathlib.Path):
        self.path: pathlib.Path = path
        super().__init__(f"Bin file not found or not readable: {path}")


class MergeError(CueBinError):
    pass


class TargetAlreadyExists(MergeError):
    def __init__(self, path: pathlib.Path):
        self.path: pathlib.Path = path
        super().__init__(f"Target merged bin path already exists: {path}")


class SourceNotFound(MergeError):
    def __init__(self, path: pathlib.Path):
        self.path: pathlib.Path = path
        super().__init__(f"Source bin file not found: {path}")


class MergeIOError(MergeError):
    def __init__(self, path: pathlib.Path, reason: str):
        self.path: pathlib.Path = path
        super().__init__(f"I/O failure while merging {path}: {reason}")
