from __future__ import annotations

import dataclasses
import logging
import os
import pathlib
from collections.abc import Iterable
from os import PathLike

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedInput

from cuebin.cue.models import (
    Diagnostic,
    DiagnosticKind,
    DiscImage,
    FileEntry,
    IndexEntry,
    ParseResult,
    TrackEntry,
)
from cuebin.cue.timestamp import cuestamp_to_sectors
from cuebin.errors import MalformedTimestamp, SheetNotFound, SheetUnreadable

__all__ = ["CueScanner", "parse_cuefile", "parse_cue_str"]

logger = logging.getLogger("cuebin")

# Tried in this order for every line
directive_starts = ("file_line", "track_line", "index_line")
directive_keywords = {"FILE", "TRACK", "INDEX"}

lark_parser = Lark.open(
    "directives.lark", rel_to=__file__, parser="lalr", start=list(directive_starts)
)


def unquote(name: Token) -> str:
    return str(name[1:-1]) if name.type == "QUOTED_NAME" else str(name)


class DirectiveTransformer(Transformer):
    @v_args(inline=True)
    def file_line(self, name: Token, tail: Token | None = None) -> str:
        return unquote(name)

    @v_args(inline=True)
    def track_line(
        self, number: Token, mode: Token, tail: Token | None = None
    ) -> tuple[int, str]:
        return (int(number, 10), str(mode))

    @v_args(inline=True)
    def index_line(
        self, number: Token, stamp: Token, tail: Token | None = None
    ) -> tuple[int, str]:
        return (int(number, 10), str(stamp))


class CueScanner:
    """Builds a DiscImage from CUE sheet lines in a single pass.

    TRACK lines attach to the most recent FILE and INDEX lines to the most
    recent TRACK of that FILE. Problems with individual lines are recorded as
    diagnostics and the scan carries on.
    """

    def __init__(self, base_dir: pathlib.Path):
        self.base_dir: pathlib.Path = base_dir
        self.files: list[FileEntry] = []
        self.diagnostics: list[Diagnostic] = []
        self.transformer: DirectiveTransformer = DirectiveTransformer()

    def feed(self, line_number: int, line: str) -> None:
        text = line.strip()
        if not text:
            return
        for start in directive_starts:
            try:
                tree = lark_parser.parse(text, start=start)
            except UnexpectedInput:
                continue
            value = self.transformer.transform(tree)
            if start == "file_line":
                self.add_file(line_number, text, value)
            elif start == "track_line":
                self.add_track(line_number, text, *value)
            else:
                self.add_index(line_number, text, *value)
            return
        keyword = text.split(maxsplit=1)[0].upper()
        if keyword in directive_keywords:
            self.diagnose(
                DiagnosticKind.MALFORMED_DIRECTIVE,
                line_number,
                text,
                f"{keyword} line could not be parsed and was skipped",
            )

    def diagnose(
        self, kind: DiagnosticKind, line_number: int, line: str, message: str
    ) -> None:
        diagnostic = Diagnostic(kind, line_number, line, message)
        logger.warning(f"Warning: {diagnostic}")
        self.diagnostics.append(diagnostic)

    def add_file(self, line_number: int, line: str, name: str) -> None:
        path = self.base_dir.joinpath(name)
        missing = not (path.is_file() and os.access(path, os.R_OK))
        if missing:
            self.diagnose(
                DiagnosticKind.BIN_FILE_NOT_FOUND,
                line_number,
                line,
                f"Bin file not found or not readable: {path}",
            )
        self.files.append(FileEntry(path, missing=missing))

    def add_track(self, line_number: int, line: str, number: int, mode: str) -> None:
        if not self.files:
            self.diagnose(
                DiagnosticKind.ORPHAN_TRACK,
                line_number,
                line,
                f"TRACK {number} appears before any FILE",
            )
            return
        current_file = self.files[-1]
        self.files[-1] = dataclasses.replace(
            current_file, tracks=current_file.tracks + (TrackEntry(number, mode),)
        )

    def add_index(self, line_number: int, line: str, number: int, stamp: str) -> None:
        if not self.files or not self.files[-1].tracks:
            self.diagnose(
                DiagnosticKind.ORPHAN_INDEX,
                line_number,
                line,
                f"INDEX {number} appears before any TRACK",
            )
            return
        try:
            sector = cuestamp_to_sectors(stamp)
        except MalformedTimestamp as e:
            self.diagnose(
                DiagnosticKind.MALFORMED_TIMESTAMP, line_number, line, str(e)
            )
            return
        current_file = self.files[-1]
        current_track = current_file.tracks[-1]
        if current_track.indexes and current_track.indexes[-1].sector > sector:
            self.diagnose(
                DiagnosticKind.INDEX_OUT_OF_ORDER,
                line_number,
                line,
                f"INDEX {number} of TRACK {current_track.number} starts at sector {sector}, before the previous index at {current_track.indexes[-1].sector}",
            )
        track = dataclasses.replace(
            current_track,
            indexes=current_track.indexes + (IndexEntry(number, stamp, sector),),
        )
        self.files[-1] = dataclasses.replace(
            current_file, tracks=current_file.tracks[:-1] + (track,)
        )

    def scan(self, lines: Iterable[str]) -> ParseResult:
        for line_number, line in enumerate(lines, 1):
            self.feed(line_number, line)
        return self.result()

    def result(self) -> ParseResult:
        return ParseResult(DiscImage(tuple(self.files)), tuple(self.diagnostics))


def parse_cue_str(content: str, base_dir: PathLike | str = ".") -> ParseResult:
    return CueScanner(pathlib.Path(base_dir).expanduser().resolve()).scan(
        content.splitlines()
    )


def parse_cuefile(file_name: PathLike | str, encoding: str = "utf-8-sig") -> ParseResult:
    cue_path = pathlib.Path(file_name).expanduser().resolve()
    if not cue_path.exists():
        raise SheetNotFound(cue_path)
    logger.info(f"Reading cue sheet {cue_path}")
    scanner = CueScanner(cue_path.parent)
    try:
        with cue_path.open("r", encoding=encoding) as f:
            result = scanner.scan(f)
    except FileNotFoundError as e:
        raise SheetNotFound(cue_path) from e
    except UnicodeDecodeError as e:
        raise SheetUnreadable(cue_path, "not valid text") from e
    except OSError as e:
        raise SheetUnreadable(cue_path, e.strerror or repr(e)) from e
    logger.info(
        f"Found {len(result.disc.files)} files and {len(result.disc.tracks)} tracks in {cue_path.name}"
    )
    return result
