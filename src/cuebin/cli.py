#!/bin/env python
from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from collections.abc import Sequence
from typing import cast

from cuebin.consts import VERSION
from cuebin.cue.models import ParseResult
from cuebin.cue.parse import parse_cuefile
from cuebin.errors import CueBinError, MergeError, TargetAlreadyExists
from cuebin.merge import merge_disc_image
from cuebin.models import CommandParserArgs
from cuebin.report import describe_disc

logger = logging.getLogger("cuebin")


def load_sheet(cuesheet: str) -> ParseResult:
    cue_path = pathlib.Path(cuesheet).expanduser().resolve()
    try:
        return parse_cuefile(cue_path)
    except CueBinError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


def inspect_sheet(args: CommandParserArgs) -> None:
    result = load_sheet(args.cuesheet)
    for line in describe_disc(result):
        print(line)


def merge_sheet(args: CommandParserArgs) -> None:
    cue_path = pathlib.Path(args.cuesheet).expanduser().resolve()
    result = load_sheet(args.cuesheet)
    disc = result.disc
    if not disc.files:
        logger.error(f"Error: {cue_path.name} does not reference any bin files")
        sys.exit(1)
    if disc.missing_files:
        for bin_file in disc.missing_files:
            logger.error(f"Error: Bin file not found or not readable: {bin_file.path}")
        sys.exit(1)
    if args.output:
        output_file = pathlib.Path(args.output).expanduser().resolve()
    else:
        output_file = cue_path.with_suffix(".bin")
        logger.warning(f"{cue_path.name} will be merged into {output_file}")
    if output_file in disc.bin_paths:
        logger.error(f"Error: Output {output_file} is one of the files being merged")
        sys.exit(1)
    try:
        written = merge_disc_image(disc, output_file)
    except TargetAlreadyExists as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except MergeError as e:
        logger.error(f"Failed to merge {cue_path.name}: {e}")
        if output_file.exists():
            logger.info("Deleting failed output")
            output_file.unlink()
        sys.exit(1)
    logger.warning(
        f"Merged {len(disc.files)} files into {output_file.name} ({written} bytes)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cuebin",
        description="Inspect CUE sheets and merge their BIN files into one image",
    )
    _ = parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    logging_opts = parser.add_mutually_exclusive_group()
    _ = logging_opts.add_argument(
        "-q", "--quiet", help="Only log errors", action="store_true"
    )
    _ = logging_opts.add_argument(
        "-V",
        "--verbose",
        help="Log more information about parsing and merging",
        action="store_true",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    inspect_parser = commands.add_parser(
        "inspect", help="Print the files, tracks and indexes of a cue sheet"
    )
    _ = inspect_parser.add_argument("cuesheet", help="Cue sheet to read")
    merge_parser = commands.add_parser(
        "merge", help="Concatenate the bin files of a cue sheet into one file"
    )
    _ = merge_parser.add_argument("cuesheet", help="Cue sheet to read")
    _ = merge_parser.add_argument(
        "-o",
        "--output",
        help="Merged bin file to create. Defaults to the cue sheet name with a .bin extension. Must not exist.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = cast(CommandParserArgs, parser.parse_args(argv))
    logging.getLogger().setLevel(logging.WARNING)
    if args.quiet:
        logging.getLogger().setLevel(logging.ERROR)
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)
    if args.command == "inspect":
        inspect_sheet(args)
    else:
        merge_sheet(args)


if __name__ == "__main__":
    main()
