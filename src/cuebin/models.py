import argparse


class CommandParserArgs(argparse.Namespace):
    command: str  # pyright: ignore[reportUninitializedInstanceVariable]
    cuesheet: str  # pyright: ignore[reportUninitializedInstanceVariable]
    output: str | None  # pyright: ignore[reportUninitializedInstanceVariable]
    quiet: bool  # pyright: ignore[reportUninitializedInstanceVariable]
    verbose: bool  # pyright: ignore[reportUninitializedInstanceVariable]
