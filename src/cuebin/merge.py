from __future__ import annotations

import logging
import pathlib
from collections.abc import Iterable
from os import PathLike

from cuebin.consts import CHUNK_SIZE
from cuebin.cue.models import DiscImage
from cuebin.errors import MergeIOError, SourceNotFound, TargetAlreadyExists

__all__ = ["merge_files", "merge_disc_image"]

default_logger = logging.getLogger("cuebin")


def merge_files(
    target: PathLike | str,
    sources: Iterable[PathLike | str],
    chunk_size: int = CHUNK_SIZE,
    logger: logging.Logger = default_logger,
) -> int:
    """Concatenate sources into a new target file, in order.

    The target must not exist yet. On failure whatever was already written is
    left at the target path; removing it is up to the caller. Returns the
    number of bytes written.
    """
    target_path = pathlib.Path(target)
    try:
        outfile = target_path.open("xb")
    except FileExistsError as e:
        logger.error(f"Error: Target merged bin path already exists: {target_path}")
        raise TargetAlreadyExists(target_path) from e
    except OSError as e:
        logger.error(f"Error: Could not create {target_path}")
        raise MergeIOError(target_path, e.strerror or repr(e)) from e
    written = 0
    with outfile:
        for source in sources:
            source_path = pathlib.Path(source)
            logger.info(f"Appending {source_path.name} to {target_path.name}")
            try:
                infile = source_path.open("rb")
            except FileNotFoundError as e:
                logger.error(f"Error: Source bin file not found: {source_path}")
                raise SourceNotFound(source_path) from e
            except OSError as e:
                logger.error(f"Error: Could not open {source_path}")
                raise MergeIOError(source_path, e.strerror or repr(e)) from e
            with infile:
                try:
                    while chunk := infile.read(chunk_size):
                        _ = outfile.write(chunk)
                        written += len(chunk)
                except OSError as e:
                    logger.error(
                        f"Error: Failed copying {source_path} into {target_path}"
                    )
                    raise MergeIOError(source_path, e.strerror or repr(e)) from e
    logger.info(f"Wrote {written} bytes to {target_path}")
    return written


def merge_disc_image(
    disc: DiscImage,
    target: PathLike | str,
    chunk_size: int = CHUNK_SIZE,
    logger: logging.Logger = default_logger,
) -> int:
    # Missing bins are known from the parse, so refuse before creating the target
    if disc.missing_files:
        missing_path = disc.missing_files[0].path
        logger.error(f"Error: Source bin file not found: {missing_path}")
        raise SourceNotFound(missing_path)
    return merge_files(target, disc.bin_paths, chunk_size, logger)
