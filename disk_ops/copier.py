"""Chunked file copy with an overwrite policy."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .config import get_chunk_size
from .constants import (
    MSG_DEST_INVALID,
    MSG_FILE_EXISTS,
    MSG_READ_FAILED,
    MSG_SOURCE_UNREADABLE,
    MSG_WRITE_FAILED,
)
from .logger import logger
from .path_ops import file_exists, verify_path
from .paths import sanitize_path
from .types import CopyResult

if TYPE_CHECKING:
    from typing import BinaryIO


class _SourceReadError(Exception):
    def __init__(self, cause: OSError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def _pump(src: BinaryIO, dst: BinaryIO, chunk_size: int) -> int:
    copied = 0
    while True:
        try:
            chunk = src.read(chunk_size)
        except OSError as err:
            raise _SourceReadError(err) from err
        if not chunk:
            return copied
        dst.write(chunk)
        copied += len(chunk)


def copy_file(
    source: str | os.PathLike[str],
    dest_path: str | os.PathLike[str],
    file_name: str,
    chunk_size: int | None = None,
    overwrite: bool = False,
) -> CopyResult:
    """Copy ``source`` to ``dest_path``/``file_name`` in ``chunk_size`` pieces.

    ``dest_path`` must be an existing directory. An existing destination
    file is only replaced when ``overwrite`` is set. The first I/O error
    aborts the copy and may leave a partially written destination.
    """
    if chunk_size is None:
        chunk_size = get_chunk_size()
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    if not verify_path(dest_path).success:
        return CopyResult(success=False, error=MSG_DEST_INVALID, error_kind="destination_invalid")
    if not file_exists(source).success:
        return CopyResult(success=False, error=MSG_SOURCE_UNREADABLE, error_kind="source_unreadable")

    target = sanitize_path(os.fspath(dest_path)) + file_name
    overwritten = False
    if file_exists(target).success:
        if not overwrite:
            return CopyResult(success=False, error=MSG_FILE_EXISTS, error_kind="destination_exists")
        if os.path.samefile(source, target):
            return CopyResult(
                success=False,
                error=f"{MSG_FILE_EXISTS}: source and destination are the same file",
                error_kind="destination_exists",
            )
        overwritten = True

    try:
        src = open(source, "rb")
    except OSError:
        return CopyResult(success=False, error=MSG_SOURCE_UNREADABLE, error_kind="source_unreadable")
    with src:
        try:
            # Closing flushes, so errors from the final buffered write land here too.
            with open(target, "w+b") as dst:
                copied = _pump(src, dst, chunk_size)
        except _SourceReadError as err:
            return CopyResult(success=False, error=f"{MSG_READ_FAILED}: {err.cause}", error_kind="source_unreadable")
        except OSError as err:
            logger.warning("Copy aborted", source=os.fspath(source), target=target, error=str(err))
            return CopyResult(success=False, error=f"{MSG_WRITE_FAILED}: {err}", error_kind="write_failure")

    logger.debug("copied file", source=os.fspath(source), target=target, size=copied, overwritten=overwritten)
    return CopyResult(success=True, overwritten=overwritten, bytes_copied=copied)
