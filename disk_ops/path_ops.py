"""Existence checks, mkdir -p and recursive directory emptying.

``create_path`` and ``empty_dir`` are multi-step and not transactional: a
failure part way through leaves whatever was already created or removed.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from .constants import MSG_NOT_A_STRING, MSG_PATH_NOT_FOUND, SEP
from .hierarchy import list_local_hier
from .logger import logger
from .paths import sanitize_path
from .types import EmptyDirResult, OpResult

if TYPE_CHECKING:
    from .types import ErrorKind


def _is_path(path: Any) -> bool:
    return isinstance(path, (str, os.PathLike))


def _invalid_input() -> OpResult:
    return OpResult(success=False, error=MSG_NOT_A_STRING, error_kind="invalid_input_type")


def verify_path(path: Any) -> OpResult:
    """Check that ``path`` can be opened and listed as a directory.

    A plain file does not verify; use path_exists for a general check.
    """
    if not _is_path(path):
        return _invalid_input()
    try:
        with os.scandir(path) as it:
            next(it, None)
    except OSError:
        return OpResult(success=False, error=MSG_PATH_NOT_FOUND, error_kind="path_not_found")
    return OpResult(success=True)


def path_exists(path: Any) -> OpResult:
    """Check that ``path`` exists, whether file or directory."""
    if not _is_path(path):
        return _invalid_input()
    if os.path.exists(path):
        return OpResult(success=True)
    return OpResult(success=False, error=MSG_PATH_NOT_FOUND, error_kind="path_not_found")


def file_exists(path: Any) -> OpResult:
    """Check that ``path`` is a file that can be opened for reading."""
    if not _is_path(path):
        return _invalid_input()
    try:
        with open(path, "rb"):
            pass
    except OSError as err:
        return OpResult(success=False, error=str(err), error_kind="path_not_found")
    return OpResult(success=True)


def file_creatable(path: Any) -> OpResult:
    """Check that a file can be written at ``path``.

    An existing file is opened for append so its content is untouched; a
    file created for the check is removed again.
    """
    if not _is_path(path):
        return _invalid_input()
    existed = os.path.lexists(path)
    try:
        with open(path, "ab"):
            pass
    except OSError as err:
        return OpResult(success=False, error=str(err), error_kind="write_failure")
    if not existed:
        try:
            os.remove(path)
        except OSError as err:
            return OpResult(success=False, error=str(err), error_kind="remove_failure")
    return OpResult(success=True)


def create_path(path: Any) -> OpResult:
    """Create ``path`` and any missing parent directories (mkdir -p).

    Stops at the first directory that cannot be created; levels created
    before that are left in place.
    """
    if not _is_path(path):
        return _invalid_input()
    if verify_path(path).success:
        return OpResult(success=True)

    prefix = ""
    # The trailing separator leaves an empty last component.
    for part in sanitize_path(os.fspath(path)).split(SEP)[:-1]:
        prefix += part + SEP
        if verify_path(prefix).success:
            continue
        try:
            os.mkdir(prefix)
        except OSError as err:
            logger.debug("mkdir failed", path=prefix, error=str(err))
            return OpResult(success=False, error=str(err), error_kind="mkdir_failure")
        logger.debug("created directory", path=prefix)

    return OpResult(success=True)


def empty_dir(path: Any, stop_on_error: bool = False) -> EmptyDirResult:
    """Remove everything below ``path``, leaving ``path`` itself in place.

    Entries are deleted in reverse walk order, so a directory's contents go
    before the directory. By default every entry is attempted and all
    failures are reported; ``stop_on_error`` returns at the first failure.

    Symlinks to directories are followed: the contents of the link target
    are deleted even when it lives outside ``path``, and removing the link
    itself is then reported as an rmdir failure.
    """
    if not _is_path(path):
        return EmptyDirResult(success=False, error=MSG_NOT_A_STRING, error_kind="invalid_input_type")

    listing = list_local_hier(path)
    if not listing.success:
        return EmptyDirResult(success=False, error=listing.error, error_kind=listing.error_kind)

    removed: list[str] = []
    failures: list[str] = []
    first_kind: ErrorKind | None = None

    for entry in reversed(listing.entries):
        target = entry.full_path
        kind: ErrorKind = "rmdir_failure" if entry.kind == "directory" else "remove_failure"
        try:
            if entry.kind == "directory":
                os.rmdir(target)
            else:
                os.remove(target)
        except OSError as err:
            logger.warning("Failed to remove entry", path=target, kind=entry.kind, error=str(err))
            failures.append(f"{target}: {err.strerror or err}")
            first_kind = first_kind or kind
            if stop_on_error:
                break
            continue
        removed.append(target)

    if failures:
        return EmptyDirResult(
            success=False,
            removed=removed,
            failures=failures,
            error=failures[0],
            error_kind=first_kind,
        )
    logger.debug("emptied directory", path=os.fspath(path), removed=len(removed))
    return EmptyDirResult(success=True, removed=removed)
