"""Exceptions raised where an operation cannot hand back a result model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .types import ErrorKind


class DiskOpError(Exception):
    """Base error for disk operations. ``kind`` mirrors the result models' error_kind."""

    kind: ErrorKind = "traversal_failure"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class PathNotFoundError(DiskOpError):
    """The root of a traversal is not an existing directory."""

    kind: ErrorKind = "path_not_found"


class TraversalError(DiskOpError):
    """A directory could not be opened or read in the middle of a walk."""

    kind: ErrorKind = "traversal_failure"


class InvalidPathError(DiskOpError):
    """The path argument is neither a string nor an os.PathLike."""

    kind: ErrorKind = "invalid_input_type"
