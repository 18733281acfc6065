"""Hierarchy-aware filesystem helpers: traversal, listing, mkdir -p, emptying and copying."""

from __future__ import annotations

from .constants import DEFAULT_CHUNK_SIZE, SEP
from .copier import copy_file
from .errors import DiskOpError, InvalidPathError, PathNotFoundError, TraversalError
from .hierarchy import list_local_hier
from .iterator import DirectoryIterator, Frame, recurse_iter
from .logger import setup_logging
from .path_ops import (
    create_path,
    empty_dir,
    file_creatable,
    file_exists,
    path_exists,
    verify_path,
)
from .paths import (
    convert_to_absolute_path,
    convert_to_relative_path,
    get_file_ext,
    get_file_name,
    sanitize_path,
)
from .types import (
    CopyResult,
    EmptyDirResult,
    Entry,
    EntryKind,
    ErrorKind,
    FilterKind,
    HierarchyListing,
    OpResult,
    TraversalFilter,
)

__all__ = [
    # constants
    "DEFAULT_CHUNK_SIZE",
    "SEP",
    # copier
    "copy_file",
    # errors
    "DiskOpError",
    "InvalidPathError",
    "PathNotFoundError",
    "TraversalError",
    # hierarchy
    "list_local_hier",
    # iterator
    "DirectoryIterator",
    "Frame",
    "recurse_iter",
    # logger
    "setup_logging",
    # path_ops
    "create_path",
    "empty_dir",
    "file_creatable",
    "file_exists",
    "path_exists",
    "verify_path",
    # paths
    "convert_to_absolute_path",
    "convert_to_relative_path",
    "get_file_ext",
    "get_file_name",
    "sanitize_path",
    # types
    "CopyResult",
    "EmptyDirResult",
    "Entry",
    "EntryKind",
    "ErrorKind",
    "FilterKind",
    "HierarchyListing",
    "OpResult",
    "TraversalFilter",
]
