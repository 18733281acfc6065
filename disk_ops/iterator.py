"""Depth-first directory iterator over an explicit stack of open directory handles.

Each level of the walk is a Frame: the sanitized directory path and the
``os.scandir`` handle reading it. The top of the stack is the directory
currently being read; every frame below it stays open until the walk climbs
back past it. Subdirectories are pushed as soon as they are seen, so a
directory's whole subtree is visited before its remaining siblings.

Handles are released by ``close()``, which runs on exhaustion, on a
traversal error, and on leaving a ``with`` block. Iterators abandoned
mid-walk should always be closed explicitly or used as context managers.
"""

from __future__ import annotations

import contextlib
import os
from dataclasses import dataclass
from typing import Protocol

from .constants import MSG_NOT_A_STRING, MSG_PATH_NOT_FOUND, SEP
from .errors import InvalidPathError, PathNotFoundError, TraversalError
from .logger import logger
from .paths import sanitize_path
from .types import Entry, EntryKind, FilterKind, TraversalFilter


class DirHandle(Protocol):
    """What a Frame needs from an open directory: the scandir iterator interface."""

    def __next__(self) -> os.DirEntry[str]: ...

    def close(self) -> None: ...


@dataclass
class Frame:
    path: str
    handle: DirHandle

    def close(self) -> None:
        self.handle.close()


def _open_frame(path: str) -> Frame:
    try:
        return Frame(path=path, handle=os.scandir(path))
    except OSError as err:
        raise TraversalError(f"Cannot open directory: {err}", {"path": path}) from err


class DirectoryIterator(contextlib.AbstractContextManager):
    """Stateful depth-first walk yielding Entry objects.

    ``next()`` returns the next entry or None once the walk is over; the
    object is also a regular Python iterator.
    """

    def __init__(self, path: str | os.PathLike[str], traversal_filter: TraversalFilter | None = None) -> None:
        self.filter = traversal_filter or TraversalFilter()
        self._stack: list[Frame] = []
        if not isinstance(path, (str, os.PathLike)):
            raise InvalidPathError(MSG_NOT_A_STRING, {"path": repr(path)})
        self.root = sanitize_path(os.fspath(path))

        # Same check as verify_path: the root must open as a directory.
        try:
            self._stack.append(_open_frame(self.root))
        except TraversalError as err:
            raise PathNotFoundError(MSG_PATH_NOT_FOUND, {"path": self.root}) from err

    @property
    def depth(self) -> int:
        """Number of directory handles currently open."""
        return len(self._stack)

    @property
    def closed(self) -> bool:
        return not self._stack

    def _advance(self) -> os.DirEntry[str] | None:
        frame = self._stack[-1]
        try:
            return next(frame.handle, None)
        except OSError as err:
            self.close()
            raise TraversalError(f"Cannot read directory: {err}", {"path": frame.path}) from err

    def _next_raw(self) -> os.DirEntry[str] | None:
        """Next entry from the top frame, climbing up through exhausted frames."""
        item = self._advance()
        if item is not None:
            return item
        if self.filter.current_only:
            self.close()
            return None
        while item is None:
            self._stack.pop().close()
            if not self._stack:
                return None
            item = self._advance()
        return item

    def next(self) -> Entry | None:
        while self._stack:
            item = self._next_raw()
            if item is None:
                return None

            containing = self._stack[-1].path
            try:
                is_dir = item.is_dir()
            except OSError as err:
                self.close()
                raise TraversalError(f"Cannot stat entry: {err}", {"path": containing + item.name}) from err

            kind: EntryKind = "directory" if is_dir else "file"
            if is_dir and not self.filter.current_only:
                # Schedule the subtree before filtering so it is walked even
                # when this directory itself is not reported.
                try:
                    self._stack.append(_open_frame(containing + item.name + SEP))
                except TraversalError:
                    self.close()
                    raise

            if self.filter.accepts(kind):
                return Entry(name=item.name, path=containing, kind=kind)
        return None

    def __iter__(self) -> DirectoryIterator:
        return self

    def __next__(self) -> Entry:
        entry = self.next()
        if entry is None:
            raise StopIteration
        return entry

    def close(self) -> None:
        """Close every open handle, innermost first. Safe to call twice."""
        if not self._stack:
            return
        while self._stack:
            self._stack.pop().close()
        logger.debug("directory iterator closed", root=self.root)

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        # No logging here: module globals may already be gone at shutdown.
        stack = getattr(self, "_stack", [])
        while stack:
            stack.pop().close()


def recurse_iter(
    path: str | os.PathLike[str],
    kind: FilterKind = "both",
    current_only: bool = False,
) -> DirectoryIterator:
    """Create a DirectoryIterator rooted at ``path``.

    ``kind`` selects "files", "directories" or "both"; ``current_only``
    lists the immediate children of ``path`` without descending.
    Raises PathNotFoundError when ``path`` is not an existing directory and
    InvalidPathError when it is not a path at all.
    """
    return DirectoryIterator(path, TraversalFilter(kind=kind, current_only=current_only))
