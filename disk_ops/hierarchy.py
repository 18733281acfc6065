"""Materialized listing of a directory hierarchy."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .constants import MSG_NOT_A_STRING
from .errors import DiskOpError
from .iterator import recurse_iter
from .types import HierarchyListing

if TYPE_CHECKING:
    from collections.abc import Callable

    from .types import EntryKind, FilterKind

    EntryPredicate = Callable[[str, str, EntryKind], bool]


def list_local_hier(
    path: str | os.PathLike[str],
    kind: FilterKind = "both",
    current_only: bool = False,
    predicate: EntryPredicate | None = None,
) -> HierarchyListing:
    """Walk ``path`` depth-first and collect the entries in walk order.

    ``predicate(name, path, kind)`` decides which entries are kept. Either
    the whole walk succeeds or the listing carries the error and no entries.
    """
    if not isinstance(path, (str, os.PathLike)):
        return HierarchyListing(success=False, error=MSG_NOT_A_STRING, error_kind="invalid_input_type")
    try:
        with recurse_iter(path, kind, current_only) as walk:
            entries = [e for e in walk if predicate is None or predicate(e.name, e.path, e.kind)]
    except DiskOpError as err:
        return HierarchyListing(success=False, error=str(err), error_kind=err.kind)

    return HierarchyListing(success=True, entries=entries)
