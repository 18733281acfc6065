"""Disk operation domain types."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EntryKind = Literal["file", "directory"]
FilterKind = Literal["files", "directories", "both"]
ErrorKind = Literal[
    "invalid_input_type",
    "path_not_found",
    "destination_invalid",
    "source_unreadable",
    "destination_exists",
    "write_failure",
    "mkdir_failure",
    "rmdir_failure",
    "remove_failure",
    "traversal_failure",
]


class Entry(BaseModel):
    """One item produced by a directory walk."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    kind: EntryKind

    @property
    def full_path(self) -> str:
        return self.path + self.name


class TraversalFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FilterKind = "both"
    current_only: bool = False

    def accepts(self, kind: EntryKind) -> bool:
        if self.kind == "files":
            return kind == "file"
        if self.kind == "directories":
            return kind == "directory"
        return True


class OpResult(BaseModel):
    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None


class HierarchyListing(BaseModel):
    success: bool
    entries: list[Entry] = Field(default_factory=list)
    error: str | None = None
    error_kind: ErrorKind | None = None


class EmptyDirResult(BaseModel):
    success: bool
    removed: list[str] = Field(default_factory=list)
    failures: list[str] = Field(default_factory=list)
    error: str | None = None
    error_kind: ErrorKind | None = None


class CopyResult(BaseModel):
    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None
    overwritten: bool = False
    bytes_copied: int = 0
