"""
FileStorage Protocol - scratch storage for uploaded sources and processed outputs.

Files live in short-lived *scopes* (one per request). Callers address
files by scope id and a path relative to the scope; the storage decides
where they land on disk.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class FileStorageError(Exception):
    """Base class for storage-related errors."""


class ScopeCreationError(FileStorageError):
    def __init__(self, scope_id: str):
        self.scope_id: str = scope_id
        super().__init__(f"Failed to create storage scope '{scope_id}'")


class SavedFile(BaseModel):
    """Metadata of a file written into a scope."""

    relative_path: str = Field(..., description="Path of the file within its scope")
    size: int = Field(..., ge=0, description="File size in bytes")

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")


class AsyncReadable(Protocol):
    """Minimal async file-like interface (e.g. FastAPI's UploadFile)."""

    async def read(self, size: int = -1, /) -> bytes: ...


Source = AsyncReadable | bytes | str | PathLike[str]


@runtime_checkable
class FileStorage(Protocol):
    """Protocol for scope-based file storage."""

    def create_scope(self, scope_id: str) -> None:
        """Create the directory backing a scope (no-op if it exists)."""
        ...

    def remove_scope(self, scope_id: str) -> bool:
        """Remove a scope and everything in it. Returns False on failure."""
        ...

    async def save(self, scope_id: str, relative_path: str, file: Source) -> SavedFile:
        """
        Write `file` into the scope.

        `file` may be an async readable, raw bytes, or the path of an
        existing file to copy.
        """
        ...

    def allocate_path(self, scope_id: str, relative_path: str) -> Path:
        """Reserve a filesystem path for a library (Pillow) to write to."""
        ...

    def resolve_path(self, scope_id: str, relative_path: str | None = None) -> Path:
        """Absolute path of a file (or of the scope itself when relative_path is None)."""
        ...
