from __future__ import annotations

import shutil
from os import PathLike
from pathlib import Path
from typing import Final, override

import aiofiles
from loguru import logger

from .file_storage import FileStorage, SavedFile, ScopeCreationError, Source


class LocalFileStorage(FileStorage):
    """
    Local filesystem implementation of FileStorage.

    Layout:
        base_dir/
            <scope_id>/
                <relative_path>
    """

    _CHUNK_SIZE: Final[int] = 1024 * 1024  # 1 MB

    def __init__(self, base_dir: str | PathLike[str]):
        self._base_dir: Path = Path(base_dir).expanduser().resolve()
        self._base_dir.mkdir(parents=True, exist_ok=True)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _scope_dir(self, scope_id: str) -> Path:
        return self._base_dir / scope_id

    def _safe_path(self, scope_id: str, relative_path: str | None = None) -> Path:
        """Resolve a scope-relative path, rejecting anything outside the scope."""
        base = self._scope_dir(scope_id).resolve()
        if self._base_dir not in base.parents:
            raise ValueError(f"Invalid scope id: {scope_id!r}")

        resolved = base if relative_path is None else (base / relative_path).resolve()
        if resolved != base and base not in resolved.parents:
            raise ValueError("Invalid relative path (path traversal detected)")

        return resolved

    @override
    def create_scope(self, scope_id: str) -> None:
        try:
            self._safe_path(scope_id).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ScopeCreationError(scope_id) from exc

    @override
    def remove_scope(self, scope_id: str) -> bool:
        try:
            shutil.rmtree(self._safe_path(scope_id))
            return True
        except OSError as exc:
            logger.warning(f"Could not remove storage scope {scope_id}: {exc}")
            return False

    @override
    async def save(self, scope_id: str, relative_path: str, file: Source) -> SavedFile:
        dst = self.allocate_path(scope_id, relative_path)
        size = 0

        if isinstance(file, (bytes, bytearray)):
            async with aiofiles.open(dst, "wb") as f:
                _ = await f.write(file)
            size = len(file)

        elif isinstance(file, (str, PathLike)):
            src = Path(file).expanduser().resolve()
            if not src.is_file():
                raise FileNotFoundError(src)
            _ = shutil.copyfile(src, dst)
            size = dst.stat().st_size

        else:
            async with aiofiles.open(dst, "wb") as f:
                while True:
                    chunk = await file.read(self._CHUNK_SIZE)
                    if not chunk:
                        break
                    _ = await f.write(chunk)
                    size += len(chunk)

        return SavedFile(relative_path=relative_path, size=size)

    @override
    def allocate_path(self, scope_id: str, relative_path: str) -> Path:
        self.create_scope(scope_id)
        path = self._safe_path(scope_id, relative_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @override
    def resolve_path(self, scope_id: str, relative_path: str | None = None) -> Path:
        return self._safe_path(scope_id, relative_path)
