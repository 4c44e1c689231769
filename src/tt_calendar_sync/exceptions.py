"""Errors raised by the repository layer."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class RepositoryError(RuntimeError):
    """Base class for failures of a file-backed repository."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class RepositoryReadError(RepositoryError):
    """Loading the backing file failed; the cache stays empty and the load can be retried."""


class RepositoryWriteError(RepositoryError):
    """Persisting a single entity failed. Other queued saves are unaffected."""

    def __init__(self, message: str, *, path: Path, entity: Any) -> None:
        super().__init__(message, path=path)
        self.entity = entity
