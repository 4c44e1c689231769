"""Concurrency-safe, cached repository backed by a single file."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
import logging
from pathlib import Path
from typing import Generic, TypeVar

from tt_calendar_sync.adapters.codecs import RepositoryCodec
from tt_calendar_sync.adapters.file_storage import FileStorage
from tt_calendar_sync.exceptions import RepositoryReadError, RepositoryWriteError
from tt_calendar_sync.observability.context import bind_log_context, generate_operation_id


logger = logging.getLogger(__name__)

T = TypeVar("T")


class CachedRepository(Generic[T]):
    """Cached repository for any entity type stored as one file.

    - Reads are cached. Concurrent callers hitting a cold cache share a single
      physical read of the file.
    - Saves are serialized through a FIFO lock. Each one runs a full
      read-modify-write against the freshest snapshot.
    - The snapshot is only replaced after the file was written, so it always
      reflects the last durable state.

    Returned lists are shared between callers and must be treated as read-only.
    The backing file is assumed to be owned by exactly one repository instance.
    """

    def __init__(
        self,
        file_path: Path | str,
        storage: FileStorage,
        codec: RepositoryCodec[T],
        *,
        logger_instance: logging.Logger | None = None,
    ):
        self.file_path = Path(file_path).expanduser().resolve(strict=False)
        self.storage = storage
        self.codec = codec
        self._logger = logger_instance or logger
        self._snapshot: list[T] | None = None
        self._pending_load: asyncio.Future[list[T]] | None = None
        self._write_lock = asyncio.Lock()

    async def get_all(self) -> list[T]:
        """Return all entities, loading the backing file on first access."""

        if self._snapshot is not None:
            return self._snapshot
        if self._pending_load is not None:
            # Shield so a cancelled waiter does not cancel the shared load
            return await asyncio.shield(self._pending_load)

        pending: asyncio.Future[list[T]] = asyncio.get_running_loop().create_future()
        self._pending_load = pending
        try:
            with bind_log_context(repository=self.file_path.name):
                entities = await self._load()
        except BaseException as exc:
            self._pending_load = None
            if isinstance(exc, Exception):
                pending.set_exception(exc)
            else:
                pending.set_exception(
                    RepositoryReadError(f"Loading {self.file_path} was interrupted", path=self.file_path)
                )
            # Mark retrieved; there may be no other waiter
            pending.exception()
            raise

        self._snapshot = entities
        self._pending_load = None
        pending.set_result(entities)
        return entities

    async def save(self, entity: T) -> None:
        """Insert ``entity`` or replace the stored entity with the same primary key.

        Returns once this particular write has been applied. On failure the
        error is logged and raised as :class:`RepositoryWriteError` to this
        caller only; saves queued behind it still run.
        """

        async with self._write_lock:
            with bind_log_context(repository=self.file_path.name, operation_id=generate_operation_id()):
                try:
                    current = await self.get_all()
                    updated = self._upsert(current, entity)
                    await self.storage.write(self.file_path, self.codec.serialize(updated))
                except Exception as err:
                    self._logger.error(
                        "Failed to save entity to %s. Entity: %r. Error: %s: %s",
                        self.file_path,
                        entity,
                        type(err).__name__,
                        err,
                    )
                    raise RepositoryWriteError(
                        f"Failed to save entity to {self.file_path}", path=self.file_path, entity=entity
                    ) from err

                self._snapshot = updated
                self._logger.debug("Saved entity to %s (%d total)", self.file_path, len(updated))

    async def _load(self) -> list[T]:
        try:
            content = await self.storage.read(self.file_path)
        except FileNotFoundError:
            self._logger.debug("No file at %s yet, starting empty", self.file_path)
            return []
        except Exception as err:
            self._logger.error("Error reading file %s: %s", self.file_path, err)
            raise RepositoryReadError(f"Failed to read {self.file_path}", path=self.file_path) from err

        try:
            entities = self.codec.deserialize(content)
        except Exception as err:
            self._logger.error("Error parsing file %s: %s", self.file_path, err)
            raise RepositoryReadError(f"Failed to parse {self.file_path}", path=self.file_path) from err

        self._logger.debug("Loaded %d entities from %s", len(entities), self.file_path)
        return entities

    def _upsert(self, entities: Sequence[T], entity: T) -> list[T]:
        updated = list(entities)
        for idx, existing in enumerate(updated):
            if self.codec.is_same_primary_key(existing, entity):
                updated[idx] = entity
                break
        else:
            updated.append(entity)
        # Keep the snapshot in the order the file is written in
        return self.codec.arrange(updated)
