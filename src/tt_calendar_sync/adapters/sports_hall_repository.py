"""File-backed sports hall repository."""

from __future__ import annotations

import logging
from pathlib import Path

from tt_calendar_sync.adapters.cached_repository import CachedRepository
from tt_calendar_sync.adapters.codecs import JsonListCodec
from tt_calendar_sync.adapters.file_storage import FileStorage
from tt_calendar_sync.domain.model import SportsHall, SportsHallKey


DEFAULT_FILE_NAME = "sports_halls.json"


def sports_hall_key(hall: SportsHall) -> tuple[str, int]:
    return (hall.club, hall.sportshall_number)


class FileSportsHallRepository:
    """Sports halls stored as a flat JSON array keyed by (club, number)."""

    def __init__(
        self,
        file_path: Path | str,
        storage: FileStorage,
        *,
        logger_instance: logging.Logger | None = None,
    ):
        codec = JsonListCodec(SportsHall, sports_hall_key)
        self._repository: CachedRepository[SportsHall] = CachedRepository(
            file_path, storage, codec, logger_instance=logger_instance
        )

    @property
    def file_path(self) -> Path:
        return self._repository.file_path

    async def get_all(self) -> list[SportsHall]:
        return await self._repository.get_all()

    async def save(self, hall: SportsHall) -> None:
        await self._repository.save(hall)

    async def find_by_key(self, key: SportsHallKey) -> SportsHall | None:
        for hall in await self.get_all():
            if hall.key == key:
                return hall
        return None
