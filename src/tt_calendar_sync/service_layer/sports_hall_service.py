"""Look up sports halls locally, falling back to the club's remote listing."""

from __future__ import annotations

import logging
from typing import Protocol

from tt_calendar_sync.adapters.sports_hall_repository import FileSportsHallRepository
from tt_calendar_sync.domain.model import Club, SportsHall, SportsHallKey


logger = logging.getLogger(__name__)


class SportsHallRemoteService(Protocol):
    async def fetch_sports_halls(self, club: Club) -> list[SportsHall]: ...


class SportsHallService:
    """Resolve a sports hall, populating the local store on a miss."""

    def __init__(
        self,
        repository: FileSportsHallRepository,
        remote_service: SportsHallRemoteService,
        *,
        logger_instance: logging.Logger | None = None,
    ):
        self.repository = repository
        self.remote_service = remote_service
        self._logger = logger_instance or logger

    async def find_or_fetch(self, club: Club, sportshall_number: int) -> SportsHall | None:
        """Find a hall locally; on a miss fetch and store all halls of the club.

        Returns None if the hall is unknown or the remote fetch fails.
        """

        key = SportsHallKey(club=club.name, sportshall_number=sportshall_number)
        hall = await self.repository.find_by_key(key)
        if hall is not None:
            return hall

        try:
            fetched = await self.remote_service.fetch_sports_halls(club)
            for fetched_hall in fetched:
                await self.repository.save(fetched_hall)
        except Exception as err:
            self._logger.error("Failed to fetch sports halls for club %s: %s", club.name, err)
            return None

        self._logger.info("Stored %d sports halls for club %s", len(fetched), club.name)
        return await self.repository.find_by_key(key)
