"""File-backed team lead repository, grouped by competition round on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from tt_calendar_sync.adapters.cached_repository import CachedRepository
from tt_calendar_sync.adapters.codecs import GroupedJsonCodec
from tt_calendar_sync.adapters.file_storage import FileStorage
from tt_calendar_sync.domain.model import TeamLead


DEFAULT_FILE_NAME = "team_leads.json"


def team_lead_key(lead: TeamLead) -> tuple[str, str, str, str]:
    return (lead.full_name, lead.team_name, lead.age_class, lead.runde)


class FileTeamLeadRepository:
    """Team leads stored as ``{"<runde>": [{"fullName": ..., ...}]}``."""

    def __init__(
        self,
        file_path: Path | str,
        storage: FileStorage,
        *,
        logger_instance: logging.Logger | None = None,
    ):
        codec = GroupedJsonCodec(TeamLead, team_lead_key, group_by="runde")
        self._repository: CachedRepository[TeamLead] = CachedRepository(
            file_path, storage, codec, logger_instance=logger_instance
        )

    @property
    def file_path(self) -> Path:
        return self._repository.file_path

    async def get_all(self) -> list[TeamLead]:
        return await self._repository.get_all()

    async def save(self, lead: TeamLead) -> None:
        await self._repository.save(lead)

    async def get_all_by_runde(self, runde: str) -> list[TeamLead]:
        """All team leads of one competition round, in file order."""
        return [lead for lead in await self.get_all() if lead.runde == runde]

    async def find_by_team_name_and_age_class(self, team_name: str, age_class: str, runde: str) -> TeamLead | None:
        for lead in await self.get_all_by_runde(runde):
            if lead.team_name == team_name and lead.age_class == age_class:
                return lead
        return None

    async def find_by_name(self, full_name: str, runde: str) -> TeamLead | None:
        for lead in await self.get_all_by_runde(runde):
            if lead.full_name == full_name:
                return lead
        return None
