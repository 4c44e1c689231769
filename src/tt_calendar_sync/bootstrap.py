"""Wire settings, storage and repositories together."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from tt_calendar_sync.adapters.file_storage import FileStorage, LocalFileStorage
from tt_calendar_sync.adapters.sports_hall_repository import FileSportsHallRepository
from tt_calendar_sync.adapters.team_lead_repository import FileTeamLeadRepository
from tt_calendar_sync.config import Settings
from tt_calendar_sync.observability.logging import configure_logging


logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    storage: FileStorage
    team_leads: FileTeamLeadRepository
    sports_halls: FileSportsHallRepository


def build_repositories(settings: Settings, storage: FileStorage | None = None) -> Repositories:
    """Create one repository instance per backing file.

    Each file must be owned by a single repository instance, so call this once
    per process and share the result.
    """

    active_storage = storage or LocalFileStorage(settings.resolved_data_dir(), encoding=settings.file_encoding)
    repositories = Repositories(
        storage=active_storage,
        team_leads=FileTeamLeadRepository(settings.team_leads_path(), active_storage),
        sports_halls=FileSportsHallRepository(settings.sports_halls_path(), active_storage),
    )
    logger.debug("Repositories ready in %s", settings.resolved_data_dir())
    return repositories


def bootstrap(settings: Settings | None = None) -> Repositories:
    """Load settings, configure logging and build the repositories."""

    active_settings = settings or Settings()
    configure_logging(active_settings.log_level, active_settings.log_json)
    return build_repositories(active_settings)
