"""Adapters layer - storage backends and file-backed repositories."""

from .cached_repository import CachedRepository
from .codecs import GroupedJsonCodec, JsonListCodec, RepositoryCodec
from .file_storage import FileStorage, InMemoryFileStorage, LocalFileStorage
from .sports_hall_repository import FileSportsHallRepository
from .team_lead_repository import FileTeamLeadRepository


__all__ = [
    "CachedRepository",
    "FileSportsHallRepository",
    "FileStorage",
    "FileTeamLeadRepository",
    "GroupedJsonCodec",
    "InMemoryFileStorage",
    "JsonListCodec",
    "LocalFileStorage",
    "RepositoryCodec",
]
