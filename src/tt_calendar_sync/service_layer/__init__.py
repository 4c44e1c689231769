"""Service layer - use cases orchestrating repositories and remote services."""

from .sports_hall_service import SportsHallRemoteService, SportsHallService


__all__ = [
    "SportsHallRemoteService",
    "SportsHallService",
]
