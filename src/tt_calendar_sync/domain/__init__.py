"""Domain layer - entities persisted by the file-backed repositories."""

from tt_calendar_sync.domain.model import Club, SportsHall, SportsHallKey, Team, TeamLead


__all__ = [
    "Club",
    "SportsHall",
    "SportsHallKey",
    "Team",
    "TeamLead",
]
