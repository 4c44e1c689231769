"""Domain model - entities and value objects.

Plain Pydantic dataclasses with no infrastructure dependencies. Field names
are snake_case in Python and camelCase in the persisted JSON files.
"""

import re

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.dataclasses import dataclass


_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)

_ROMAN_SUFFIX = re.compile(r"\s+[IVX]+$")
_YOUTH_SUFFIX = re.compile(r"\s*\(wJ\d+\)$")


# Entities
@dataclass(config=_CAMEL_CONFIG)
class TeamLead:
    """Contact person responsible for a team in one competition round.

    Identified by (full_name, team_name, age_class, runde).
    """

    full_name: str
    team_name: str
    age_class: str = ""
    # Competition round, e.g. "VR" (Vorrunde) or "RR" (Rückrunde)
    runde: str = ""
    email: str = ""

    @field_validator("age_class", "runde", "email", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value


@dataclass(config=_CAMEL_CONFIG)
class SportsHall:
    """A venue of a club, identified by (club, sportshall_number)."""

    club: str
    sportshall_number: int = Field(ge=0)
    postal_code: str = ""
    city: str = ""
    street: str = ""
    house_number: str = ""
    name: str = ""

    @property
    def key(self) -> "SportsHallKey":
        return SportsHallKey(club=self.club, sportshall_number=self.sportshall_number)


# Value Objects (immutable)
@dataclass(frozen=True)
class SportsHallKey:
    club: str
    sportshall_number: int


@dataclass(frozen=True)
class Club:
    """A club and the page listing its sports halls."""

    name: str = Field(min_length=1)
    url: str = ""


@dataclass(frozen=True)
class Team:
    name: str = Field(min_length=1)
    url: str = ""

    @property
    def club_name(self) -> str:
        """Club name without trailing roman numerals or a ``(wJnn)`` suffix."""
        name = _YOUTH_SUFFIX.sub("", self.name).strip()
        return _ROMAN_SUFFIX.sub("", name).strip()

    def to_club(self) -> Club:
        return Club(name=self.club_name, url=self.url)
