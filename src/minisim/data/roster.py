"""Roster sources: where a group's teams come from.

A TeamRepository supplies the initial teams (name, strength, logo). Two
implementations:

1. FileTeamRepository: a JSON or YAML file (the bundled default roster, or
   any file configured via ``MINISIM_TEAMS_PATH``)
2. InMemoryTeamRepository: a fixed list, for embedding and tests

Failures surface as TeamFetchError / AssetLoadingError so the standings
can log them and keep the roster they already have.
"""

from __future__ import annotations

import abc
import asyncio
import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from minisim.models.constants import DEFAULT_TEAM_LOGO, TEAM_LOGOS
from minisim.models.team import Team

logger = logging.getLogger(__name__)


class TeamFetchError(Exception):
    """Teams could not be fetched from a roster source."""


class AssetLoadingError(TeamFetchError):
    """A roster file could not be read or parsed."""


def parse_teams(data: Any) -> list[Team]:
    """Build Teams from decoded roster data.

    Lenient in the same places the roster format always was: anything but a
    list yields no teams, entries that aren't mappings or have no ``name``
    are skipped, and a missing ``strength`` means 0.  An entry with a
    malformed strength (negative, not a number) still raises
    ``ValidationError``.
    """
    if not isinstance(data, list):
        return []

    teams: list[Team] = []
    for entry in data:
        if not isinstance(entry, dict) or "name" not in entry:
            logger.debug("skipping roster entry without a name: %r", entry)
            continue
        teams.append(
            Team(
                name=str(entry["name"]),
                strength=entry.get("strength") or 0,
            )
        )
    return teams


def team_logo_ref(team_name: str) -> str:
    """Logo handle from the second word of the name ("Team A" → ic_team_a)."""
    words = team_name.split()
    key = words[1] if len(words) >= 2 else ""
    return TEAM_LOGOS.get(key, DEFAULT_TEAM_LOGO)


def map_team_logos(teams: Iterable[Team]) -> list[Team]:
    """Return copies of ``teams``; a team without a logo gets one from its name."""
    return [
        team.model_copy(
            update={"logo_ref": team.logo_ref or team_logo_ref(team.name)}, deep=True
        )
        for team in teams
    ]


class TeamRepository(abc.ABC):
    """Async source of the teams that make up a group."""

    @abc.abstractmethod
    async def fetch_teams(self) -> list[Team]:
        """Return the roster.

        Raises:
            TeamFetchError: If the source is unavailable or unreadable.
        """


class FileTeamRepository(TeamRepository):
    """Reads the roster from a ``.json``, ``.yaml`` or ``.yml`` file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    async def fetch_teams(self) -> list[Team]:
        try:
            raw = await asyncio.to_thread(self.path.read_bytes)
        except OSError as e:
            raise AssetLoadingError("Error reading teams data") from e

        try:
            teams = parse_teams(self._decode(raw.decode("utf-8")))
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError, ValidationError) as e:
            raise AssetLoadingError("Error parsing teams data") from e

        logger.info("loaded %d teams from %s", len(teams), self.path)
        return map_team_logos(teams)

    def _decode(self, text: str) -> Any:
        if self.path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(text)
        return json.loads(text)


class InMemoryTeamRepository(TeamRepository):
    """Serves a fixed roster, or fails with ``error`` if one is given."""

    def __init__(
        self,
        teams: Iterable[Team] = (),
        error: TeamFetchError | None = None,
    ) -> None:
        self.teams = list(teams)
        self.error = error

    async def fetch_teams(self) -> list[Team]:
        if self.error is not None:
            raise self.error
        return map_team_logos(self.teams)
