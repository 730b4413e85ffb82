"""Group standings: the tournament state of one group stage.

GroupStandings owns the roster, the matches played since the last reset,
the round-robin schedule (through its MatchGenerator) and the positions
teams held at the last ranking snapshot.

Not thread-safe: callers serialize access to an instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from minisim.core.scheduler import MatchGenerator, total_matches
from minisim.core.simulation import MatchSimulator, simulate_match
from minisim.core.stats import TeamStatsUpdater
from minisim.data.roster import TeamFetchError, TeamRepository
from minisim.models.match import Match
from minisim.models.team import Team

logger = logging.getLogger(__name__)


@dataclass
class TeamFetchResult:
    """Outcome of initialize_teams(): the new roster, or why it wasn't loaded."""

    teams: list[Team] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def rank_teams(teams: list[Team]) -> list[Team]:
    """Sort by points, goal difference, goals for (all desc), goals against (asc).

    Stable: teams equal on every key keep their roster order.
    """
    return sorted(
        teams,
        key=lambda t: (
            -t.stats.points,
            -t.stats.goal_difference,
            -t.stats.goals_for,
            t.stats.goals_against,
        ),
    )


class GroupStandings:
    """Standings of a round-robin group and the commands that advance it."""

    def __init__(
        self,
        repository: TeamRepository,
        generator: MatchGenerator | None = None,
        simulator: MatchSimulator | None = None,
        updater: TeamStatsUpdater | None = None,
    ) -> None:
        self.repository = repository
        self.generator = generator or MatchGenerator()
        self.simulator = simulator or MatchSimulator()
        self.updater = updater or TeamStatsUpdater()

        self._teams: list[Team] = []
        self._matches: list[Match] = []
        self._previous_positions: dict[str, int] = {}

    # --- Roster ---

    async def initialize_teams(self) -> TeamFetchResult:
        """Load the roster from the repository.

        A failing source is logged and reported in the result; the roster
        already held (empty if never loaded) stays in place.
        """
        try:
            teams = await self.repository.fetch_teams()
        except TeamFetchError as e:
            logger.warning("team_fetch_failed: %s", e, exc_info=True)
            return TeamFetchResult(error=str(e))

        self.set_teams(teams)
        logger.info("roster initialized with %d teams", len(self._teams))
        return TeamFetchResult(teams=list(self._teams))

    def set_teams(self, teams: list[Team]) -> None:
        """Admit ``teams`` directly and start from a clean slate."""
        self._teams = list(teams)
        self.reset_matches()

    @property
    def team_count(self) -> int:
        return len(self._teams)

    # --- Read side ---

    def get_ranked_teams(self) -> list[Team]:
        """Roster in standings order. Does not touch ``position``."""
        return rank_teams(self._teams)

    def get_matches(self) -> list[Match]:
        """Matches generated since the last reset, in the order they were added."""
        return self._matches

    def get_previous_positions(self) -> dict[str, int]:
        return self._previous_positions

    # --- Commands ---

    def simulate_all_matches(self) -> None:
        """Play every pairing once, from zeroed stats.

        The round-robin schedule used by simulate_next_round_matches() is
        left where it was.
        """
        self._clear_results()
        self._matches.extend(self.generator.generate_matches(self._teams))
        for match in self._matches:
            simulate_match(match, self.simulator, self.updater)
        logger.info("simulated all %d matches", len(self._matches))

    def simulate_next_round_matches(self) -> None:
        """Play the round due next, then re-rank the teams.

        When the previous cycle is finished everything is reset first, so
        the group starts over from round 0.
        """
        if self.generator.schedule.is_cycle_complete(len(self._teams)):
            logger.info(
                "all %d matches played, starting a new cycle",
                total_matches(self.team_count),
            )
            self.reset_matches()

        round_matches = self.generator.generate_next_round(self._teams)
        self._matches.extend(round_matches)
        for match in round_matches:
            simulate_match(match, self.simulator, self.updater)

        self._update_positions()

    def reset_matches(self) -> None:
        """Back to the start: no matches, no positions, round 0, zeroed stats."""
        self.generator.reset()
        self._clear_results()

    # --- Internals ---

    def _clear_results(self) -> None:
        self._matches = []
        self._previous_positions = {}
        for team in self._teams:
            team.reset_stats()

    def _update_positions(self) -> None:
        for team in self._teams:
            if team.stats.position:
                self._previous_positions[team.name] = team.stats.position
        for position, team in enumerate(self.get_ranked_teams(), start=1):
            team.stats.position = position
