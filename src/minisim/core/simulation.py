"""Match score simulation.

simulate_result(home, away) → (home_score, away_score)
Each side scores uniformly between 0 and its strength, inclusive.
No side effects; simulate_match() is the pipeline that writes the score into
a Match and hands it to the stats updater.
"""

from __future__ import annotations

import logging
import random

from minisim.core.stats import TeamStatsUpdater
from minisim.models.match import Match
from minisim.models.team import Team

logger = logging.getLogger(__name__)


class MatchSimulator:
    """Random score generator bounded by team strength."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def simulate_result(self, home: Team, away: Team) -> tuple[int, int]:
        """Draw both scores independently. A strength of 0 always scores 0."""
        home_score = self.rng.randint(0, home.strength)
        away_score = self.rng.randint(0, away.strength)
        return home_score, away_score


def simulate_match(
    match: Match,
    simulator: MatchSimulator,
    updater: TeamStatsUpdater,
) -> tuple[Team, Team]:
    """Simulate ``match``, store its score and update both teams' stats.

    Calling this twice on the same match overwrites the score and counts the
    match a second time in the stats.
    """
    home_score, away_score = simulator.simulate_result(match.home_team, match.away_team)
    match.home_score = home_score
    match.away_score = away_score
    logger.debug("simulated %s", match)
    return updater.update_stats(match.home_team, match.away_team, home_score, away_score)


def has_match_been_played(match: Match) -> bool:
    """True when either side has any recorded match."""
    return match.home_team.stats.has_played or match.away_team.stats.has_played
