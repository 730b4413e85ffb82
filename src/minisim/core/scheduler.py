"""Round-robin fixture generation.

Two modes share the same team list:

  - **all pairs**: every unordered pairing exactly once, in shuffled order.
    Used by "simulate everything".
  - **next round**: one round of a circle-method schedule per call.  A
    ``RoundRobinSchedule`` tracks which round is due and how many matches
    the current cycle has produced; after a full cycle the next call starts
    over at round 0.

Terminology:
  - **round**: a set of simultaneous matches.  With 4 teams a round has 2
    matches.
  - **cycle**: every team plays every other team once.  With 4 teams that's
    C(4,2)=6 matches across 3 rounds.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from minisim.models.match import Match
from minisim.models.team import Team

logger = logging.getLogger(__name__)


def total_matches(num_teams: int) -> int:
    """Matches in one full cycle: n * (n - 1) / 2."""
    return num_teams * (num_teams - 1) // 2


def round_pairings(num_teams: int, round_index: int) -> list[tuple[int, int]]:
    """Return (home, away) team indices for one round of the circle method.

    The last team (index ``n - 1``) stays fixed and plays the home slot of
    the first pairing; every other position rotates with ``round_index``.
    Each round has ``n // 2`` pairings.  With an odd team count the same
    arithmetic runs over ``n - 1`` rotating positions, so one team sits out
    each round.

    With 4 teams:
        round 0: (0, 3), (1, 2)
        round 1: (1, 3), (2, 0)
        round 2: (2, 3), (0, 1)

    Args:
        num_teams: Number of teams in the group.
        round_index: 0-based round, in ``[0, num_teams - 2]``.

    Returns:
        List of (home_index, away_index) tuples in fixture order.
    """
    if num_teams < 2:
        return []

    rotating = num_teams - 1
    pairings: list[tuple[int, int]] = []
    for slot in range(num_teams // 2):
        home = (round_index + slot) % rotating
        if slot == 0:
            # The last team is held fixed while the others rotate
            away = num_teams - 1
        else:
            away = (num_teams - 1 - slot + round_index) % rotating
        pairings.append((home, away))
    return pairings


def generate_all_pairs(teams: list[Team], rng: random.Random | None = None) -> list[Match]:
    """Generate every pairing once and shuffle the resulting order.

    Pairings are fixed (``teams[i]`` at home against ``teams[j]`` for
    ``i < j``); only the sequence is randomized.
    """
    matches = [
        Match(home_team=teams[i], away_team=teams[j])
        for i in range(len(teams))
        for j in range(i + 1, len(teams))
    ]
    (rng or random.Random()).shuffle(matches)
    return matches


@dataclass
class RoundRobinSchedule:
    """Cursor over the rounds of a circle-method cycle.

    ``cursor`` is the round due next; ``completed_matches`` counts the
    matches generated since the cycle began.
    """

    cursor: int = 0
    completed_matches: int = 0

    @staticmethod
    def total_rounds(num_teams: int) -> int:
        return max(num_teams - 1, 0)

    def is_cycle_complete(self, num_teams: int) -> bool:
        """True once the current cycle has produced all of its matches."""
        return num_teams >= 2 and self.completed_matches >= total_matches(num_teams)

    def advance(self, num_teams: int, generated: int) -> None:
        """Move to the next round, wrapping after the last one."""
        rounds = self.total_rounds(num_teams)
        self.cursor = (self.cursor + 1) % rounds if rounds else 0
        self.completed_matches += generated

    def reset(self) -> None:
        self.cursor = 0
        self.completed_matches = 0


class MatchGenerator:
    """Builds fixtures for a group, either all at once or round by round."""

    def __init__(
        self,
        rng: random.Random | None = None,
        schedule: RoundRobinSchedule | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.schedule = schedule or RoundRobinSchedule()

    def generate_matches(self, teams: list[Team]) -> list[Match]:
        """All pairings in shuffled order. Leaves the round schedule alone."""
        return generate_all_pairs(teams, self.rng)

    def generate_next_round(self, teams: list[Team]) -> list[Match]:
        """Return the matches of the round due next and advance the schedule.

        Starts a new cycle first if the previous one is complete, so repeated
        calls cycle through the same sequence of rounds forever.
        """
        num_teams = len(teams)
        if num_teams < 2:
            return []

        if self.schedule.is_cycle_complete(num_teams):
            logger.debug("round-robin cycle complete, restarting at round 0")
            self.schedule.reset()

        round_index = self.schedule.cursor
        matches = [
            Match(home_team=teams[home], away_team=teams[away])
            for home, away in round_pairings(num_teams, round_index)
        ]
        self.schedule.advance(num_teams, len(matches))
        logger.debug(
            "generated round %d with %d matches (%d/%d in cycle)",
            round_index,
            len(matches),
            self.schedule.completed_matches,
            total_matches(num_teams),
        )
        return matches

    def reset(self) -> None:
        """Forget schedule progress; the next round generated is round 0."""
        self.schedule.reset()
