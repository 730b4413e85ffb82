"""Read-only views over standings for display collaborators.

Nothing here mutates teams or matches.
"""

from __future__ import annotations

from dataclasses import dataclass

from minisim.models.match import Match
from minisim.models.team import Team


@dataclass(frozen=True)
class StandingRow:
    """One line of a standings table."""

    position: int
    logo_ref: str
    name: str
    played: int
    wins: int
    draws: int
    losses: int
    goals: str  # "goals_for-goals_against"
    goal_difference: str
    points: int


def standing_row(team: Team) -> StandingRow:
    stats = team.stats
    return StandingRow(
        position=stats.position,
        logo_ref=team.logo_ref,
        name=team.name,
        played=stats.matches_played,
        wins=stats.wins,
        draws=stats.draws,
        losses=stats.losses,
        goals=f"{stats.goals_for}-{stats.goals_against}",
        goal_difference=str(stats.goal_difference),
        points=stats.points,
    )


def standing_rows(teams: list[Team]) -> list[StandingRow]:
    """Rows in the order given (pass ranked teams for a standings table)."""
    return [standing_row(t) for t in teams]


def group_matches_into_rounds(matches: list[Match], num_teams: int) -> list[list[Match]]:
    """Split the accumulated fixture list into rounds of ``num_teams // 2``."""
    if not matches:
        return []
    per_round = max(num_teams // 2, 1)
    return [matches[i : i + per_round] for i in range(0, len(matches), per_round)]


def round_winners(round_matches: list[Match]) -> list[Team]:
    """Winners of the decided matches in a round; draws contribute nobody."""
    return [m.winner for m in round_matches if m.winner is not None]


def position_changes(teams: list[Team], previous_positions: dict[str, int]) -> dict[str, int]:
    """Places gained (positive) or lost (negative) since the last snapshot.

    Teams without a previous position, or not ranked yet, report 0.
    """
    changes: dict[str, int] = {}
    for team in teams:
        previous = previous_positions.get(team.name)
        current = team.stats.position
        if previous is None or not current:
            changes[team.name] = 0
        else:
            changes[team.name] = previous - current
    return changes
