"""Team statistics accounting.

update_stats(home, away, home_score, away_score) folds one result into both
teams' running totals. The derived fields (goal difference, points,
has_played) are always recomputed from the cumulative counters.
"""

from __future__ import annotations

from minisim.models.constants import POINTS_PER_DRAW, POINTS_PER_WIN
from minisim.models.team import Team, TeamStats


def calculate_goal_difference(goals_for: int, goals_against: int) -> int:
    return goals_for - goals_against


def calculate_points(wins: int, draws: int) -> int:
    """Win = 3, draw = 1, loss = 0."""
    return wins * POINTS_PER_WIN + draws * POINTS_PER_DRAW


def has_played_matches(matches_played: int) -> bool:
    return matches_played > 0


class TeamStatsUpdater:
    """Applies match results to team stats in place."""

    def update_stats(
        self,
        home: Team,
        away: Team,
        home_score: int,
        away_score: int,
    ) -> tuple[Team, Team]:
        """Record one match for both teams and return them.

        Scores are not validated; negative goals are the caller's problem.
        """
        _apply_result(home.stats, home_score, away_score)
        # Away team sees the same match from the other side
        _apply_result(away.stats, away_score, home_score)
        return home, away


def _apply_result(stats: TeamStats, goals_for: int, goals_against: int) -> None:
    stats.matches_played += 1
    stats.goals_for += goals_for
    stats.goals_against += goals_against

    if goals_for > goals_against:
        stats.wins += 1
    elif goals_for < goals_against:
        stats.losses += 1
    else:
        stats.draws += 1

    stats.goal_difference = calculate_goal_difference(stats.goals_for, stats.goals_against)
    stats.points = calculate_points(stats.wins, stats.draws)
    stats.has_played = has_played_matches(stats.matches_played)
