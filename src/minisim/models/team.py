"""Team and TeamStats models.

A Team's identity (name, strength, logo) never changes once it joins a
group. Its stats are the mutable running totals the stats updater folds
match results into.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TeamStats(BaseModel):
    """Accumulated group-stage statistics for one Team."""

    matches_played: int = Field(default=0, ge=0)
    wins: int = Field(default=0, ge=0)
    draws: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    goals_for: int = Field(default=0, ge=0)
    goals_against: int = Field(default=0, ge=0)
    # Derived totals, recomputed by the stats updater after every match.
    goal_difference: int = 0
    points: int = 0
    has_played: bool = False
    # 1-based rank from the last standings recomputation; 0 = not ranked yet.
    position: int = Field(default=0, ge=0)


class Team(BaseModel):
    """A team in the group. ``name`` is unique within a roster."""

    name: str
    strength: int = Field(ge=0)
    logo_ref: str = ""
    stats: TeamStats = Field(default_factory=TeamStats)

    def reset_stats(self) -> None:
        """Replace stats with fresh defaults; identity is untouched."""
        self.stats = TeamStats()

    def __str__(self) -> str:
        return f"{self.name} ({self.strength})"
