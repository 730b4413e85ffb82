"""Match model: a fixture between two roster teams.

The teams are the roster's own Team objects, not copies: simulating a match
updates the standings through these references.
"""

from __future__ import annotations

from pydantic import BaseModel

from minisim.models.team import Team


class Match(BaseModel):
    """A scheduled pairing plus its simulated score (0-0 until simulated)."""

    home_team: Team
    away_team: Team
    home_score: int = 0
    away_score: int = 0

    @property
    def winner(self) -> Team | None:
        """Team with the higher score, ``None`` on a draw."""
        if self.home_score > self.away_score:
            return self.home_team
        if self.away_score > self.home_score:
            return self.away_team
        return None

    @property
    def is_draw(self) -> bool:
        return self.home_score == self.away_score

    def __str__(self) -> str:
        return (
            f"{self.home_team.name} {self.home_score}-{self.away_score} {self.away_team.name}"
        )
