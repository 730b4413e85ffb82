"""Shared test fixtures."""

import pytest

from minisim.config import Settings
from minisim.core.simulation import MatchSimulator
from minisim.models.team import Team


class FixedScoreSimulator(MatchSimulator):
    """Every team scores exactly its strength."""

    def simulate_result(self, home: Team, away: Team) -> tuple[int, int]:
        return home.strength, away.strength


@pytest.fixture
def settings() -> Settings:
    """Test settings with defaults."""
    return Settings(minisim_env="development", minisim_random_seed=7)


@pytest.fixture
def fixed_simulator() -> MatchSimulator:
    """Deterministic simulator: home scores home.strength, away scores away.strength."""
    return FixedScoreSimulator()


@pytest.fixture
def four_teams() -> list[Team]:
    """Team A (9), Team B (4), Team C (6), Team D (3)."""
    return [
        Team(name="Team A", strength=9),
        Team(name="Team B", strength=4),
        Team(name="Team C", strength=6),
        Team(name="Team D", strength=3),
    ]
