"""Wiring: build a ready-to-use GroupStandings from Settings."""

from __future__ import annotations

import logging
import random

from minisim.config import Settings
from minisim.core.scheduler import MatchGenerator
from minisim.core.simulation import MatchSimulator
from minisim.core.standings import GroupStandings
from minisim.core.stats import TeamStatsUpdater
from minisim.data.roster import FileTeamRepository

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.minisim_log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_group_standings(settings: Settings | None = None) -> GroupStandings:
    """Create GroupStandings backed by the configured roster file.

    One ``random.Random`` (seeded when ``minisim_random_seed`` is set) drives
    both fixture shuffling and score simulation.  Teams are not loaded yet;
    await ``initialize_teams()`` on the result.
    """
    settings = settings or Settings()
    rng = random.Random(settings.minisim_random_seed)
    logger.debug(
        "building group standings teams_path=%s seed=%s",
        settings.minisim_teams_path,
        settings.minisim_random_seed,
    )
    return GroupStandings(
        repository=FileTeamRepository(settings.minisim_teams_path),
        generator=MatchGenerator(rng=rng),
        simulator=MatchSimulator(rng=rng),
        updater=TeamStatsUpdater(),
    )
