"""Shared constants for minisim models.

Placed here so both the stats updater (core/stats.py) and the presentation
helpers can import them without creating a layer violation.
"""

from __future__ import annotations

POINTS_PER_WIN = 3
POINTS_PER_DRAW = 1

# Logo handles keyed by the group letter in "Team X" style names.
TEAM_LOGOS: dict[str, str] = {
    "A": "ic_team_a",
    "B": "ic_team_b",
    "C": "ic_team_c",
    "D": "ic_team_d",
}

DEFAULT_TEAM_LOGO = "ic_simulate_icon"
