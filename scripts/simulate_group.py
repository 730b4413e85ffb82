"""Simulate a group stage from the command line and print the table.

Usage:
    python scripts/simulate_group.py all          # Play every pairing once
    python scripts/simulate_group.py rounds [N]   # Play N rounds (default 1)

The roster comes from MINISIM_TEAMS_PATH (default: the bundled four teams).
Set MINISIM_RANDOM_SEED for a repeatable run.
"""

from __future__ import annotations

import asyncio
import sys

from minisim.config import Settings
from minisim.core.presenter import group_matches_into_rounds, position_changes, standing_rows
from minisim.core.standings import GroupStandings
from minisim.main import build_group_standings, configure_logging


def print_fixtures(standings: GroupStandings) -> None:
    rounds = group_matches_into_rounds(standings.get_matches(), standings.team_count)
    for idx, round_matches in enumerate(rounds, start=1):
        print(f"Round {idx}")
        for match in round_matches:
            print(f"  {match}")
    print()


def print_table(standings: GroupStandings) -> None:
    ranked = standings.get_ranked_teams()
    moves = position_changes(ranked, standings.get_previous_positions())
    print(f"{'#':>2} {'Team':<20} {'P':>3} {'W':>3} {'D':>3} {'L':>3} {'GF-GA':>7} {'GD':>4} {'Pts':>4}")
    print("-" * 56)
    for pos, row in enumerate(standing_rows(ranked), start=1):
        move = moves[row.name]
        arrow = "+" if move > 0 else "-" if move < 0 else " "
        print(
            f"{pos:>2} {row.name:<20} {row.played:>3} {row.wins:>3} {row.draws:>3} "
            f"{row.losses:>3} {row.goals:>7} {row.goal_difference:>4} {row.points:>4} {arrow}"
        )


async def run(cmd: str, rounds: int) -> None:
    settings = Settings()
    configure_logging(settings)
    standings = build_group_standings(settings)

    result = await standings.initialize_teams()
    if not result.ok:
        print(f"Could not load teams: {result.error}")
        return

    if cmd == "all":
        standings.simulate_all_matches()
    else:
        for _ in range(rounds):
            standings.simulate_next_round_matches()

    print_fixtures(standings)
    print_table(standings)


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        return

    cmd = sys.argv[1]
    if cmd == "all":
        asyncio.run(run(cmd, 0))
    elif cmd == "rounds":
        n = int(sys.argv[2]) if len(sys.argv) > 2 else 1
        asyncio.run(run(cmd, n))
    else:
        print(f"Unknown command: {cmd}")
        print(__doc__)


if __name__ == "__main__":
    main()
