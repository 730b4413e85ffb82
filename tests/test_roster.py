"""Tests for roster sources: parsing, logo mapping, file and in-memory repositories."""

import json

import pytest
import yaml
from pydantic import ValidationError

from minisim.config import DEFAULT_TEAMS_PATH
from minisim.data.roster import (
    AssetLoadingError,
    FileTeamRepository,
    InMemoryTeamRepository,
    TeamFetchError,
    map_team_logos,
    parse_teams,
    team_logo_ref,
)
from minisim.models.team import Team

VALID_4TEAMS = [
    {"name": "Team A", "strength": 9},
    {"name": "Team B", "strength": 4},
    {"name": "Team C", "strength": 6},
    {"name": "Team D", "strength": 3},
]


class TestParseTeams:
    def test_valid_roster(self):
        teams = parse_teams(VALID_4TEAMS)
        assert [(t.name, t.strength) for t in teams] == [
            ("Team A", 9),
            ("Team B", 4),
            ("Team C", 6),
            ("Team D", 3),
        ]

    def test_missing_strength_defaults_to_zero(self):
        teams = parse_teams([{"name": "Team B"}])
        assert len(teams) == 1
        assert teams[0].strength == 0

    def test_entries_without_name_skipped(self):
        assert parse_teams([{"invalid": "data"}]) == []

    def test_non_mapping_entries_skipped(self):
        teams = parse_teams(["Team A", 3, None, {"name": "Team B", "strength": 2}])
        assert [t.name for t in teams] == ["Team B"]

    @pytest.mark.parametrize("data", [None, {"name": "Team A"}, "teams", 42])
    def test_non_list_yields_nothing(self, data):
        assert parse_teams(data) == []

    def test_negative_strength_rejected(self):
        with pytest.raises(ValidationError):
            parse_teams([{"name": "Team A", "strength": -1}])

    def test_fresh_stats(self):
        team = parse_teams(VALID_4TEAMS)[0]
        assert team.stats.matches_played == 0
        assert team.stats.position == 0


class TestLogos:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Team A", "ic_team_a"),
            ("Team D", "ic_team_d"),
            ("  Team   B  ", "ic_team_b"),
            ("Team E", "ic_simulate_icon"),
            ("Wanderers", "ic_simulate_icon"),
            ("", "ic_simulate_icon"),
        ],
    )
    def test_team_logo_ref(self, name, expected):
        assert team_logo_ref(name) == expected

    def test_map_team_logos_copies(self):
        team = Team(name="Team C", strength=6)
        mapped = map_team_logos([team])
        assert mapped[0].logo_ref == "ic_team_c"
        assert team.logo_ref == ""
        assert mapped[0] is not team


class TestFileTeamRepository:
    async def test_reads_json(self, tmp_path):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps(VALID_4TEAMS), encoding="utf-8")
        teams = await FileTeamRepository(path).fetch_teams()
        assert len(teams) == 4
        assert teams[0].logo_ref == "ic_team_a"

    async def test_reads_yaml(self, tmp_path):
        path = tmp_path / "teams.yaml"
        path.write_text(
            "- name: Team A\n  strength: 9\n- name: Team B\n  strength: 4\n",
            encoding="utf-8",
        )
        teams = await FileTeamRepository(path).fetch_teams()
        assert [(t.name, t.strength) for t in teams] == [("Team A", 9), ("Team B", 4)]

    async def test_bundled_roster(self):
        teams = await FileTeamRepository(DEFAULT_TEAMS_PATH).fetch_teams()
        assert [(t.name, t.strength) for t in teams] == [
            ("Team A", 9),
            ("Team B", 4),
            ("Team C", 6),
            ("Team D", 3),
        ]

    async def test_missing_file(self, tmp_path):
        repo = FileTeamRepository(tmp_path / "nope.json")
        with pytest.raises(AssetLoadingError, match="Error reading teams data"):
            await repo.fetch_teams()

    async def test_invalid_json(self, tmp_path):
        path = tmp_path / "teams.json"
        path.write_text("[{not json", encoding="utf-8")
        with pytest.raises(AssetLoadingError, match="Error parsing teams data") as exc_info:
            await FileTeamRepository(path).fetch_teams()
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    async def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "teams.yaml"
        path.write_text("- name: [unclosed\n", encoding="utf-8")
        with pytest.raises(AssetLoadingError, match="Error parsing teams data") as exc_info:
            await FileTeamRepository(path).fetch_teams()
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    async def test_not_utf8(self, tmp_path):
        path = tmp_path / "teams.json"
        path.write_bytes(b'[{"name": "Team \xff", "strength": 3}]')
        with pytest.raises(AssetLoadingError, match="Error parsing teams data") as exc_info:
            await FileTeamRepository(path).fetch_teams()
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    async def test_invalid_strength(self, tmp_path):
        path = tmp_path / "teams.json"
        path.write_text('[{"name": "Team A", "strength": -3}]', encoding="utf-8")
        with pytest.raises(AssetLoadingError, match="Error parsing teams data"):
            await FileTeamRepository(path).fetch_teams()

    async def test_asset_error_is_a_fetch_error(self, tmp_path):
        with pytest.raises(TeamFetchError):
            await FileTeamRepository(tmp_path / "missing.yaml").fetch_teams()


class TestInMemoryTeamRepository:
    async def test_returns_copies(self):
        source = [Team(name="Team A", strength=9)]
        teams = await InMemoryTeamRepository(source).fetch_teams()
        assert teams[0].name == "Team A"
        assert teams[0] is not source[0]

    async def test_keeps_existing_logo(self):
        source = [
            Team(name="Wanderers", strength=5, logo_ref="crest_w"),
            Team(name="Team B", strength=4),
        ]
        teams = await InMemoryTeamRepository(source).fetch_teams()
        assert [t.logo_ref for t in teams] == ["crest_w", "ic_team_b"]

    async def test_raises_configured_error(self):
        repo = InMemoryTeamRepository(error=TeamFetchError("Error fetching teams"))
        with pytest.raises(TeamFetchError, match="Error fetching teams"):
            await repo.fetch_teams()
