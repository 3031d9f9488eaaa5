import pytest

from app_types import GeneratedParticipant, Player, SkillLevel
from exceptions import ValidationError
from team_builder import (
    build_participants_for_match,
    create_balanced_teams,
    describe_build,
    group_participants_by_team,
    sort_players_by_skill,
)
from tests.utils import generate_players, team_distribution, team_members


class TestBuildParticipants:
    def test_eighteen_players_six_teams_of_three(self, eighteen_players):
        result = build_participants_for_match(eighteen_players, 3)

        assert result.team_count == 6
        assert team_distribution(result.participants) == {
            "A": 3, "B": 3, "C": 3, "D": 3, "E": 3, "F": 3,
        }

    def test_players_assigned_in_roster_order(self, eighteen_players):
        result = build_participants_for_match(eighteen_players, 3)

        assert team_members(result.participants, "A") == ["player-1", "player-2", "player-3"]
        assert team_members(result.participants, "F") == ["player-16", "player-17", "player-18"]

    def test_remainder_lands_on_last_team(self):
        result = build_participants_for_match(generate_players(7), 3)

        assert result.team_count == 2
        assert team_distribution(result.participants) == {"A": 3, "B": 4}

    def test_four_players_below_preferred_size_make_two_pairs(self):
        result = build_participants_for_match(generate_players(4), 3)

        assert result.team_count == 2
        assert team_distribution(result.participants) == {"A": 2, "B": 2}

    def test_odd_count_in_fallback_leaves_last_player_out(self):
        players = generate_players(7)
        result = build_participants_for_match(players, 4)

        assert result.team_count == 2
        assert team_distribution(result.participants) == {"A": 3, "B": 3}
        assert "player-7" not in {p.player_id for p in result.participants}

    @pytest.mark.parametrize("count", [0, 1, 2, 3])
    def test_fewer_than_four_players_no_match(self, count):
        result = build_participants_for_match(generate_players(count), 2)

        assert result.participants == []
        assert result.team_count == 0
        assert result.has_match is False

    def test_every_player_placed_once_when_plan_is_valid(self):
        for size in range(1, 7):
            for total in range(size * 2, 27):
                players = generate_players(total)
                result = build_participants_for_match(players, size)

                placed = [p.player_id for p in result.participants]
                assert sorted(placed) == sorted(p.id for p in players)
                assert len(set(placed)) == len(placed)
                assert len(team_distribution(result.participants)) == result.team_count

    def test_is_deterministic(self, sample_players):
        first = build_participants_for_match(sample_players, 3)
        second = build_participants_for_match(sample_players, 3)
        assert first == second

    def test_duplicate_ids_raise(self):
        players = [Player(id="p1", first_name="A"), Player(id="p1", first_name="B")]
        with pytest.raises(ValidationError):
            build_participants_for_match(players * 2, 2)

    def test_non_positive_team_size_raises(self, sample_players):
        with pytest.raises(ValidationError):
            build_participants_for_match(sample_players, 0)


def test_group_participants_by_team(sample_players):
    result = build_participants_for_match(sample_players, 4)

    team_map = group_participants_by_team(sample_players, result.participants)

    assert list(team_map) == ["A", "B"]
    assert [p.id for p in team_map["A"]] == ["alice", "bob", "charlie", "dave"]
    assert [p.id for p in team_map["B"]] == ["eve", "frank", "grace", "heidi"]


def test_group_participants_skips_unknown_players(sample_players):
    participants = [
        GeneratedParticipant(player_id="alice", team="A"),
        GeneratedParticipant(player_id="ghost", team="B"),
    ]

    team_map = group_participants_by_team(sample_players, participants)

    assert list(team_map) == ["A"]


def test_sort_players_by_skill_is_stable(sample_players):
    ordered = sort_players_by_skill(sample_players)

    assert [p.id for p in ordered] == [
        "grace", "alice", "dave", "charlie", "eve", "heidi", "bob", "frank",
    ]
    # Input is left untouched
    assert sample_players[0].id == "alice"


def test_unknown_skill_sorts_last():
    players = [
        Player(id="x", first_name="X", skill_level="Wizard"),
        Player(id="y", first_name="Y", skill_level="Beginner"),
    ]
    assert [p.id for p in sort_players_by_skill(players)] == ["y", "x"]


def test_create_balanced_teams(sample_players):
    teams = create_balanced_teams(sample_players, 4)

    assert [[p.id for p in team] for team in teams] == [
        ["alice", "bob", "charlie", "dave"],
        ["eve", "frank", "grace", "heidi"],
    ]


def test_create_balanced_teams_invalid_plan_is_empty(sample_players):
    assert create_balanced_teams(sample_players[:3], 4) == []


# =============================================================================
# More Teams Than Ids
# =============================================================================


class TestTeamIdCeiling:
    def test_twenty_seven_singles_fold_last_player_into_team_z(self, caplog):
        players = generate_players(27)

        result = build_participants_for_match(players, 1)

        assert result.team_count == 26
        assert len(result.participants) == 27
        assert team_members(result.participants, "Z") == ["player-26", "player-27"]
        assert "ids stop at Z" in caplog.text

    def test_sixty_players_in_pairs_all_seated(self):
        players = generate_players(60)

        result = build_participants_for_match(players, 2)

        distribution = team_distribution(result.participants)
        assert result.team_count == len(distribution) == 26
        assert distribution["Y"] == 2
        assert distribution["Z"] == 10
        assert sorted(p.player_id for p in result.participants) == sorted(p.id for p in players)


# =============================================================================
# Descriptions and Skill Ranks
# =============================================================================


@pytest.mark.parametrize(
    "count, size, expected",
    [
        (5, 4, "2 teams of 2 players each"),
        (7, 4, "2 teams of 3 players each"),
        (7, 3, "2 teams with 3, 4 players"),
        (3, 4, "No teams formed"),
    ],
)
def test_describe_build(count, size, expected):
    assert describe_build(build_participants_for_match(generate_players(count), size)) == expected


def test_skill_level_ranks():
    assert SkillLevel.PROFESSIONAL.rank > SkillLevel.ADVANCED.rank > SkillLevel.BEGINNER.rank
    assert SkillLevel.rank_of("Wizard") == SkillLevel.rank_of("") == SkillLevel.MIXED.rank
    assert SkillLevel.roster_levels() == ["Beginner", "Intermediate", "Advanced", "Professional"]
