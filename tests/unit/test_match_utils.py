import pytest

from app_types import GeneratedParticipant
from match_utils import (
    determine_best_skill_level,
    format_score,
    format_teams,
    get_team_display_name,
    get_team_players,
    get_team_vs_display,
    get_winner_from_score,
)


@pytest.fixture
def roster(sample_players):
    return {p.id: p for p in sample_players}


@pytest.fixture
def doubles():
    return [
        GeneratedParticipant(player_id="alice", team="A"),
        GeneratedParticipant(player_id="bob", team="A"),
        GeneratedParticipant(player_id="charlie", team="B"),
        GeneratedParticipant(player_id="dave", team="B"),
    ]


def test_format_teams(doubles, roster):
    formatted = format_teams(doubles, roster)

    assert formatted.team_count == 2
    assert formatted.is_doubles_match is True
    assert formatted.teams["A"].display_name == "Alice Ng, Bob Ortiz"


def test_format_teams_without_known_players(roster):
    assert format_teams([GeneratedParticipant(player_id="ghost", team="A")], roster) is None


def test_team_vs_display(doubles, roster):
    assert get_team_vs_display(doubles, roster) == "Alice Ng, Bob Ortiz vs Charlie Park, Dave Quinn"


def test_team_vs_display_needs_two_teams(doubles, roster):
    assert get_team_vs_display(doubles[:2], roster) is None


def test_team_lookups(doubles, roster):
    assert get_team_display_name(doubles, roster, "B") == "Charlie Park, Dave Quinn"
    assert get_team_display_name(doubles, roster, "C") is None
    assert [p.id for p in get_team_players(doubles, roster, "A")] == ["alice", "bob"]
    assert get_team_players(doubles, roster, "C") == []


class TestWinner:
    def test_string_score(self, doubles, roster):
        result = get_winner_from_score("21-15, 18-21, 21-19", doubles, roster)

        assert result.winner_team == "A"
        assert result.loser_team == "B"
        assert [p.id for p in result.winner_players] == ["alice", "bob"]

    def test_dict_score(self, doubles, roster):
        result = get_winner_from_score({"teamA": 1, "teamB": 2}, doubles, roster)
        assert result.winner_team == "B"

    def test_sets_score(self, doubles, roster):
        score = {"sets": [{"teamA": 21, "teamB": 10}, {"teamA": 21, "teamB": 19}]}
        assert get_winner_from_score(score, doubles, roster).winner_team == "A"

    def test_explicit_winner_wins(self, doubles, roster):
        result = get_winner_from_score("21-10", doubles, roster, explicit_winner="B")
        assert result.winner_team == "B"

    @pytest.mark.parametrize("score", [None, "", "21-21", "not a score"])
    def test_no_winner(self, doubles, roster, score):
        assert get_winner_from_score(score, doubles, roster) is None


@pytest.mark.parametrize(
    "score, expected",
    [
        (None, None),
        ("21-15", "21-15"),
        ({"teamA": 2, "teamB": 1}, "2 - 1"),
        ({"sets": [{"teamA": 21, "teamB": 15}, {"teamA": 19, "teamB": 21}]}, "21-15, 19-21"),
    ],
)
def test_format_score(score, expected):
    assert format_score(score) == expected


def test_best_skill_level_is_most_common(roster):
    participants = [
        GeneratedParticipant(player_id="charlie", team="A"),
        GeneratedParticipant(player_id="alice", team="A"),
        GeneratedParticipant(player_id="eve", team="B"),
        GeneratedParticipant(player_id="bob", team="B"),
    ]
    assert determine_best_skill_level(participants, roster) == "Intermediate"


def test_best_skill_level_defaults_to_mixed(roster):
    assert determine_best_skill_level([], roster) == "Mixed"
    assert determine_best_skill_level([GeneratedParticipant(player_id="ghost", team="A")], roster) == "Mixed"
