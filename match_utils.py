# match_utils.py
"""
Display and result helpers for generated matches.

Participants only carry player ids, so every helper takes a roster mapping
player ids to Player objects.

The team display helpers back the Matches page. The score helpers are for
callers that record results against saved matches; generation never
produces a score.
"""

import json
from collections import Counter

from app_types import (
    FormattedTeams,
    GeneratedParticipant,
    Player,
    PlayerId,
    Team,
    TeamId,
    WinnerResult,
)
from constants import DEFAULT_SKILL_LEVEL

Roster = dict[PlayerId, Player]
Score = str | dict | None

DEFAULT_TEAM_A: TeamId = "A"
DEFAULT_TEAM_B: TeamId = "B"


def format_teams(participants: list[GeneratedParticipant], roster: Roster) -> FormattedTeams | None:
    """Groups participants into teams with display names.

    Returns None when no participant resolves to a known player.
    """
    groups: dict[TeamId, list[Player]] = {}
    for participant in participants:
        player = roster.get(participant.player_id)
        if player is not None and participant.team:
            groups.setdefault(participant.team, []).append(player)

    if not groups:
        return None

    teams = {
        team_id: Team(
            id=team_id,
            players=players,
            display_name=", ".join(p.display_name for p in players),
        )
        for team_id, players in groups.items()
    }
    return FormattedTeams(
        teams=teams,
        is_doubles_match=any(len(t.players) > 1 for t in teams.values()),
        team_count=len(teams),
    )


def get_team_vs_display(participants: list[GeneratedParticipant], roster: Roster) -> str | None:
    """'Ann Lee, Bo Park vs Cy Diaz, Di Fox' style label, teams in id order."""
    formatted = format_teams(participants, roster)
    if formatted is None or formatted.team_count < 2:
        return None
    return " vs ".join(formatted.teams[t].display_name for t in sorted(formatted.teams))


def get_team_display_name(
    participants: list[GeneratedParticipant], roster: Roster, team_id: TeamId
) -> str | None:
    formatted = format_teams(participants, roster)
    if formatted is None or team_id not in formatted.teams:
        return None
    return formatted.teams[team_id].display_name


def get_team_players(
    participants: list[GeneratedParticipant], roster: Roster, team_id: TeamId
) -> list[Player]:
    formatted = format_teams(participants, roster)
    if formatted is None or team_id not in formatted.teams:
        return []
    return formatted.teams[team_id].players


def _count_set_wins(score: Score) -> tuple[int, int]:
    """Counts sets won by team A and team B."""
    a_wins = b_wins = 0
    if isinstance(score, dict):
        if "teamA" in score and "teamB" in score:
            a_wins = int(score["teamA"] > score["teamB"])
            b_wins = int(score["teamB"] > score["teamA"])
        for game in score.get("sets") or []:
            if game.get("teamA", 0) > game.get("teamB", 0):
                a_wins += 1
            elif game.get("teamB", 0) > game.get("teamA", 0):
                b_wins += 1
        return a_wins, b_wins

    for game in str(score).split(","):
        parts = [part.strip() for part in game.split("-")]
        if len(parts) != 2:
            continue
        try:
            a_score, b_score = int(parts[0]), int(parts[1])
        except ValueError:
            continue
        if a_score > b_score:
            a_wins += 1
        elif b_score > a_score:
            b_wins += 1
    return a_wins, b_wins


def get_winner_from_score(
    score: Score,
    participants: list[GeneratedParticipant],
    roster: Roster,
    explicit_winner: TeamId | None = None,
) -> WinnerResult | None:
    """
    Determines the winning team of a match.

    An explicit winner takes precedence. Otherwise the score is read as
    team A against team B: '6-4, 4-6, 6-3' strings, {'teamA': 6, 'teamB': 4}
    or {'sets': [{'teamA': 6, 'teamB': 4}, ...]}.

    Returns:
        WinnerResult, or None for ties, unreadable scores or missing teams
    """
    formatted = format_teams(participants, roster)
    if formatted is None:
        return None
    teams = formatted.teams

    if explicit_winner and explicit_winner in teams:
        loser = next((t for t in teams if t != explicit_winner), None)
        if loser is not None:
            return WinnerResult(
                winner_team=explicit_winner,
                loser_team=loser,
                winner_players=teams[explicit_winner].players,
                loser_players=teams[loser].players,
            )

    if not score:
        return None
    if DEFAULT_TEAM_A not in teams or DEFAULT_TEAM_B not in teams:
        return None

    a_wins, b_wins = _count_set_wins(score)
    if a_wins == b_wins:
        return None
    winner, loser = (DEFAULT_TEAM_A, DEFAULT_TEAM_B) if a_wins > b_wins else (DEFAULT_TEAM_B, DEFAULT_TEAM_A)
    return WinnerResult(
        winner_team=winner,
        loser_team=loser,
        winner_players=teams[winner].players,
        loser_players=teams[loser].players,
    )


def format_score(score: Score) -> str | None:
    if not score:
        return None
    if isinstance(score, dict):
        if "teamA" in score and "teamB" in score:
            return f"{score['teamA']} - {score['teamB']}"
        if isinstance(score.get("sets"), list):
            return ", ".join(f"{s.get('teamA')}-{s.get('teamB')}" for s in score["sets"])
        return json.dumps(score)
    return score


def determine_best_skill_level(participants: list[GeneratedParticipant], roster: Roster) -> str:
    """Most common skill label among the participants, or 'Mixed'."""
    skills = [
        roster[p.player_id].skill_level
        for p in participants
        if p.player_id in roster and roster[p.player_id].skill_level
    ]
    if not skills:
        return DEFAULT_SKILL_LEVEL
    return Counter(skills).most_common(1)[0][0]
