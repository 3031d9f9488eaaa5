# team_builder.py
"""
Assigns concrete players to teams.

The builder asks the team sizing calculator for a plan and walks the roster
in order, filling team A, then team B, and so on. When the calculator's
strict gate rejects the roster, a fallback path still forms teams from first
principles where that is possible.
"""

import logging
from collections import Counter

from app_types import GeneratedParticipant, ParticipantBuildResult, Player, SkillLevel, TeamPlayerMap
from constants import MIN_PLAYERS_FOR_MATCH, MIN_TEAM_COUNT
from exceptions import ValidationError
from team_sizing import calculate_optimal_team_sizes, get_team_ids, partition_with_remainder

logger = logging.getLogger("app.team_builder")


def _assign_sequentially(
    players: list[Player], players_per_team: list[int]
) -> ParticipantBuildResult:
    """Walks players in order, filling each team up to its planned size.

    Team ids stop at Z; players planned for later teams join the last team.
    """
    team_ids = get_team_ids(len(players_per_team))
    sizes = list(players_per_team[: len(team_ids)])
    overflow = sum(players_per_team[len(team_ids) :])
    if overflow:
        sizes[-1] += overflow
        logger.warning(
            "Plan needs %d teams but ids stop at %s: %d extra player(s) join team %s",
            len(players_per_team),
            team_ids[-1],
            overflow,
            team_ids[-1],
        )

    participants = []
    player_index = 0
    for team_id, team_size in zip(team_ids, sizes):
        take = min(team_size, len(players) - player_index)
        for player in players[player_index : player_index + take]:
            participants.append(GeneratedParticipant(player_id=player.id, team=team_id))
        player_index += take
        if player_index >= len(players):
            break

    return ParticipantBuildResult(participants=participants, team_count=len(team_ids))


def _check_unique_ids(players: list[Player]) -> None:
    ids = [p.id for p in players]
    if len(ids) != len(set(ids)):
        raise ValidationError("Duplicate player ids found in roster")


def build_participants_for_match(
    players: list[Player], preferred_team_size: int
) -> ParticipantBuildResult:
    """
    Builds the team assignment for one generation run.

    Args:
        players: Available players, in the order they should be assigned
        preferred_team_size: Preferred number of players per team

    Returns:
        ParticipantBuildResult. team_count == 0 with no participants means
        there are fewer than four players and no match is possible.

    Raises:
        ValidationError: If preferred_team_size < 1 or player ids repeat
    """
    _check_unique_ids(players)
    plan = calculate_optimal_team_sizes(len(players), preferred_team_size)
    logger.debug("Plan for %d player(s): %s", len(players), plan.description)

    if plan.is_valid and plan.team_size == preferred_team_size and plan.players_per_team:
        result = _assign_sequentially(players, plan.players_per_team)
        logger.debug("Primary path: %d team(s)", result.team_count)
        return result

    full_team_count, _, players_per_team = partition_with_remainder(
        len(players), preferred_team_size
    )
    if full_team_count >= MIN_TEAM_COUNT:
        logger.debug("Fallback: %d full team(s) of %d", full_team_count, preferred_team_size)
        return _assign_sequentially(players, players_per_team)

    half = len(players) // 2
    if len(players) >= preferred_team_size * 2:
        # Two teams, any single leftover goes to the first team
        sizes = [half + len(players) % 2, half]
        logger.debug("Fallback: two teams %s", sizes)
        return _assign_sequentially(players, sizes)

    if len(players) >= MIN_PLAYERS_FOR_MATCH:
        # Two teams of `half`; an odd leftover player is left out
        if len(players) % 2:
            logger.info(
                "Odd player count %d below preferred minimum: %s sits out",
                len(players),
                players[-1].id,
            )
        return _assign_sequentially(players[: half * 2], [half, half])

    logger.info("Only %d player(s) available: no match possible", len(players))
    return ParticipantBuildResult(participants=[], team_count=0)


def describe_build(build: ParticipantBuildResult) -> str:
    """Summarises the teams actually formed, e.g. '2 teams of 3 players each'."""
    sizes = list(Counter(p.team for p in build.participants).values())
    if not sizes:
        return "No teams formed"
    if len(set(sizes)) == 1:
        return f"{len(sizes)} teams of {sizes[0]} players each"
    return f"{len(sizes)} teams with {', '.join(str(n) for n in sizes)} players"


def group_participants_by_team(
    players: list[Player], participants: list[GeneratedParticipant]
) -> TeamPlayerMap:
    """Turns a flat participant list back into an ordered team -> players map."""
    by_id = {p.id: p for p in players}
    team_player_map: TeamPlayerMap = {}
    for participant in participants:
        player = by_id.get(participant.player_id)
        if player is None:
            logger.warning("Participant %s not found in roster", participant.player_id)
            continue
        team_player_map.setdefault(participant.team, []).append(player)
    return team_player_map


def skill_rank(skill_level: str) -> int:
    return SkillLevel.rank_of(skill_level or "")


def sort_players_by_skill(players: list[Player]) -> list[Player]:
    """Returns a copy sorted by skill, highest first; ties keep roster order."""
    return sorted(players, key=lambda p: skill_rank(p.skill_level), reverse=True)


def create_balanced_teams(players: list[Player], preferred_team_size: int | None) -> list[list[Player]]:
    """Slices the roster into concrete teams following a valid plan.

    Returns an empty list when the roster cannot form a valid plan.
    """
    plan = calculate_optimal_team_sizes(len(players), preferred_team_size)
    if not plan.is_valid:
        return []

    teams = []
    start = 0
    for size in plan.players_per_team:
        teams.append(list(players[start : start + size]))
        start += size
    return teams
