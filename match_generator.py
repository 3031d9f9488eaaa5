# match_generator.py
"""
Pairs formed teams into matches.

Two strategies share one pairwise generator:
- Round robin: every team meets every other team once.
- Team vs team: pre-paired teams meet (A vs B, C vs D, ...).

Each meeting seats min(preferred team size, |A|, |B|) players a side.
"""

import logging
from itertools import combinations

from app_types import (
    GeneratedParticipant,
    GenerationFormat,
    MatchTemplate,
    MatchType,
    Player,
    PlayerId,
    RotationMode,
    RotationOptions,
    TeamId,
    TeamPlayerMap,
)
from constants import DEFAULT_MATCH_DURATION_MINUTES, DEFAULT_SKILL_LEVEL, MAX_CONSECUTIVE_GAMES
from logger import log_match_summary

logger = logging.getLogger("app.match_generator")

# Consecutive games played by each player, reset when they sit out a match
RestTracker = dict[PlayerId, int]


def select_players_with_rest(players: list[Player], count: int, rest_tracker: RestTracker) -> list[Player]:
    """Picks `count` players, preferring those with the fewest consecutive games.

    Players who already played MAX_CONSECUTIVE_GAMES in a row are only used
    when there are not enough other players.
    """
    available = [p for p in players if rest_tracker.get(p.id, 0) < MAX_CONSECUTIVE_GAMES]
    resting = [p for p in players if rest_tracker.get(p.id, 0) >= MAX_CONSECUTIVE_GAMES]

    if len(available) < count:
        resting.sort(key=lambda p: rest_tracker.get(p.id, 0))
        available.extend(resting[: count - len(available)])

    available.sort(key=lambda p: rest_tracker.get(p.id, 0))
    return available[:count]


def update_rest_tracker(participants: list[GeneratedParticipant], rest_tracker: RestTracker) -> None:
    playing = {p.player_id for p in participants}
    for player_id in rest_tracker:
        rest_tracker[player_id] = rest_tracker[player_id] + 1 if player_id in playing else 0


def _seat(players: list[Player], team_id: TeamId) -> list[GeneratedParticipant]:
    return [GeneratedParticipant(player_id=p.id, team=team_id) for p in players]


def _line_ups(
    team_a: list[Player],
    team_b: list[Player],
    players_per_side: int,
    rotation: RotationOptions,
    rest_tracker: RestTracker,
):
    """Yields (side_a, side_b) player lists for each meeting of two teams."""
    rounds = max(rotation.number_of_rounds, 1)

    if rotation.player_rotation == RotationMode.ALL_COMBINATIONS:
        # Every sub-group of each side, listed twice so each partnership repeats
        combos_a = list(combinations(team_a, players_per_side)) * 2
        combos_b = list(combinations(team_b, players_per_side)) * 2
        for k in range(min(len(combos_a), len(combos_b), rounds)):
            yield list(combos_a[k]), list(combos_b[k])
        return

    for round_index in range(rounds):
        if round_index == 0:
            yield team_a[:players_per_side], team_b[:players_per_side]
        else:
            yield (
                select_players_with_rest(team_a, players_per_side, rest_tracker),
                select_players_with_rest(team_b, players_per_side, rest_tracker),
            )


def _generate_pairings(
    team_player_map: TeamPlayerMap,
    pairings: list[tuple[TeamId, TeamId]],
    preferred_team_size: int,
    rotation: RotationOptions,
    id_prefix: str,
    label: str,
) -> list[MatchTemplate]:
    rest_tracker: RestTracker = {
        p.id: 0 for team in team_player_map.values() for p in team
    }
    mode = "All Combinations" if rotation.player_rotation == RotationMode.ALL_COMBINATIONS else "Head-to-Head"

    matches = []
    for team_a_id, team_b_id in pairings:
        team_a = team_player_map[team_a_id]
        team_b = team_player_map[team_b_id]
        players_per_side = min(preferred_team_size, len(team_a), len(team_b))
        if players_per_side < 1:
            logger.debug("Skipping %s vs %s: empty team", team_a_id, team_b_id)
            continue

        line_ups = _line_ups(team_a, team_b, players_per_side, rotation, rest_tracker)
        for match_number, (side_a, side_b) in enumerate(line_ups, start=1):
            participants = _seat(side_a, team_a_id) + _seat(side_b, team_b_id)
            if len(participants) != players_per_side * 2:
                continue

            matches.append(
                MatchTemplate(
                    id=f"{id_prefix}-{len(matches)}",
                    title=f"Team {team_a_id} vs Team {team_b_id} - Match {match_number}",
                    match_type=MatchType.for_side_size(players_per_side),
                    skill_level=DEFAULT_SKILL_LEVEL,
                    court_id="",
                    date="",
                    time="",
                    duration_minutes=DEFAULT_MATCH_DURATION_MINUTES,
                    max_players=players_per_side * 2,
                    description=(
                        f"{label}: Team {team_a_id} vs Team {team_b_id}"
                        f" - Match {match_number} ({mode})"
                    ),
                    notes=f"{label} match with {mode.lower()} player rotation",
                    participants=participants,
                )
            )
            update_rest_tracker(participants, rest_tracker)

    log_match_summary(logger, matches)
    return matches


def generate_round_robin_matches(
    team_player_map: TeamPlayerMap,
    preferred_team_size: int,
    rotation_options: RotationOptions | None = None,
) -> list[MatchTemplate]:
    """
    Generates a full round robin between teams.

    Every unordered pair of distinct teams meets once per round, in team
    order (A-B, A-C, ..., B-C, ...). Teams without players are skipped.

    Args:
        team_player_map: Players for each team, in team order
        preferred_team_size: Maximum players seated per side
        rotation_options: Optional rotation settings for repeated meetings

    Returns:
        List of MatchTemplate objects with empty court/date/time fields
    """
    team_ids = list(team_player_map)
    pairings = list(combinations(team_ids, 2))
    logger.debug("Round robin over %d team(s): %d pairing(s)", len(team_ids), len(pairings))
    return _generate_pairings(
        team_player_map,
        pairings,
        preferred_team_size,
        rotation_options or RotationOptions(),
        id_prefix="rr-match",
        label="Round Robin",
    )


def generate_team_vs_team_matches(
    team_player_map: TeamPlayerMap,
    preferred_team_size: int,
    rotation_options: RotationOptions | None = None,
) -> list[MatchTemplate]:
    """Generates matches between pre-paired teams (A vs B, C vs D, ...).

    With an odd number of teams the last team has no opponent.
    """
    team_ids = list(team_player_map)
    pairings = list(zip(team_ids[0::2], team_ids[1::2]))
    if len(team_ids) % 2:
        logger.info("Team %s has no opponent and sits out", team_ids[-1])
    return _generate_pairings(
        team_player_map,
        pairings,
        preferred_team_size,
        rotation_options or RotationOptions(),
        id_prefix="tvsm",
        label="Team vs Team",
    )


def generate_matches(
    team_player_map: TeamPlayerMap,
    preferred_team_size: int,
    fmt: GenerationFormat = GenerationFormat.ROUND_ROBIN,
    rotation_options: RotationOptions | None = None,
) -> list[MatchTemplate]:
    """Runs the pairing strategy selected by `fmt`."""
    if fmt == GenerationFormat.TEAM_VS_TEAM:
        return generate_team_vs_team_matches(team_player_map, preferred_team_size, rotation_options)
    return generate_round_robin_matches(team_player_map, preferred_team_size, rotation_options)


def generate_round_robin_teams(team_ids: list[TeamId]) -> list[MatchTemplate]:
    """Round robin templates between team ids, without participants."""
    return [
        MatchTemplate(
            id=f"rr-match-{index}",
            title=f"Team {a} vs Team {b}",
            match_type=MatchType.DOUBLES,
            skill_level=DEFAULT_SKILL_LEVEL,
            court_id="",
            date="",
            time="",
            duration_minutes=DEFAULT_MATCH_DURATION_MINUTES,
            max_players=4,
            description=f"Round Robin: Team {a} vs Team {b}",
            notes="Round Robin tournament match",
        )
        for index, (a, b) in enumerate(combinations(team_ids, 2))
    ]
