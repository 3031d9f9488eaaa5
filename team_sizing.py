# team_sizing.py
"""
Team sizing for match generation.

Works out how a roster of N players splits into teams, either honouring a
preferred team size exactly or searching a small range of sizes when no
preference is given. Leftover players after an even division are always
folded onto the final team; no extra, smaller team is ever created.
"""

import logging

from app_types import TeamConfiguration, TeamCountPreference, TeamId, TeamPartitionPlan
from constants import (
    CONFIGURATION_EFFICIENCY,
    FLEX_MAX_TEAM_SIZE,
    FLEX_MIN_PLAYERS,
    FLEX_MIN_TEAM_SIZE,
    MIN_PLAYERS_PER_ADJUSTED_TEAM,
    MIN_TEAM_COUNT,
    TEAM_ID_ALPHABET,
)
from exceptions import ValidationError

logger = logging.getLogger("app.team_sizing")


def get_team_ids(count: int, custom_list: list[TeamId] | None = None) -> list[TeamId]:
    """Returns the first `count` team ids.

    A custom list is used verbatim when it is long enough; otherwise ids are
    drawn from A..Z and silently stop at Z.
    """
    if custom_list and len(custom_list) >= count:
        return list(custom_list[:count])
    return list(TEAM_ID_ALPHABET[: max(count, 0)])


def partition_with_remainder(total_players: int, team_size: int) -> tuple[int, int, list[int]]:
    """Splits players into full teams and folds the remainder onto the last one.

    Returns:
        (even_teams, remainder, players_per_team). players_per_team is empty
        when not even one full team can be formed.
    """
    even_teams, remainder = divmod(total_players, team_size)
    players_per_team = [team_size] * even_teams
    if remainder > 0 and players_per_team:
        players_per_team[-1] += remainder
    return even_teams, remainder, players_per_team


def describe_partition(team_count: int, team_size: int, remainder: int) -> str:
    if remainder == 0:
        return f"{team_count} teams of {team_size} players each"
    return (
        f"{team_count - 1} teams of {team_size} players"
        f" + 1 team of {team_size + remainder} players"
    )


def _validate_inputs(total_players: int, preferred_team_size: int | None) -> None:
    if total_players < 0:
        raise ValidationError(f"Player count cannot be negative (got {total_players})")
    if preferred_team_size is not None and preferred_team_size < 1:
        raise ValidationError(
            f"Preferred team size must be at least 1 (got {preferred_team_size})"
        )


def _rank(configurations: list[TeamConfiguration]) -> list[TeamConfiguration]:
    # Efficiency first, then perfect divisions, then fewer teams
    return sorted(
        configurations,
        key=lambda c: (-c.efficiency, not c.is_optimal, c.team_count),
    )


def _search_configurations(
    total_players: int, preferred_team_size: int | None = None
) -> list[TeamConfiguration]:
    """Single search routine behind both the best plan and the options list."""
    if preferred_team_size is not None:
        sizes = [preferred_team_size]
        max_team_size = None
    else:
        sizes = range(FLEX_MIN_TEAM_SIZE, min(FLEX_MAX_TEAM_SIZE, total_players // 2) + 1)
        max_team_size = FLEX_MAX_TEAM_SIZE

    configurations = []
    for size in sizes:
        even_teams, remainder, players_per_team = partition_with_remainder(total_players, size)
        if even_teams < MIN_TEAM_COUNT:
            continue
        if max_team_size is not None and players_per_team[-1] > max_team_size:
            logger.debug(
                "Skipping size %d: final team of %d exceeds %d",
                size,
                players_per_team[-1],
                max_team_size,
            )
            continue
        configurations.append(
            TeamConfiguration(
                team_size=size,
                team_count=even_teams,
                players_per_team=players_per_team,
                description=describe_partition(even_teams, size, remainder),
                efficiency=CONFIGURATION_EFFICIENCY,
                is_optimal=remainder == 0,
            )
        )
    return _rank(configurations)


def get_all_team_configurations(
    total_players: int, preferred_team_size: int | None = None
) -> list[TeamConfiguration]:
    """Returns every acceptable configuration, best first.

    Useful for showing alternative options in the UI.
    """
    _validate_inputs(total_players, preferred_team_size)
    min_players = preferred_team_size * 2 if preferred_team_size else FLEX_MIN_PLAYERS
    if total_players < min_players:
        return []
    return _search_configurations(total_players, preferred_team_size)


def apply_team_count_preference(
    base_team_count: int,
    total_players: int,
    team_count_preference: TeamCountPreference,
) -> int:
    """Nudges the team count by one towards the requested parity.

    The count never drops below two teams or rises above total_players // 3
    teams. When no neighbour satisfies the parity the base count is kept.
    """
    if team_count_preference == TeamCountPreference.AUTO:
        return base_team_count

    wants_odd = team_count_preference == TeamCountPreference.ODD
    if (base_team_count % 2 == 1) == wants_odd:
        return base_team_count

    max_team_count = total_players // MIN_PLAYERS_PER_ADJUSTED_TEAM
    candidates = []
    if base_team_count - 1 >= MIN_TEAM_COUNT:
        candidates.append(base_team_count - 1)
    if base_team_count + 1 <= max_team_count:
        candidates.append(base_team_count + 1)

    matching = [c for c in candidates if (c % 2 == 1) == wants_odd]
    if not matching:
        return base_team_count
    # Both neighbours are one step away; the smaller count wins the tie
    return matching[0]


def _even_spread(total_players: int, team_count: int) -> list[int]:
    base, extra = divmod(total_players, team_count)
    return [base + 1 if i < extra else base for i in range(team_count)]


def calculate_optimal_team_sizes(
    total_players: int,
    preferred_team_size: int | None = None,
    team_count_preference: TeamCountPreference = TeamCountPreference.AUTO,
) -> TeamPartitionPlan:
    """
    Calculates the team partition for a given number of players.

    With a preferred team size the plan uses exactly that size, folding any
    leftover players onto the final team. Without one, sizes 3 to 6 are
    searched and the best candidate (perfect division first, then fewer
    teams) is returned together with all ranked alternatives.

    Args:
        total_players: Number of available players
        preferred_team_size: Players per team, or None for flexible sizing
        team_count_preference: Odd/even preference for the number of teams

    Returns:
        TeamPartitionPlan. Check is_valid before using players_per_team.

    Raises:
        ValidationError: If total_players is negative or preferred_team_size < 1
    """
    _validate_inputs(total_players, preferred_team_size)
    logger.debug(
        "calculate_optimal_team_sizes(total=%d, preferred=%s, preference=%s)",
        total_players,
        preferred_team_size,
        team_count_preference,
    )

    min_players = preferred_team_size * 2 if preferred_team_size else FLEX_MIN_PLAYERS
    if total_players < min_players:
        return TeamPartitionPlan.invalid(
            f"Not enough players for team matches (minimum {min_players} required)"
        )

    if preferred_team_size:
        return _preferred_size_plan(total_players, preferred_team_size, team_count_preference)

    options = _search_configurations(total_players)
    if not options:
        return TeamPartitionPlan.invalid(
            "Unable to create balanced teams with current player count"
        )

    best = options[0]
    plan = TeamPartitionPlan(
        team_size=best.team_size,
        team_count=best.team_count,
        players_per_team=list(best.players_per_team),
        is_valid=True,
        description=best.description,
        options=options,
    )
    logger.debug("Flexible plan: %s (%d option(s))", plan.description, len(options))
    return plan


def _preferred_size_plan(
    total_players: int,
    preferred_team_size: int,
    team_count_preference: TeamCountPreference,
) -> TeamPartitionPlan:
    even_teams, remainder, players_per_team = partition_with_remainder(
        total_players, preferred_team_size
    )

    if even_teams < MIN_TEAM_COUNT:
        return TeamPartitionPlan.invalid(
            "Not enough players to form more than one full team of preferred size"
        )

    team_count = apply_team_count_preference(even_teams, total_players, team_count_preference)
    if team_count != even_teams:
        players_per_team = _even_spread(total_players, team_count)
        description = (
            f"{team_count} teams ({team_count_preference.value} preference) with "
            f"{', '.join(str(n) for n in players_per_team)} players"
        )
    else:
        description = describe_partition(even_teams, preferred_team_size, remainder)

    configuration = TeamConfiguration(
        team_size=preferred_team_size,
        team_count=team_count,
        players_per_team=list(players_per_team),
        description=description,
        efficiency=CONFIGURATION_EFFICIENCY,
        is_optimal=remainder == 0 and team_count == even_teams,
    )
    plan = TeamPartitionPlan(
        team_size=preferred_team_size,
        team_count=team_count,
        players_per_team=players_per_team,
        is_valid=True,
        description=description,
        options=[configuration],
    )
    logger.debug("Preferred-size plan: %s -> %s", description, players_per_team)
    return plan
