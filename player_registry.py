# player_registry.py
"""
Roster data processing utilities.

This module handles conversion between Player objects and pandas DataFrames
for the roster editor, and flattens generated matches into a table for display.
"""

import pandas as pd

from app_types import Court, MatchTemplate, Player
from exceptions import ValidationError

ROSTER_COLUMNS = ["#", "Player ID", "First Name", "Last Name", "Skill Level", "Available"]


def create_roster_dataframe(players: list[Player], available_ids: set[str] | None = None) -> pd.DataFrame:
    """Creates a DataFrame for the roster editor. Everyone is available by default."""
    return pd.DataFrame(
        {
            "#": range(1, len(players) + 1),
            "Player ID": [p.id for p in players],
            "First Name": [p.first_name for p in players],
            "Last Name": [p.last_name for p in players],
            "Skill Level": [p.skill_level for p in players],
            "Available": [available_ids is None or p.id in available_ids for p in players],
        },
        columns=ROSTER_COLUMNS,
    )


def dataframe_to_players(edited_df: pd.DataFrame, only_available: bool = True) -> list[Player]:
    """
    Converts an edited roster DataFrame into an ordered Player list.

    Rows without a first name are dropped. New rows added in the editor have
    no Player ID; they get a 'new-<row>' id so every player stays unique.

    Args:
        edited_df: DataFrame from the Streamlit data_editor
        only_available: Keep only rows ticked as available

    Returns:
        List of Player objects in table order

    Raises:
        ValidationError: If two rows share a Player ID
    """
    players = []
    for position, (_, row) in enumerate(edited_df.dropna(subset=["First Name"]).iterrows()):
        if only_available and "Available" in row and not _is_true(row["Available"]):
            continue

        player_id = row.get("Player ID")
        player_id = f"new-{position + 1}" if _is_blank(player_id) else str(player_id).strip()
        last_name = row.get("Last Name")
        skill = row.get("Skill Level")

        players.append(
            Player(
                id=player_id,
                first_name=str(row["First Name"]).strip(),
                last_name="" if _is_blank(last_name) else str(last_name).strip(),
                skill_level="" if _is_blank(skill) else str(skill).strip(),
            )
        )

    ids = [p.id for p in players]
    if len(ids) != len(set(ids)):
        raise ValidationError("Duplicate player ids found in roster")
    return players


def _is_blank(value) -> bool:
    return value is None or pd.isna(value) or str(value).strip() == ""


def _is_true(value) -> bool:
    # Missing values in the checkbox column count as available
    return True if _is_blank(value) else bool(value)


def matches_to_dataframe(
    matches: list[MatchTemplate], players: list[Player], courts: list[Court]
) -> pd.DataFrame:
    """Flattens scheduled matches into one row per match for display."""
    names = {p.id: p.display_name for p in players}
    court_names = {c.id: c.name for c in courts}

    rows = []
    for match in matches:
        teams: dict[str, list[str]] = {}
        for participant in match.participants:
            teams.setdefault(participant.team, []).append(
                names.get(participant.player_id, participant.player_id)
            )
        rows.append(
            {
                "Time": match.time,
                "Court": court_names.get(match.court_id, match.court_id),
                "Match": match.title,
                "Type": match.match_type.value,
                "Skill": match.skill_level,
                "Players": " vs ".join(", ".join(n) for n in teams.values()),
            }
        )
    return pd.DataFrame(rows, columns=["Time", "Court", "Match", "Type", "Skill", "Players"])
