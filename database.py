# database.py
"""
Database operations for the Club Match Generator.

This module handles all Supabase database interactions for players, courts and matches.
All methods translate Supabase exceptions to DatabaseError for consistent error handling.
"""

import logging

import streamlit as st
from supabase import create_client, Client

from app_types import Court, GeneratedParticipant, MatchTemplate, Player
from exceptions import DatabaseError

logger = logging.getLogger("app.database")


# Initialize Supabase client
@st.cache_resource
def get_supabase_client() -> Client:
    url = st.secrets["SUPABASE_URL"]
    key = st.secrets["SUPABASE_KEY"]
    return create_client(url, key)


class PlayerDB:
    """Reads the club roster from Supabase."""

    @staticmethod
    def get_all_players() -> list[Player]:
        """Fetches all players from the Supabase 'players' table.

        Returns:
            Players ordered by last name, then first name.

        Raises:
            DatabaseError: If the query fails.
        """
        try:
            supabase = get_supabase_client()
            response = (
                supabase.table("players")
                .select("*")
                .order("last_name")
                .order("first_name")
                .execute()
            )
        except Exception as e:
            logger.exception("Supabase API call failed: get_all_players")
            raise DatabaseError("Failed to fetch players from database") from e

        return [
            Player(
                id=str(row["id"]),
                first_name=row.get("first_name") or "",
                last_name=row.get("last_name") or "",
                skill_level=str(row.get("skill_level") or ""),
                email=row.get("email"),
            )
            for row in response.data or []
        ]


class CourtDB:
    """Reads courts from Supabase."""

    @staticmethod
    def get_all_courts(only_available: bool = True) -> list[Court]:
        """Fetches courts from the Supabase 'courts' table.

        Args:
            only_available: Skip courts whose status is not 'available'

        Raises:
            DatabaseError: If the query fails.
        """
        try:
            supabase = get_supabase_client()
            query = supabase.table("courts").select("*")
            if only_available:
                query = query.eq("status", "available")
            response = query.order("name").execute()
        except Exception as e:
            logger.exception("Supabase API call failed: get_all_courts")
            raise DatabaseError("Failed to fetch courts from database") from e

        return [
            Court(
                id=str(row["id"]),
                name=row["name"],
                court_type=row.get("type") or "",
                status=row.get("status") or "available",
            )
            for row in response.data or []
        ]


class MatchDB:
    """Handles match persistence in Supabase."""

    @staticmethod
    def create_match(match: MatchTemplate) -> str:
        """Creates a scheduled match record from a template.

        Returns:
            The match ID from the database

        Raises:
            DatabaseError: If the match could not be created
        """
        data = {
            "title": match.title,
            "match_type": match.match_type.value,
            "skill_level": match.skill_level,
            "date": match.date,
            "time": match.time,
            "duration_minutes": match.duration_minutes,
            "max_players": match.max_players,
            "description": match.description,
            "notes": match.notes,
            "status": "scheduled",
        }
        if match.court_id:
            data["court_id"] = match.court_id

        try:
            supabase = get_supabase_client()
            response = supabase.table("matches").insert(data).execute()
        except Exception as e:
            logger.exception(f"Supabase API call failed: create_match '{match.title}'")
            raise DatabaseError(f"Failed to create match '{match.title}'") from e

        if response.data:
            return str(response.data[0]["id"])

        logger.error(f"Match creation returned empty data for '{match.title}'")
        raise DatabaseError(f"Failed to create match '{match.title}' - No ID returned")

    @staticmethod
    def add_participant(match_id: str, participant: GeneratedParticipant) -> None:
        """Registers one player against a stored match.

        Raises:
            DatabaseError: If the participant could not be added
        """
        data = {
            "match_id": match_id,
            "player_id": participant.player_id,
            "team": participant.team,
            "status": "registered",
        }
        try:
            supabase = get_supabase_client()
            supabase.table("match_participants").insert(data).execute()
        except Exception as e:
            logger.exception(
                f"Supabase API call failed: add_participant {participant.player_id} -> {match_id}"
            )
            raise DatabaseError(
                f"Failed to add player {participant.player_id} to match {match_id}"
            ) from e
