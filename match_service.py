"""
Service layer for saving generated matches.

This module sits between the Matches page and the database module, so the
same save rules apply whether matches are saved from the page or from tests.
"""

import logging

from app_types import MatchTemplate
from database import MatchDB
from exceptions import DatabaseError

logger = logging.getLogger("app.match_service")


def save_generated_matches(matches: list[MatchTemplate]) -> list[str]:
    """
    Stores each generated match, then registers its participants.

    Args:
        matches: Scheduled match templates from a generation run

    Returns:
        Database IDs of the created matches, in input order.

    Raises:
        DatabaseError: If a match or participant could not be saved. Matches
            saved before the failure are left in place.
    """
    created_ids = []
    for match in matches:
        match_id = MatchDB.create_match(match)
        for participant in match.participants:
            MatchDB.add_participant(match_id, participant)
        created_ids.append(match_id)
        logger.debug(
            "Saved %s as %s with %d participant(s)",
            match.id,
            match_id,
            len(match.participants),
        )

    logger.info(f"Saved {len(created_ids)} match(es) to database")
    return created_ids


def try_save_generated_matches(matches: list[MatchTemplate]) -> tuple[bool, str]:
    """
    Saves matches and reports the outcome for display.

    Returns:
        Tuple of (success, message) for the page to show.
    """
    try:
        created_ids = save_generated_matches(matches)
    except DatabaseError as e:
        logger.error(f"Failed to save generated matches: {e}")
        return False, f"Failed to save matches: {e}"
    return True, f"Saved {len(created_ids)} match(es)"
