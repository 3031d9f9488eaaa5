# schedule.py
"""
Sequential court and time assignment for generated matches.

Matches fill every court in a time slot before moving to the next slot.
There is no conflict detection or load balancing.
"""

import logging
from datetime import datetime, timedelta

from app_types import Court, MatchTemplate
from exceptions import ValidationError

logger = logging.getLogger("app.schedule")

TIME_FORMAT = "%H:%M"


def _parse_time(value: str) -> datetime:
    try:
        return datetime.strptime(value, TIME_FORMAT)
    except ValueError as e:
        raise ValidationError(f"Invalid time '{value}', expected HH:MM") from e


def generate_time_slots(
    start_time: str, end_time: str, match_duration_minutes: int, break_minutes: int = 0
) -> list[str]:
    """Returns 'HH:MM' slot start times from start_time up to (not including) end_time.

    Raises:
        ValidationError: If a time is malformed or the slot length is not positive
    """
    step = match_duration_minutes + break_minutes
    if step <= 0:
        raise ValidationError("Match duration plus break must be positive")

    current = _parse_time(start_time)
    end = _parse_time(end_time)
    slots = []
    while current < end:
        slots.append(current.strftime(TIME_FORMAT))
        current += timedelta(minutes=step)
    return slots


def enhance_matches_with_time_and_court(
    matches: list[MatchTemplate],
    time_slots: list[str],
    courts: list[Court],
    date: str = "",
    default_time: str = "",
) -> list[MatchTemplate]:
    """
    Assigns a court and time slot to each match, in generation order.

    Match i gets time_slots[i // len(courts)] (default_time once the slots run
    out) and the next court in rotation. With no courts the matches are
    returned unmodified.

    Args:
        matches: Generated matches; updated in place
        time_slots: Ordered slot start times
        courts: Ordered available courts
        date: Date to stamp on every scheduled match
        default_time: Time used when there are more matches than slots

    Returns:
        The same list of matches
    """
    if not courts:
        logger.info("No courts available: %d match(es) left unscheduled", len(matches))
        return matches

    court_index = 0
    for index, match in enumerate(matches):
        slot_index = index // len(courts)
        court = courts[court_index % len(courts)]
        match.court_id = court.id
        match.date = date
        match.time = time_slots[slot_index] if slot_index < len(time_slots) else default_time
        court_index += 1

    overflow = len(matches) - len(time_slots) * len(courts)
    if overflow > 0:
        logger.warning("%d match(es) fall outside the available time slots", overflow)
    return matches
