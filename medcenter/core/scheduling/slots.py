"""
Slot Generation

Derives a doctor's bookable intervals for one day from a start time,
an end time and a slot duration. Times are wall-clock "HH:MM" strings
on a 24-hour scale.
"""

import logging
import re
from datetime import date

from medcenter.core.scheduling.errors import InvalidInputError
from medcenter.core.scheduling.models import Slot

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_time(value: str) -> int:
    """Convert "HH:MM" to minutes since midnight.

    Raises:
        InvalidInputError: if the value is not a valid 24-hour time
    """
    match = _TIME_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise InvalidInputError(f"Invalid time {value!r}, expected HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidInputError(f"Invalid time {value!r}, out of range")

    return hour * 60 + minute


def format_time(minutes: int) -> str:
    """Convert minutes since midnight to "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def parse_range(slot_range: str) -> tuple[str, str]:
    """Split a "HH:MM-HH:MM" range into normalized start and end times.

    Raises:
        InvalidInputError: if the range is malformed
    """
    parts = slot_range.split("-") if isinstance(slot_range, str) else []
    if len(parts) != 2:
        raise InvalidInputError(f"Invalid slot range {slot_range!r}, expected HH:MM-HH:MM")

    start, end = parts
    return format_time(parse_time(start)), format_time(parse_time(end))


def validate_date(value: str) -> str:
    """Check a "YYYY-MM-DD" date string."""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise InvalidInputError(f"Invalid date {value!r}, expected YYYY-MM-DD")

    try:
        date.fromisoformat(value)
    except ValueError as e:
        raise InvalidInputError(f"Invalid date {value!r}: {e}") from e

    return value


def generate_slots(
    doctor_code: str,
    date: str,
    start: str,
    end: str,
    duration: int,
) -> list[Slot]:
    """Generate consecutive slots of `duration` minutes.

    A slot is emitted only if it ends at or before `end`, so the number
    of slots is floor((end - start) / duration). No slots are produced
    when start >= end.

    Args:
        doctor_code: owning doctor
        date: schedule date (YYYY-MM-DD)
        start: first slot start (HH:MM)
        end: schedule end (HH:MM)
        duration: slot length in minutes

    Returns:
        Slots in generation order

    Raises:
        InvalidInputError: malformed date/time or non-positive duration
    """
    validate_date(date)
    start_minutes = parse_time(start)
    end_minutes = parse_time(end)

    if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
        raise InvalidInputError(f"Invalid slot duration {duration!r}, expected minutes > 0")

    slots = []
    current = start_minutes

    while current + duration <= end_minutes:
        slots.append(
            Slot(
                doctor_id=doctor_code,
                date=date,
                start_time=format_time(current),
                end_time=format_time(current + duration),
                duration_minutes=duration,
            )
        )
        current += duration

    logger.debug(
        f"Generated {len(slots)} slots for {doctor_code} on {date} "
        f"({start}-{end}, {duration} min)"
    )
    return slots
