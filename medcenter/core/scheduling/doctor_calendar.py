"""
Doctor Calendar

Stores generated slots on each doctor and answers availability queries.
"""

import logging
from typing import Optional

from medcenter.core.scheduling.models import Doctor, Slot
from medcenter.core.scheduling.registry import Registry
from medcenter.core.scheduling.slots import generate_slots, parse_range

logger = logging.getLogger(__name__)


class DoctorCalendar:
    """Slot calendars of all registered doctors."""

    def __init__(self, registry: Registry):
        self._registry = registry

    def add_daily_schedule(
        self,
        code: str,
        date: str,
        start: str,
        end: str,
        duration: int,
    ) -> int:
        """Generate slots for a doctor and append them to its calendar.

        Returns:
            Number of slots generated

        Raises:
            NotFoundError: unknown doctor
            InvalidInputError: malformed date, time or duration
        """
        doctor = self._registry.require_doctor(code)
        slots = generate_slots(code, date, start, end, duration)
        doctor.slots.extend(slots)

        logger.info(f"Scheduled {len(slots)} slots for {code} on {date}")
        return len(slots)

    def find_slots(self, date: str, specialty: str) -> dict[str, list[str]]:
        """Slots on a date for each doctor of a specialty.

        Only doctors with at least one slot on any date are included, so a
        doctor whose slots are all on other dates maps to an empty list.

        Returns:
            Map of doctor code to "HH:MM-HH:MM" strings
        """
        return {
            doctor.code: [slot.range for slot in doctor.slots if slot.date == date]
            for doctor in self._registry.doctors()
            if doctor.slots and doctor.specialty == specialty
        }

    def find_slot(self, doctor: Doctor, date: str, slot_range: str) -> Optional[Slot]:
        """Look up a doctor's slot by date and "HH:MM-HH:MM" range.

        Raises:
            InvalidInputError: malformed range
        """
        start, end = parse_range(slot_range)
        for slot in doctor.slots:
            if slot.matches(date, start, end):
                return slot
        return None

    def slot_count(self, doctor: Doctor) -> int:
        """Total slots across all dates."""
        return len(doctor.slots)
