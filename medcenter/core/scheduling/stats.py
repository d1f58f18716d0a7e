"""
Statistics Engine

Operational ratios computed on demand from ledger and calendar state.
A ratio with a zero denominator is 0.0.
"""

from medcenter.core.scheduling.doctor_calendar import DoctorCalendar
from medcenter.core.scheduling.ledger import AppointmentLedger
from medcenter.core.scheduling.models import Doctor
from medcenter.core.scheduling.registry import Registry


def _ratio(numerator: int, denominator: int) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


class StatisticsEngine:
    """Show rate and schedule completeness."""

    def __init__(
        self,
        registry: Registry,
        calendar: DoctorCalendar,
        ledger: AppointmentLedger,
    ):
        self._registry = registry
        self._calendar = calendar
        self._ledger = ledger

    def show_rate(self, code: str, date: str) -> float:
        """Accepted over total appointments of a doctor on a date."""
        appointments = self._ledger.appointments(code, date)
        accepted = sum(1 for a in appointments if a.patient.accepted)
        return _ratio(accepted, len(appointments))

    def _completeness(self, doctor: Doctor) -> float:
        booked = len(self._ledger.appointments(doctor.code))
        return _ratio(booked, self._calendar.slot_count(doctor))

    def doctor_completeness(self, code: str) -> float:
        """Ever-booked appointments over total slots of one doctor.

        Raises:
            NotFoundError: unknown doctor
        """
        return self._completeness(self._registry.require_doctor(code))

    def schedule_completeness(self) -> dict[str, float]:
        """Completeness of every registered doctor."""
        return {d.code: self._completeness(d) for d in self._registry.doctors()}
