"""
Med Center Engine - Main Orchestrator.

Owns registry, calendar, ledger, arrival queue and statistics, and
serializes every public operation behind one lock.
"""

import logging
import threading
from functools import wraps
from typing import Optional

from medcenter.config import Settings, get_settings
from medcenter.core.scheduling.doctor_calendar import DoctorCalendar
from medcenter.core.scheduling.errors import MedError
from medcenter.core.scheduling.ledger import AppointmentLedger
from medcenter.core.scheduling.models import Appointment
from medcenter.core.scheduling.queue import ArrivalQueue
from medcenter.core.scheduling.registry import Registry
from medcenter.core.scheduling.slots import validate_date
from medcenter.core.scheduling.stats import StatisticsEngine

logger = logging.getLogger(__name__)


def _locked(method):
    """Run a MedCenter method while holding its lock."""

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class MedCenter:
    """
    Scheduling engine of one medical center.

    Coordinates:
    - Specialty and doctor registry
    - Daily slot schedules
    - Appointment booking and completion
    - Arrival queue
    - Statistics

    The current date belongs to the instance. Queue and completion calls
    accept an explicit `on_date` that takes precedence over it.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize engine.

        Args:
            settings: Application settings (defaults to cached settings)
        """
        settings = settings or get_settings()

        self._lock = threading.RLock()
        self._current_date: Optional[str] = None

        self.registry = Registry()
        self.calendar = DoctorCalendar(self.registry)
        self.ledger = AppointmentLedger(
            self.registry,
            self.calendar,
            id_prefix=settings.appointment_id_prefix,
            allow_double_booking=settings.allow_double_booking,
        )
        self.queue = ArrivalQueue(self.ledger)
        self.stats = StatisticsEngine(self.registry, self.calendar, self.ledger)

    # === Registry ===

    @_locked
    def add_specialties(self, *specialties: str) -> None:
        self.registry.add_specialties(*specialties)

    @_locked
    def get_specialties(self) -> list[str]:
        return self.registry.get_specialties()

    @_locked
    def add_doctor(self, code: str, name: str, surname: str, specialty: str) -> None:
        self.registry.add_doctor(code, name, surname, specialty)

    @_locked
    def get_specialists(self, specialty: str) -> list[str]:
        return self.registry.get_specialists(specialty)

    @_locked
    def get_doctor_name(self, code: str) -> Optional[str]:
        doctor = self.registry.get_doctor(code)
        return doctor.name if doctor else None

    @_locked
    def get_doctor_surname(self, code: str) -> Optional[str]:
        doctor = self.registry.get_doctor(code)
        return doctor.surname if doctor else None

    # === Calendar ===

    @_locked
    def add_daily_schedule(
        self,
        code: str,
        date: str,
        start: str,
        end: str,
        duration: int,
    ) -> int:
        """Define a doctor's slots for a day. Returns the slot count."""
        return self.calendar.add_daily_schedule(code, date, start, end, duration)

    @_locked
    def find_slots(self, date: str, specialty: str) -> dict[str, list[str]]:
        return self.calendar.find_slots(date, specialty)

    # === Appointments ===

    @_locked
    def book_appointment(
        self,
        ssn: str,
        name: str,
        surname: str,
        code: str,
        date: str,
        slot_range: str,
    ) -> str:
        """Book an appointment. Returns its id."""
        return self.ledger.book_appointment(ssn, name, surname, code, date, slot_range)

    @_locked
    def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        return self.ledger.get_appointment(appointment_id)

    @_locked
    def get_appointment_doctor(self, appointment_id: str) -> Optional[str]:
        return self.ledger.get_appointment_doctor(appointment_id)

    @_locked
    def get_appointment_patient(self, appointment_id: str) -> Optional[str]:
        return self.ledger.get_appointment_patient(appointment_id)

    @_locked
    def get_appointment_time(self, appointment_id: str) -> Optional[str]:
        return self.ledger.get_appointment_time(appointment_id)

    @_locked
    def get_appointment_date(self, appointment_id: str) -> Optional[str]:
        return self.ledger.get_appointment_date(appointment_id)

    @_locked
    def list_appointments(self, code: str, date: str) -> list[str]:
        return self.ledger.list_appointments(code, date)

    # === Current date and arrivals ===

    @property
    def current_date(self) -> Optional[str]:
        return self._current_date

    @_locked
    def set_current_date(self, date: str) -> int:
        """Set the current date.

        Returns:
            Number of appointments, all doctors, on that date
        """
        self._current_date = validate_date(date)
        count = len(self.ledger.appointments(date=date))
        logger.info(f"Current date set to {date} ({count} appointments)")
        return count

    def _effective_date(self, on_date: Optional[str]) -> Optional[str]:
        if on_date is None:
            return self._current_date
        return validate_date(on_date)

    @_locked
    def accept(self, ssn: str) -> bool:
        """Mark a patient as arrived. Unknown SSNs are ignored."""
        return self.queue.accept(ssn)

    @_locked
    def next_appointment(self, code: str, on_date: Optional[str] = None) -> Optional[str]:
        return self.queue.next_appointment(code, self._effective_date(on_date))

    @_locked
    def complete_appointment(
        self,
        code: str,
        appointment_id: str,
        on_date: Optional[str] = None,
    ) -> None:
        """Mark an appointment as completed.

        Raises:
            InvalidInputError, NotFoundError, WrongDoctorError, NotAcceptedError,
            WrongDateError
        """
        try:
            self.ledger.complete_appointment(
                code, appointment_id, self._effective_date(on_date)
            )
        except MedError as e:
            logger.warning(f"Completion of {appointment_id} by {code} rejected: {e}")
            raise

    # === Statistics ===

    @_locked
    def show_rate(self, code: str, date: str) -> float:
        return self.stats.show_rate(code, date)

    @_locked
    def doctor_completeness(self, code: str) -> float:
        return self.stats.doctor_completeness(code)

    @_locked
    def schedule_completeness(self) -> dict[str, float]:
        return self.stats.schedule_completeness()


# Singleton
_med_center: Optional[MedCenter] = None


def get_med_center() -> MedCenter:
    """Get singleton MedCenter."""
    global _med_center
    if _med_center is None:
        _med_center = MedCenter()
    return _med_center


def reset_med_center() -> None:
    """Drop the singleton so the next call starts from empty state."""
    global _med_center
    _med_center = None
