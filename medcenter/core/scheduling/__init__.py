"""
Scheduling Module

Provides slot generation, doctor calendars, the appointment ledger, the
arrival queue and statistics for a medical center.

Usage:
    from medcenter.core.scheduling import MedCenter

    center = MedCenter()
    center.add_specialties("Cardiology")
    center.add_doctor("D1", "Mario", "Rossi", "Cardiology")
    center.add_daily_schedule("D1", "2023-06-28", "09:00", "10:00", 20)

    appointment_id = center.book_appointment(
        "SSN1", "Anna", "Bianchi", "D1", "2023-06-28", "09:00-09:20"
    )
    center.set_current_date("2023-06-28")
    center.accept("SSN1")
    print(center.next_appointment("D1"))  # "A0"
"""

# Errors
from medcenter.core.scheduling.errors import (
    MedError,
    NotFoundError,
    InvalidSlotError,
    InvalidInputError,
    StateConflictError,
    DuplicateError,
    SlotTakenError,
    WrongDoctorError,
    NotAcceptedError,
    WrongDateError,
)

# Data model
from medcenter.core.scheduling.models import (
    Slot,
    Doctor,
    Patient,
    Appointment,
)

# Components
from medcenter.core.scheduling.slots import generate_slots
from medcenter.core.scheduling.registry import Registry
from medcenter.core.scheduling.doctor_calendar import DoctorCalendar
from medcenter.core.scheduling.ledger import AppointmentLedger
from medcenter.core.scheduling.queue import ArrivalQueue
from medcenter.core.scheduling.stats import StatisticsEngine

# Engine (main orchestrator)
from medcenter.core.scheduling.engine import (
    MedCenter,
    get_med_center,
    reset_med_center,
)

__all__ = [
    # Errors
    "MedError",
    "NotFoundError",
    "InvalidSlotError",
    "InvalidInputError",
    "StateConflictError",
    "DuplicateError",
    "SlotTakenError",
    "WrongDoctorError",
    "NotAcceptedError",
    "WrongDateError",
    # Data model
    "Slot",
    "Doctor",
    "Patient",
    "Appointment",
    # Components
    "generate_slots",
    "Registry",
    "DoctorCalendar",
    "AppointmentLedger",
    "ArrivalQueue",
    "StatisticsEngine",
    # Engine
    "MedCenter",
    "get_med_center",
    "reset_med_center",
]
