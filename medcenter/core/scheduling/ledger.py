"""
Appointment Ledger

Maps appointment ids to bookings and enforces the booking and
completion rules.
"""

import logging
from typing import Optional

from medcenter.core.scheduling.doctor_calendar import DoctorCalendar
from medcenter.core.scheduling.errors import (
    InvalidSlotError,
    NotAcceptedError,
    NotFoundError,
    SlotTakenError,
    WrongDateError,
    WrongDoctorError,
)
from medcenter.core.scheduling.models import (
    Appointment,
    Patient,
    Slot,
    format_appointment_id,
)
from medcenter.core.scheduling.registry import Registry
from medcenter.core.scheduling.slots import validate_date

logger = logging.getLogger(__name__)


class AppointmentLedger:
    """
    All appointments ever booked, in creation order.

    Ids are "<prefix><n>" with n counting from zero and never reused.
    Unless double booking is allowed, a slot can be held by a single
    appointment.
    """

    def __init__(
        self,
        registry: Registry,
        calendar: DoctorCalendar,
        id_prefix: str = "A",
        allow_double_booking: bool = False,
    ):
        """Initialize ledger.

        Args:
            registry: doctor registry
            calendar: calendar used to resolve slot ranges
            id_prefix: appointment id prefix
            allow_double_booking: accept several appointments on one slot
        """
        self._registry = registry
        self._calendar = calendar
        self.id_prefix = id_prefix
        self.allow_double_booking = allow_double_booking

        self._patients: dict[str, Patient] = {}
        self._appointments: dict[str, Appointment] = {}
        self._slot_holders: dict[Slot, str] = {}
        self._counter = 0

    # === Patients ===

    def get_patient(self, ssn: str) -> Optional[Patient]:
        return self._patients.get(ssn)

    def _get_or_create_patient(self, ssn: str, name: str, surname: str) -> Patient:
        patient = self._patients.get(ssn)
        if patient is None:
            patient = Patient(ssn=ssn, name=name, surname=surname)
            self._patients[ssn] = patient
            logger.info(f"Created patient record {ssn}")
        return patient

    # === Booking ===

    def book_appointment(
        self,
        ssn: str,
        name: str,
        surname: str,
        code: str,
        date: str,
        slot_range: str,
    ) -> str:
        """Book a patient into an existing doctor slot.

        An existing patient keeps its recorded name and surname.

        Args:
            ssn: patient SSN
            name: patient name
            surname: patient surname
            code: doctor code
            date: appointment date (YYYY-MM-DD)
            slot_range: slot as "HH:MM-HH:MM"

        Returns:
            New appointment id

        Raises:
            NotFoundError: unknown doctor
            InvalidInputError: malformed date or range
            InvalidSlotError: no matching slot on the doctor's calendar
            SlotTakenError: slot already booked
        """
        doctor = self._registry.require_doctor(code)
        validate_date(date)

        slot = self._calendar.find_slot(doctor, date, slot_range)
        if slot is None:
            logger.warning(f"Booking rejected: no slot {slot_range} on {date} for {code}")
            raise InvalidSlotError(f"Doctor {code!r} has no slot {slot_range} on {date}")

        if not self.allow_double_booking and slot in self._slot_holders:
            holder = self._slot_holders[slot]
            logger.warning(f"Booking rejected: slot {slot_range} on {date} held by {holder}")
            raise SlotTakenError(
                f"Slot {slot_range} on {date} for {code!r} is already booked ({holder})"
            )

        patient = self._get_or_create_patient(ssn, name, surname)

        appointment_id = format_appointment_id(self.id_prefix, self._counter)
        self._appointments[appointment_id] = Appointment(
            id=appointment_id,
            seq=self._counter,
            patient=patient,
            doctor=doctor,
            slot=slot,
        )
        self._slot_holders.setdefault(slot, appointment_id)
        self._counter += 1

        logger.info(f"Booked {appointment_id}: {ssn} with {code} on {date} {slot.range}")
        return appointment_id

    # === Lookups ===

    def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        return self._appointments.get(appointment_id)

    def get_appointment_doctor(self, appointment_id: str) -> Optional[str]:
        appointment = self._appointments.get(appointment_id)
        return appointment.doctor.code if appointment else None

    def get_appointment_patient(self, appointment_id: str) -> Optional[str]:
        appointment = self._appointments.get(appointment_id)
        return appointment.patient.ssn if appointment else None

    def get_appointment_time(self, appointment_id: str) -> Optional[str]:
        appointment = self._appointments.get(appointment_id)
        return appointment.time if appointment else None

    def get_appointment_date(self, appointment_id: str) -> Optional[str]:
        appointment = self._appointments.get(appointment_id)
        return appointment.date if appointment else None

    def appointments(
        self,
        code: Optional[str] = None,
        date: Optional[str] = None,
    ) -> list[Appointment]:
        """Appointments in creation order, optionally filtered."""
        return [
            a
            for a in self._appointments.values()
            if (code is None or a.doctor.code == code)
            and (date is None or a.date == date)
        ]

    def list_appointments(self, code: str, date: str) -> list[str]:
        """Daily roster of a doctor as "HH:MM=SSN" entries."""
        return [a.roster_entry for a in self.appointments(code, date)]

    # === Completion ===

    def complete_appointment(
        self,
        code: str,
        appointment_id: str,
        current_date: Optional[str],
    ) -> Appointment:
        """Mark an appointment as carried out.

        Completing an already completed appointment is a no-op.

        Raises:
            NotFoundError: unknown appointment or doctor
            WrongDoctorError: appointment belongs to another doctor
            NotAcceptedError: patient not accepted yet
            WrongDateError: appointment not on current_date
        """
        appointment = self._appointments.get(appointment_id)
        if appointment is None:
            raise NotFoundError(f"Unknown appointment {appointment_id!r}")
        self._registry.require_doctor(code)

        if appointment.doctor.code != code:
            raise WrongDoctorError(
                f"Appointment {appointment_id} is with {appointment.doctor.code!r}, not {code!r}"
            )
        if not appointment.patient.accepted:
            raise NotAcceptedError(
                f"Patient {appointment.patient.ssn} of {appointment_id} has not been accepted"
            )
        if current_date is None or appointment.date != current_date:
            raise WrongDateError(
                f"Appointment {appointment_id} is on {appointment.date}, current date is {current_date}"
            )

        if appointment.completed:
            logger.debug(f"Appointment {appointment_id} already completed")
        else:
            appointment.completed = True
            logger.info(f"Completed {appointment_id} with {code}")
        return appointment
