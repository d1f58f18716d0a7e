"""
Scheduling data models.

Slots are immutable once generated. Patients and appointments are mutated
only through their accepted/completed flags.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Slot:
    """A bookable interval of one doctor on one date.

    Identity is (doctor_id, date, start_time); end_time and duration
    are informational.
    """

    doctor_id: str
    date: str  # YYYY-MM-DD
    start_time: str  # HH:MM
    end_time: str = field(compare=False)
    duration_minutes: int = field(default=0, compare=False)

    @property
    def range(self) -> str:
        """Slot formatted as "HH:MM-HH:MM"."""
        return f"{self.start_time}-{self.end_time}"

    def matches(self, date: str, start_time: str, end_time: str) -> bool:
        """Check a "start-end" lookup on a date, ignoring duration."""
        return (
            self.date == date
            and self.start_time == start_time
            and self.end_time == end_time
        )


@dataclass
class Doctor:
    """Doctor registered with a specialty, owning its calendar slots."""

    code: str
    name: str
    surname: str
    specialty: str
    # Generation order, not necessarily chronological
    slots: list[Slot] = field(default_factory=list)


@dataclass
class Patient:
    """Patient known by SSN."""

    ssn: str
    name: str
    surname: str
    accepted: bool = False


@dataclass
class Appointment:
    """Booking of one patient into one doctor slot."""

    id: str
    seq: int
    patient: Patient
    doctor: Doctor
    slot: Slot
    completed: bool = False

    @property
    def date(self) -> str:
        return self.slot.date

    @property
    def time(self) -> str:
        return self.slot.start_time

    @property
    def roster_entry(self) -> str:
        """Daily roster format "HH:MM=SSN"."""
        return f"{self.slot.start_time}={self.patient.ssn}"

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "id": self.id,
            "doctor": self.doctor.code,
            "patient": self.patient.ssn,
            "date": self.slot.date,
            "time": self.slot.start_time,
            "slot": self.slot.range,
            "accepted": self.patient.accepted,
            "completed": self.completed,
        }


def format_appointment_id(prefix: str, seq: int) -> str:
    """Build an appointment id such as "A0"."""
    return f"{prefix}{seq}"

