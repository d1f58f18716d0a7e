"""Specialty and doctor registry."""

import logging
from typing import Optional

from medcenter.core.scheduling.errors import DuplicateError, NotFoundError
from medcenter.core.scheduling.models import Doctor

logger = logging.getLogger(__name__)


class Registry:
    """Known specialties and the doctors practicing them."""

    def __init__(self):
        # dicts keep insertion order
        self._specialties: dict[str, None] = {}
        self._doctors: dict[str, Doctor] = {}

    def add_specialties(self, *specialties: str) -> None:
        """Register specialties. Duplicates are ignored."""
        for specialty in specialties:
            self._specialties.setdefault(specialty, None)

    def get_specialties(self) -> list[str]:
        return list(self._specialties)

    def add_doctor(self, code: str, name: str, surname: str, specialty: str) -> Doctor:
        """Register a doctor.

        Raises:
            DuplicateError: code already registered
            NotFoundError: unknown specialty
        """
        if code in self._doctors:
            raise DuplicateError(f"Doctor {code!r} already exists")
        if specialty not in self._specialties:
            raise NotFoundError(f"Unknown specialty {specialty!r}")

        doctor = Doctor(code=code, name=name, surname=surname, specialty=specialty)
        self._doctors[code] = doctor
        logger.info(f"Registered doctor {code} ({specialty})")
        return doctor

    def get_doctor(self, code: str) -> Optional[Doctor]:
        return self._doctors.get(code)

    def require_doctor(self, code: str) -> Doctor:
        """Get a doctor or raise NotFoundError."""
        doctor = self._doctors.get(code)
        if doctor is None:
            raise NotFoundError(f"Unknown doctor {code!r}")
        return doctor

    def doctors(self) -> list[Doctor]:
        return list(self._doctors.values())

    def get_specialists(self, specialty: str) -> list[str]:
        """Codes of the doctors with the given specialty."""
        return [d.code for d in self._doctors.values() if d.specialty == specialty]
