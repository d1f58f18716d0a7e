"""
Arrival Queue

Reception-desk acceptance and "who's next" selection. The queue is not a
stored structure: it is recomputed from ledger state on every request.
"""

import logging
from typing import Optional

from medcenter.core.scheduling.ledger import AppointmentLedger

logger = logging.getLogger(__name__)


class ArrivalQueue:
    """Same-day queue of accepted, not yet completed appointments."""

    def __init__(self, ledger: AppointmentLedger):
        self._ledger = ledger

    def accept(self, ssn: str) -> bool:
        """Mark a patient as arrived.

        Returns:
            True if the patient is known, False otherwise (no-op)
        """
        patient = self._ledger.get_patient(ssn)
        if patient is None:
            logger.debug(f"Accept ignored for unknown patient {ssn}")
            return False

        patient.accepted = True
        logger.info(f"Accepted patient {ssn}")
        return True

    def next_appointment(self, code: str, current_date: Optional[str]) -> Optional[str]:
        """Earliest-created waiting appointment of a doctor on current_date.

        Waiting means the patient is accepted and the appointment is not
        completed.

        Returns:
            Appointment id or None
        """
        if current_date is None:
            return None

        waiting = [
            a
            for a in self._ledger.appointments(code, current_date)
            if a.patient.accepted and not a.completed
        ]
        if not waiting:
            return None

        return min(waiting, key=lambda a: a.seq).id
