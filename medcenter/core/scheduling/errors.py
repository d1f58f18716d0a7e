"""
Scheduling errors.

Every failure the engine reports is a MedError. Callers can catch the
family (NotFoundError, InvalidInputError, StateConflictError) or the
specific subclass.
"""


class MedError(Exception):
    """Base class for scheduling failures."""
    pass


class NotFoundError(MedError):
    """Unknown doctor, specialty, patient, appointment or slot."""
    pass


class InvalidSlotError(NotFoundError):
    """No slot on the doctor's calendar matches the requested range."""
    pass


class InvalidInputError(MedError):
    """Malformed time, date, range or duration."""
    pass


class StateConflictError(MedError):
    """The operation is not allowed in the current state."""
    pass


class DuplicateError(StateConflictError):
    """An entity with the same identifier already exists."""
    pass


class SlotTakenError(StateConflictError):
    """The slot is already held by another appointment."""
    pass


class WrongDoctorError(StateConflictError):
    """The appointment belongs to a different doctor."""
    pass


class NotAcceptedError(StateConflictError):
    """The patient has not been accepted at the reception."""
    pass


class WrongDateError(StateConflictError):
    """The appointment is not on the current date."""
    pass
