class InvalidTimeFormat(ValueError):
    """Raised when a time string does not match the H:MM / HH:MM format."""
    pass


class InvalidScheduleError(ValueError):
    """Raised when an open day's working hours do not form a same-day interval."""
    pass


class BookingValidationError(ValueError):
    """Raised when a booking request is incomplete (empty cart, no date or time)."""
    pass


class SlotUnavailableError(RuntimeError):
    """Raised when the requested start time is not bookable against the current snapshot."""
    pass


class AppointmentNotFoundError(LookupError):
    pass


class ServiceNotFoundError(LookupError):
    pass


class MasterNotFoundError(LookupError):
    pass
