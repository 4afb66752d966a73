class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class RangeError(ValidationError):
    """Raised for problems with a requested date range."""


class InvalidRangeError(RangeError):
    """Raised when a date range is unparseable or start falls after end."""


class DuplicateNameError(ValidationError):
    """Raised when a worker with the same name is already on the roster."""


class EmptyNameError(ValidationError):
    """Raised when a worker name is blank after trimming."""


class InvalidTimeError(ValidationError):
    """Raised when an arrival time is not a valid HH:MM value."""


class WorkerIndexError(DomainError, IndexError):
    """Raised when a roster index does not point at an existing worker."""
