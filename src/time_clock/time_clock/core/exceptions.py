class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when an employee name / date of birth pair does not check out."""


class DuplicatePunchError(ValidationError):
    """Raised when today's record already holds the requested punch."""


class MissingPunchInError(ValidationError):
    """Raised on punch-out when there is no open record for today."""


class MalformedTimeError(DomainError):
    """Raised when a clock time cannot be parsed as HH:MM."""

    kind = "MALFORMED_TIME"

    def __init__(self, value):
        super().__init__(f"Malformed time value: {value!r}")
        self.value = value


class PunchConflictError(DomainError):
    """Raised by storage when a concurrent request already wrote the record."""
