"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input failed a shape or range check.

    ``errors`` maps each offending field to its message so callers can
    report every problem at once instead of only the first.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.errors = dict(errors or {})


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CropNotFoundError(EntityNotFoundError):
    """No crop matched a lookup query."""


class NoProductMatchError(EntityNotFoundError):
    """A crop was found but no product relates to it."""


class NotReadyError(DomainException):
    """The crop is missing or has not reached full maturity."""


class PersistenceError(DomainException):
    """The backing store could not be read or written."""


class UnsupportedMediaError(ValidationError):
    """An uploaded file has a content type we do not accept."""


class PayloadTooLargeError(ValidationError):
    """An uploaded file exceeds the size limit."""
