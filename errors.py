"""
Exception taxonomy shared by the service layer and the API boundary.

Services raise these; the API blueprint maps each one to a status code.
"""


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Raised when an input field is missing or malformed."""
    pass


class NotFoundError(ServiceError):
    """Raised when an id does not resolve to an existing record."""
    pass


class ReferenceNotFoundError(ValidationError, NotFoundError):
    """Raised when a payload references a record that does not exist."""
    pass


class BusinessRuleError(ServiceError):
    """Raised when well-formed input violates a domain rule."""
    pass


class UnexpectedError(ServiceError):
    """Raised when the store fails for reasons the caller cannot fix."""
    pass
