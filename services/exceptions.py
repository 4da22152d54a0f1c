class ServiceError(Exception):
    """Base class for errors raised by the workflows."""

    default_message = "Service error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class NotFoundError(ServiceError):
    """A referenced author or book id does not exist."""

    default_message = "Not found"


class BusinessRuleViolationError(ServiceError):
    """A request breaks a domain rule (e.g. un-publishing a published book)."""

    default_message = "Business rule violation"


class InternalInconsistencyError(ServiceError):
    """The storage engine did not produce a row after a write that should have."""

    default_message = "Internal inconsistency"
