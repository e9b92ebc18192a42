class DomainError(Exception):
    """Base class for errors raised by the CMS domain layer."""

    status_code = 400


class InvariantViolation(DomainError):
    pass


class RecordNotFound(DomainError):
    status_code = 404
