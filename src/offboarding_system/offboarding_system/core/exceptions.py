class DomainError(Exception):
    """Base exception for business rule violations.

    ``status_code`` is the HTTP status the error handlers answer with.
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400


class ConflictError(ValidationError):
    """Raised when a unique field (employee ID, email) is already taken."""

    def __init__(self, message: str, *, field: str):
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Raised when the targeted submission does not exist."""

    status_code = 404
