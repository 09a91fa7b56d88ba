"""
Application errors. Each carries the HTTP status an API layer should map it to.
"""


class AppError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """
    Raised when a record violates a field constraint before it is persisted.
    `errors` maps each offending field to a human readable message.
    """

    status_code = 422

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        super().__init__(message)
        self.errors = errors or {}


class DuplicateEmailError(AppError):
    """Raised when the storage engine rejects a write on the unique email constraint."""

    status_code = 409

    def __init__(self, email: str | None):
        super().__init__(f"User with email {email!r} already exists.")
        self.email = email
