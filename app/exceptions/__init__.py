from .http import AppError, DuplicateEmailError, ValidationError

__all__ = ["AppError", "DuplicateEmailError", "ValidationError"]
