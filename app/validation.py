"""
Field constraints checked before a User is written.

The storage layer calls `validate_user` ahead of every insert and update, so
a record with a malformed email or a blank display name never reaches the
database.
"""

import logging

from email_validator import EmailNotValidError, validate_email

from app.exceptions.http import ValidationError
from app.models.definitions import User

logger = logging.getLogger(__name__)


def validate_email_syntax(value: str) -> bool:
    """Checks address syntax only; no DNS lookups are made."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_user(user: User) -> None:
    """
    Collects every constraint violation on `user` and raises a single
    ValidationError listing them.

    A null email is not checked; any non-null email must be a valid address.
    """
    errors: dict[str, str] = {}

    if user.email is not None and not validate_email_syntax(user.email):
        errors["email"] = "not a well-formed email address"

    if is_blank(user.display_name):
        errors["display_name"] = "may not be blank"

    if errors:
        logger.info("Rejected user %r: %s", user.email, ", ".join(sorted(errors)))
        raise ValidationError("User failed validation.", errors)
