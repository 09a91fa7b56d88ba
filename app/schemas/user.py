"""
Pydantic schemas defining the contract for user identity and authentication
across the Presentation (API) and Service Layers.

All schemas accept both snake_case and camelCase keys; responses are emitted
in camelCase (`model_dump(by_alias=True)`).
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from app.validation import is_blank

CAMEL_CASE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _reject_blank(value: str) -> str:
    if is_blank(value):
        raise ValueError("may not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_reject_blank)]


class SocialAccounts(BaseModel):
    """Links to the user's accounts on external identity providers."""

    model_config = CAMEL_CASE_CONFIG

    facebook: str | None = Field(default=None, description="Linked Facebook account")
    google: str | None = Field(default=None, description="Linked Google account")
    linkedin: str | None = Field(default=None, description="Linked LinkedIn account")
    github: str | None = Field(default=None, description="Linked GitHub account")
    foursquare: str | None = Field(default=None, description="Linked Foursquare account")
    twitter: str | None = Field(default=None, description="Linked Twitter account")


# --- Input Schemas (Requests / Commands) ---


class UserRequest(SocialAccounts):
    """
    Schema for user creation requests. Used by the Service Layer for registration.
    """

    email: EmailStr = Field(..., description="User's unique email address")
    display_name: NonBlankStr = Field(..., max_length=255, description="Name shown to other users")
    password: str = Field(..., min_length=8, description="User's password (min 8 characters, will be hashed)")


class ProfileRequest(SocialAccounts):
    """
    Schema for updating user profile fields. Fields are optional as they are updates;
    only the fields that were explicitly sent are applied.
    """

    email: EmailStr | None = Field(default=None, description="User's email address")
    display_name: NonBlankStr | None = Field(default=None, max_length=255, description="Name shown to other users")


class PasswordChangeRequest(BaseModel):
    """
    Schema for changing password (requires old password verification).
    """

    model_config = CAMEL_CASE_CONFIG

    old_password: str = Field(..., description="Current password for verification")
    new_password: str = Field(..., min_length=8, description="New password (minimum 8 characters)")


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's plain text password")


# --- Output Schema (Response) ---


class UserResponse(SocialAccounts):
    """
    External representation of a User. This is an allow-list: only the fields
    declared here are emitted, so the password (and the internal id) never
    appear in serialized output.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    email: str | None = Field(default=None, description="User's email address")
    display_name: str | None = Field(default=None, description="Name shown to other users")
