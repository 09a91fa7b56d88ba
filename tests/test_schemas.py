"""
Tests for the request schemas and the external (JSON) representation of a User.
"""
import json

import pytest
from pydantic import ValidationError as SchemaValidationError

from app.models import User
from app.schemas import PasswordChangeRequest, ProfileRequest, UserRequest, UserResponse

EXPOSED_KEYS = {"email", "displayName", "facebook", "google", "linkedin", "github", "foursquare", "twitter"}


class TestUserResponse:
    @pytest.mark.parametrize("password", ["s3cret-passw0rd", "", None])
    def test_password_never_serialized(self, password):
        user = User(id=1, email="a@example.com", password=password, display_name="Alice")

        payload = UserResponse.model_validate(user).model_dump_json(by_alias=True)

        assert "password" not in payload
        if password:
            assert password not in payload

    def test_serialized_keys_are_the_allow_list(self):
        user = User(id=5, email="a@example.com", password="pw", display_name="Alice", github="alice")

        data = json.loads(UserResponse.model_validate(user).model_dump_json(by_alias=True))

        assert set(data) == EXPOSED_KEYS
        assert data["displayName"] == "Alice"
        assert data["github"] == "alice"
        assert data["twitter"] is None

    def test_python_dump_also_omits_password(self):
        user = User(email="a@example.com", password="pw", display_name="Alice")
        assert "password" not in UserResponse.model_validate(user).model_dump()


class TestUserRequest:
    def test_accepts_camel_case_keys(self):
        req = UserRequest.model_validate(
            {"email": "a@example.com", "displayName": "Alice", "password": "longenough", "github": "alice"}
        )
        assert req.display_name == "Alice"
        assert req.github == "alice"
        assert req.twitter is None

    def test_rejects_invalid_email(self):
        with pytest.raises(SchemaValidationError):
            UserRequest(email="not-an-email", display_name="Alice", password="longenough")

    @pytest.mark.parametrize("display_name", ["", "   "])
    def test_rejects_blank_display_name(self, display_name):
        with pytest.raises(SchemaValidationError):
            UserRequest(email="a@example.com", display_name=display_name, password="longenough")

    def test_rejects_short_password(self):
        with pytest.raises(SchemaValidationError):
            UserRequest(email="a@example.com", display_name="Alice", password="short")


class TestProfileRequest:
    def test_only_sent_fields_are_set(self):
        req = ProfileRequest.model_validate({"displayName": "Bob", "twitter": None})
        assert req.model_dump(exclude_unset=True) == {"display_name": "Bob", "twitter": None}

    def test_rejects_blank_display_name(self):
        with pytest.raises(SchemaValidationError):
            ProfileRequest(display_name="  ")


def test_password_change_request_accepts_camel_case():
    req = PasswordChangeRequest.model_validate({"oldPassword": "old-secret", "newPassword": "new-secret"})
    assert req.old_password == "old-secret"
    assert req.new_password == "new-secret"
