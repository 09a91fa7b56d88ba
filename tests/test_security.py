"""
Unit tests for password hashing.
"""
from app.core.security import check_password, hash_password


def test_hash_is_salted():
    assert hash_password("TestPassword123") != hash_password("TestPassword123")


def test_hash_is_not_plain_text():
    hashed = hash_password("TestPassword123")
    assert hashed != "TestPassword123"
    assert hashed.startswith("$argon2")


def test_check_password():
    hashed = hash_password("TestPassword123")
    assert check_password("TestPassword123", hashed) is True
    assert check_password("WrongPassword456", hashed) is False


def test_missing_hash_never_matches():
    assert check_password("anything", None) is False
    assert check_password("", "") is False
