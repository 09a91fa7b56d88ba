"""
Password hashing helpers. Stored passwords are argon2 hashes; the plain
text never reaches the database.
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def check_password(plain: str, hashed: str | None) -> bool:
    """Verifies a plain password against a stored hash. A missing hash never matches."""
    if not hashed:
        return False
    return pwd_context.verify(plain, hashed)
