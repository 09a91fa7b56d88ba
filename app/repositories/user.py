import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.utils import apply_dict_updates
from app.exceptions.http import DuplicateEmailError
from app.models.definitions import NAMED_QUERIES, User
from app.models.tables import users_table
from app.validation import validate_user

logger = logging.getLogger(__name__)


class UserRepository:
    """
    Storage access for the `users` table.

    Writes are validated before they are flushed and are never committed
    here; the caller owns the transaction boundary.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> User | None:
        """Retrieves a User by their primary ID."""
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        """Retrieves a User by their unique email."""
        stmt = select(User).where(User.email == email)
        return (await self.session.scalars(stmt)).one_or_none()

    async def find_all(self) -> Sequence[User]:
        """Runs the `User.findAll` named query: every user, in no particular order."""
        return (await self.session.scalars(NAMED_QUERIES[User.FIND_ALL])).all()

    async def create(self, create_data: dict[str, Any]) -> User:
        """
        Creates a new User record and persists it.

        Raises:
            ValidationError: If the email is malformed or the display name is blank.
            DuplicateEmailError: If another user already has this email.
        """
        user = User()
        apply_dict_updates(user, create_data, excluded_attrs={"id"})
        validate_user(user)

        self.session.add(user)
        await self._flush(user)
        logger.info("Created user id=%s", user.id)
        return user

    async def update(self, user_id: int, update_data: dict[str, Any]) -> User | None:
        """
        Applies profile changes to an existing user. `id` and `password` are never
        touched here; see update_password.

        The changes are validated on a detached copy first, so a rejected update
        leaves the loaded user (and the session) untouched.

        Returns None when no user has the given ID.
        """
        user_to_update = await self.get_by_id(user_id)
        if not user_to_update:
            return None

        excluded_attrs = {"id", "password"}
        candidate = User(**{key: getattr(user_to_update, key) for key in users_table.c.keys()})
        apply_dict_updates(entity=candidate, update_data=update_data, excluded_attrs=excluded_attrs)
        validate_user(candidate)

        apply_dict_updates(entity=user_to_update, update_data=update_data, excluded_attrs=excluded_attrs)
        await self._flush(user_to_update)
        await self.session.refresh(user_to_update)
        logger.info("Updated user id=%s", user_id)
        return user_to_update

    async def update_password(self, user_id: int, new_hashed_password: str) -> bool:
        """
        Replaces the stored password of a user with an already hashed value.
        Returns False when no user has the given ID.
        """
        user_to_update = await self.get_by_id(user_id)
        if not user_to_update:
            return False
        user_to_update.password = new_hashed_password
        await self._flush(user_to_update)
        return True

    async def _flush(self, user: User) -> None:
        # a failed flush expires `user`, so read the email beforehand
        email = user.email
        try:
            await self.session.flush()
        except IntegrityError as exc:
            logger.info("Rejected write for email %r: already registered", email)
            raise DuplicateEmailError(email) from exc
