import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security.password import check_password, hash_password
from app.models.definitions import User
from app.repositories import UserRepository
from app.schemas import LoginRequest, PasswordChangeRequest, ProfileRequest, UserRequest, UserResponse

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: AsyncSession, user_repo: UserRepository):
        self._session = session
        self._user_repo = user_repo

    # --- 1. USER REGISTRATION ---

    async def register_user(self, data: UserRequest) -> UserResponse:
        """
        Registers a new user with a hashed password and commits it.

        Raises:
            ValidationError: If the record breaks a field constraint.
            DuplicateEmailError: If the email is already registered.
        """
        new_user_data = data.model_dump(exclude={"password"})
        new_user_data["password"] = hash_password(data.password)

        created_user: User = await self._write(self._user_repo.create(new_user_data))
        return UserResponse.model_validate(created_user)

    # --- 2. USER AUTHENTICATION ---

    async def authenticate(self, credentials: LoginRequest) -> UserResponse | None:
        """
        Authenticates a user by email and password.
        """
        user_orm = await self._user_repo.get_by_email(credentials.email)

        if not user_orm:
            return None

        if check_password(credentials.password, user_orm.password):
            return UserResponse.model_validate(user_orm)

        logger.info("Failed login for user id=%s", user_orm.id)
        return None

    # --- 3. LOOKUPS ---

    async def get_user(self, user_id: int) -> UserResponse | None:
        user_orm = await self._user_repo.get_by_id(user_id)
        return UserResponse.model_validate(user_orm) if user_orm else None

    async def list_users(self) -> list[UserResponse]:
        return [UserResponse.model_validate(user) for user in await self._user_repo.find_all()]

    # --- 4. PASSWORD AND PROFILE MANAGEMENT ---

    async def update_profile(self, user_id: int, data: ProfileRequest) -> UserResponse | None:
        """
        Updates non-password profile fields. Only fields present in the request are
        applied, so an explicit null clears a social link while an omitted one is kept.
        """
        update_data = data.model_dump(exclude_unset=True)
        if not update_data:
            return await self.get_user(user_id)  # Return current if nothing to update

        updated_user_orm = await self._write(self._user_repo.update(user_id, update_data))
        return UserResponse.model_validate(updated_user_orm) if updated_user_orm else None

    async def change_password(self, user_id: int, data: PasswordChangeRequest) -> bool:
        """
        Changes the user's password after verifying the old password.
        """
        user_orm = await self._user_repo.get_by_id(user_id)

        if not user_orm:
            return False

        if not check_password(data.old_password, user_orm.password):
            return False

        return await self._write(self._user_repo.update_password(user_id, hash_password(data.new_password)))

    async def _write(self, operation):
        """Awaits a repository write and commits it, rolling back if it is rejected."""
        try:
            result = await operation
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
        return result
