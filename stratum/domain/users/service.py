"""Business rules for user accounts.

The service sits between the schema layer and the repository: payloads
arrive already validated for shape, and the checks here are the ones that
need the database, such as email uniqueness.
"""

from typing import TYPE_CHECKING

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stratum.core.exceptions import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from stratum.core.observability import trace_operation
from stratum.core.security import hash_password, verify_password
from stratum.domain.users.models import User
from stratum.domain.users.repository import UserRepository

if TYPE_CHECKING:
    from stratum.api.schemas.pagination import PaginationParams
    from stratum.api.schemas.users import UserCreate, UserUpdate

EMPTY_UPDATE_MESSAGE = "No fields provided for update"
EMAIL_TAKEN_MESSAGE = "A user with this email already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class UserService:
    """Create, read, update and delete users."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repository = UserRepository(session)

    async def _ensure_email_available(self, email: str) -> None:
        if await self.repository.get_by_email(email) is not None:
            raise ConflictError(EMAIL_TAKEN_MESSAGE, context={"email": email})

    async def create_user(self, data: "UserCreate") -> User:
        """Register a new user.

        Args:
            data: Validated create payload.

        Returns:
            User: The persisted user.

        Raises:
            ConflictError: If the email is already registered.
        """
        with trace_operation("users.create"):
            await self._ensure_email_available(data.email)
            user = User(
                email=data.email,
                full_name=data.full_name,
                is_active=data.is_active,
                hashed_password=hash_password(data.password),
            )
            try:
                user = await self.repository.create(user)
            except IntegrityError as e:
                raise ConflictError(
                    EMAIL_TAKEN_MESSAGE, context={"email": data.email}, cause=e
                ) from e

        logger.info("User registered", user_id=user.id)
        return user

    async def get_user(self, user_id: int) -> User:
        """Fetch a user or raise ``NotFoundError``."""
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(
                f"User with ID {user_id} not found", context={"user_id": user_id}
            )
        return user

    async def list_users(self, pagination: "PaginationParams") -> tuple[list[User], int]:
        """Return one page of users and the total count."""
        users = await self.repository.get_page(pagination.offset, pagination.page_size)
        total = await self.repository.count()
        return users, total

    async def update_user(self, user_id: int, data: "UserUpdate") -> User:
        """Apply a partial update.

        Args:
            user_id: ID of the user to update.
            data: Validated update payload.

        Returns:
            User: The updated user.

        Raises:
            ValidationError: If the payload carries no fields.
            NotFoundError: If the user does not exist.
            ConflictError: If the new email belongs to another user.
        """
        if data.is_empty:
            raise ValidationError(EMPTY_UPDATE_MESSAGE, context={"user_id": user_id})

        with trace_operation("users.update", user_id=user_id):
            user = await self.get_user(user_id)
            changes = data.to_update_dict()

            new_email = changes.get("email")
            if new_email is not None and new_email != user.email:
                await self._ensure_email_available(new_email)

            if (password := changes.pop("password", None)) is not None:
                changes["hashed_password"] = hash_password(password)

            try:
                updated = await self.repository.update(user_id, changes)
            except IntegrityError as e:
                raise ConflictError(
                    EMAIL_TAKEN_MESSAGE, context={"user_id": user_id}, cause=e
                ) from e

        if updated is None:
            raise NotFoundError(
                f"User with ID {user_id} not found", context={"user_id": user_id}
            )
        logger.info("User updated", user_id=user_id, fields=sorted(changes))
        return updated

    async def delete_user(self, user_id: int) -> None:
        """Delete a user and, through the foreign key, their items.

        Raises:
            NotFoundError: If the user does not exist.
        """
        with trace_operation("users.delete", user_id=user_id):
            deleted = await self.repository.delete(user_id)
        if not deleted:
            raise NotFoundError(
                f"User with ID {user_id} not found", context={"user_id": user_id}
            )
        logger.info("User deleted", user_id=user_id)

    async def authenticate(self, email: str, password: str) -> User:
        """Check a user's credentials.

        Unknown emails, wrong passwords and inactive accounts all fail with
        the same message.

        Args:
            email: Email address.
            password: Plain text password.

        Returns:
            User: The authenticated user.

        Raises:
            UnauthorizedError: If the credentials are not valid.
        """
        user = await self.repository.get_by_email(email)
        if (
            user is None
            or not user.is_active
            or not verify_password(password, user.hashed_password)
        ):
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)
        return user
