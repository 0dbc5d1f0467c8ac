"""Queries specific to users."""

from sqlalchemy.ext.asyncio import AsyncSession

from stratum.domain.users.models import User
from stratum.infrastructure.database.repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for ``User`` rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Find a user by email address.

        Emails are stored lower-cased, so the lookup lower-cases its input.

        Args:
            email: Email address to look up.

        Returns:
            User | None: The matching user, if any.
        """
        return await self.find_one_by(email=email.lower())
