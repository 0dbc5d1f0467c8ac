"""User accounts: the owner side of the item relationship."""

from stratum.domain.users.models import User
from stratum.domain.users.repository import UserRepository
from stratum.domain.users.service import UserService

__all__ = ["User", "UserRepository", "UserService"]
