"""Abstract repository interface (port) for User persistence."""

from abc import abstractmethod
from datetime import datetime

from event_platform.domain.entities import User

from .entity_repository import EntityRepository


class UserRepository(EntityRepository[User]):
    """Port for user account persistence."""

    entity_name = "User"

    @abstractmethod
    async def find_by_email(self, email: str, *, include_deleted: bool = False) -> User | None:
        """Retrieve a user by normalized email."""
        ...

    @abstractmethod
    async def find_by_verification_token(self, token: str) -> User | None:
        """Retrieve the non-deleted user holding an email verification token."""
        ...

    @abstractmethod
    async def find_by_reset_token(self, token: str, now: datetime) -> User | None:
        """Retrieve the non-deleted user whose reset token matches and expires after ``now``."""
        ...
