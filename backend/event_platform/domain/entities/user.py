"""Domain entity: a login account bound to a Person and optionally to a Company."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .lifecycle import LifecycleEntity


class UserRole(str, Enum):
    """Authorization roles, from platform-wide to end user."""

    PLATFORM_ADMIN = "platform_admin"
    COMPANY_ADMIN = "company_admin"
    EVENT_STAFF = "event_staff"
    USER = "user"


@dataclass
class User(LifecycleEntity):
    """An account. ``email`` is unique among non-deleted users.

    ``password_hash`` never leaves the service layer.
    """

    person_id: str
    email: str
    password_hash: str
    role: UserRole = UserRole.USER
    company_id: str | None = None
    email_verified: bool = False
    last_login: datetime | None = None
    email_verification_token: str | None = None
    password_reset_token: str | None = None
    password_reset_expires: datetime | None = None


@dataclass(frozen=True)
class Actor:
    """The authenticated caller, as carried by a bearer token."""

    user_id: str
    email: str
    role: UserRole
    company_id: str | None = None

    @property
    def is_platform_admin(self) -> bool:
        return self.role == UserRole.PLATFORM_ADMIN

    @property
    def is_company_admin(self) -> bool:
        return self.role == UserRole.COMPANY_ADMIN
