"""Pydantic DTOs for the User feature."""

from datetime import date, datetime

from pydantic import EmailStr, Field, model_validator

from event_platform.domain.entities import UserRole

from .common import CamelModel, EntityResponse
from .person import PersonResponse
from .types import PersonName, Phone

USER_SORT_FIELDS = frozenset({
    "createdAt",
    "updatedAt",
    "email",
    "role",
    "entityStatus",
    "lastLogin",
})
USER_DEFAULT_LIMIT = 10


class UserCreate(CamelModel):
    """Schema for creating a user together with their person record."""

    first_name: PersonName
    last_name: PersonName
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    phone: Phone | None = None
    date_of_birth: date | None = None
    role: UserRole = UserRole.USER
    company_id: str | None = None

    @model_validator(mode="after")
    def _check_role_company(self) -> "UserCreate":
        if self.role == UserRole.COMPANY_ADMIN and not self.company_id:
            raise ValueError("companyId is required for company_admin users")
        if self.role == UserRole.USER and self.company_id:
            raise ValueError("companyId is not allowed for user role")
        return self


class UserUpdate(CamelModel):
    """Schema for updating a user — all fields optional."""

    email: EmailStr | None = None
    role: UserRole | None = None
    company_id: str | None = None
    email_verified: bool | None = None


class UserResponse(EntityResponse):
    person_id: str
    email: str
    role: UserRole
    company_id: str | None = None
    email_verified: bool
    last_login: datetime | None = None
    person: PersonResponse | None = None
