"""Pydantic DTOs for the Person feature."""

from datetime import date

from pydantic import EmailStr

from event_platform.domain.entities import PersonType

from .common import CamelModel, EntityResponse
from .types import PersonName, Phone

PERSON_SORT_FIELDS = frozenset({
    "createdAt",
    "updatedAt",
    "firstName",
    "lastName",
    "email",
    "type",
    "entityStatus",
})
PERSON_DEFAULT_LIMIT = 20


class PersonCreate(CamelModel):
    """Schema for creating a person."""

    first_name: PersonName
    last_name: PersonName
    email: EmailStr | None = None
    phone: Phone | None = None
    date_of_birth: date | None = None
    type: PersonType = PersonType.USER_PERSON


class PersonUpdate(CamelModel):
    """Schema for updating a person — all fields optional."""

    first_name: PersonName | None = None
    last_name: PersonName | None = None
    email: EmailStr | None = None
    phone: Phone | None = None
    date_of_birth: date | None = None
    type: PersonType | None = None


class PersonResponse(EntityResponse):
    first_name: str
    last_name: str
    full_name: str
    email: str | None = None
    phone: str | None = None
    date_of_birth: date | None = None
    type: PersonType
