"""Pydantic DTOs for the Company feature."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from event_platform.domain.entities import CompanyType

from .common import CamelModel, EntityResponse
from .types import Phone, UrlStr

COMPANY_SORT_FIELDS = frozenset({"createdAt", "updatedAt", "name", "type"})
COMPANY_DEFAULT_LIMIT = 10


class AddressSchema(CamelModel):
    street: str | None = Field(None, max_length=200)
    city: str = Field(..., min_length=1, max_length=100)
    state: str | None = Field(None, max_length=100)
    country: str = Field(..., min_length=2, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    country_code: str | None = Field(None, min_length=2, max_length=3)


class CompanySettingsSchema(CamelModel):
    can_upload_speakers: bool = True
    can_create_events: bool = True
    max_events_per_month: int | None = Field(None, ge=0)


class CompanyCreate(CamelModel):
    """Schema for creating a company."""

    name: str = Field(..., min_length=2, max_length=150)
    contact_email: EmailStr
    description: str | None = Field(None, max_length=2000)
    website: UrlStr | None = None
    contact_phone: Phone | None = None
    address: AddressSchema | None = None
    type: CompanyType = CompanyType.EVENT_ORGANIZER
    commission_rate: float = Field(0.0, ge=0, le=1)
    settings: CompanySettingsSchema = Field(default_factory=CompanySettingsSchema)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return value.strip() if isinstance(value, str) else value


class CompanyUpdate(CamelModel):
    """Schema for updating a company — all fields optional."""

    name: str | None = Field(None, min_length=2, max_length=150)
    contact_email: EmailStr | None = None
    description: str | None = Field(None, max_length=2000)
    website: UrlStr | None = None
    contact_phone: Phone | None = None
    address: AddressSchema | None = None
    type: CompanyType | None = None
    commission_rate: float | None = Field(None, ge=0, le=1)
    settings: CompanySettingsSchema | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: str | None) -> str | None:
        return value.strip() if isinstance(value, str) else value


class CompanyResponse(EntityResponse):
    name: str
    contact_email: str
    description: str | None = None
    logo: str | None = None
    logo_url: str | None = None
    website: str | None = None
    contact_phone: str | None = None
    address: AddressSchema | None = None
    type: CompanyType
    commission_rate: float
    settings: CompanySettingsSchema
    approved_by: str | None = None
    approved_at: datetime | None = None
