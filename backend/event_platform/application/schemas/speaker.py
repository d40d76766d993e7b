"""Pydantic DTOs for the Speaker feature."""

from pydantic import EmailStr, Field, field_validator, model_validator

from event_platform.domain.entities import Currency, UploadSource

from .common import CamelModel, EntityResponse
from .person import PersonResponse
from .types import PersonName, Phone, UrlStr

SPEAKER_SORT_FIELDS = frozenset({
    "createdAt",
    "updatedAt",
    "specialty",
    "yearsExperience",
    "hourlyRate",
})
SPEAKER_DEFAULT_LIMIT = 10


class SocialMediaSchema(CamelModel):
    linkedin: UrlStr | None = None
    twitter: UrlStr | None = None
    website: UrlStr | None = None
    github: UrlStr | None = None


class AudienceSizeSchema(CamelModel):
    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_range(self) -> "AudienceSizeSchema":
        if self.min > self.max:
            raise ValueError("audienceSize.min must not exceed audienceSize.max")
        return self


class _SpeakerProfile(CamelModel):
    """Profile fields shared by the create variants."""

    specialty: str = Field(..., min_length=2, max_length=100)
    years_experience: int = Field(..., ge=0, le=50)
    biography: str | None = Field(None, max_length=2000)
    certifications: list[str] = Field(default_factory=list)
    hourly_rate: float | None = Field(None, ge=0, le=10000)
    currency: Currency = Currency.PEN
    social_media: SocialMediaSchema | None = None
    languages: list[str] = Field(default_factory=list)
    topics: list[str] = Field(default_factory=list)
    audience_size: AudienceSizeSchema | None = None
    notes: str | None = Field(None, max_length=1000)

    @field_validator("specialty", mode="before")
    @classmethod
    def _strip_specialty(cls, value: str) -> str:
        return value.strip() if isinstance(value, str) else value

    @field_validator("topics")
    @classmethod
    def _normalize_topics(cls, value: list[str]) -> list[str]:
        return [topic.strip().lower() for topic in value if topic.strip()]


class SpeakerCreate(_SpeakerProfile):
    """Schema for creating a speaker for an existing person."""

    person_id: str
    company_id: str
    uploaded_via: UploadSource = UploadSource.MANUAL


class SpeakerWithPersonCreate(_SpeakerProfile):
    """Schema for creating a speaker together with a new person."""

    company_id: str
    first_name: PersonName
    last_name: PersonName
    email: EmailStr | None = None
    phone: Phone | None = None


class SpeakerUpdate(CamelModel):
    """Schema for updating a speaker — all fields optional."""

    company_id: str | None = None
    specialty: str | None = Field(None, min_length=2, max_length=100)
    years_experience: int | None = Field(None, ge=0, le=50)
    biography: str | None = Field(None, max_length=2000)
    certifications: list[str] | None = None
    hourly_rate: float | None = Field(None, ge=0, le=10000)
    currency: Currency | None = None
    social_media: SocialMediaSchema | None = None
    languages: list[str] | None = None
    topics: list[str] | None = None
    audience_size: AudienceSizeSchema | None = None
    notes: str | None = Field(None, max_length=1000)

    @field_validator("topics")
    @classmethod
    def _normalize_topics(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [topic.strip().lower() for topic in value if topic.strip()]


class SpeakerResponse(EntityResponse):
    person_id: str
    company_id: str
    specialty: str
    years_experience: int
    biography: str | None = None
    certifications: list[str]
    hourly_rate: float | None = None
    currency: Currency
    social_media: SocialMediaSchema | None = None
    languages: list[str]
    topics: list[str]
    audience_size: AudienceSizeSchema | None = None
    notes: str | None = None
    uploaded_via: UploadSource
    created_by: str | None = None
    updated_by: str | None = None


class SpeakerWithPersonResponse(CamelModel):
    speaker: SpeakerResponse
    person: PersonResponse


class SpecialtyCount(CamelModel):
    specialty: str
    count: int


class SpeakerStatsResponse(CamelModel):
    total_speakers: int
    active_speakers: int
    avg_experience: float
    avg_hourly_rate: float
    top_specialties: list[SpecialtyCount]
