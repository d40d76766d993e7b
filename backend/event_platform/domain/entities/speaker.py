"""Domain entity: a speaker profile uploaded by a company."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .lifecycle import LifecycleEntity


class Currency(str, Enum):
    PEN = "PEN"
    USD = "USD"


class UploadSource(str, Enum):
    """How the speaker entered the platform."""

    MANUAL = "manual"
    EXCEL = "excel"
    CSV = "csv"
    BULK_IMPORT = "bulk_import"


@dataclass
class Speaker(LifecycleEntity):
    """A speaker of a company; (person_id, company_id) is unique among non-deleted speakers."""

    person_id: str
    company_id: str
    specialty: str
    years_experience: int
    biography: str | None = None
    certifications: list[str] = field(default_factory=list)
    hourly_rate: float | None = None
    currency: Currency = Currency.PEN
    social_media: dict[str, str] | None = None
    languages: list[str] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)
    audience_size: dict[str, int] | None = None
    notes: str | None = None
    uploaded_via: UploadSource = UploadSource.MANUAL
    created_by: str | None = None
    updated_by: str | None = None


@dataclass
class SpeakerStats:
    """Aggregate figures over the speakers of one company."""

    total_speakers: int = 0
    active_speakers: int = 0
    avg_experience: float = 0.0
    avg_hourly_rate: float = 0.0
    top_specialties: list[dict[str, Any]] = field(default_factory=list)
