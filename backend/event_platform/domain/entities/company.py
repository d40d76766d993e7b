"""Domain entity: a company, the tenant of the multi-tenant model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .lifecycle import LifecycleEntity


class CompanyType(str, Enum):
    """Role a company plays on the platform."""

    EVENT_ORGANIZER = "event_organizer"
    SPONSOR = "sponsor"
    PARTNER = "partner"


def default_company_settings() -> dict[str, Any]:
    return {
        "can_upload_speakers": True,
        "can_create_events": True,
        "max_events_per_month": None,
    }


@dataclass
class Company(LifecycleEntity):
    """A tenant. ``contact_email`` is unique among non-deleted companies.

    ``address`` and ``settings`` are plain value objects stored as JSON:
        address:  {"street", "city", "state", "country", "zip_code", "country_code"}
        settings: {"can_upload_speakers", "can_create_events", "max_events_per_month"}
    """

    name: str
    contact_email: str
    type: CompanyType = CompanyType.EVENT_ORGANIZER
    description: str | None = None
    logo: str | None = None
    website: str | None = None
    contact_phone: str | None = None
    address: dict[str, Any] | None = None
    commission_rate: float = 0.0
    settings: dict[str, Any] = field(default_factory=default_company_settings)
    approved_by: str | None = None
    approved_at: datetime | None = None
