from .lifecycle import (
    EntityStatus,
    LifecycleEntity,
    SERVER_MANAGED_FIELDS,
    status_change_values,
)
from .person import Person, PersonType
from .company import Company, CompanyType
from .user import Actor, User, UserRole
from .speaker import Currency, Speaker, SpeakerStats, UploadSource
from .payment_method import PaymentMethod, PaymentMethodType

__all__ = [
    "EntityStatus",
    "LifecycleEntity",
    "SERVER_MANAGED_FIELDS",
    "status_change_values",
    "Person",
    "PersonType",
    "Company",
    "CompanyType",
    "Actor",
    "User",
    "UserRole",
    "Currency",
    "Speaker",
    "SpeakerStats",
    "UploadSource",
    "PaymentMethod",
    "PaymentMethodType",
]
