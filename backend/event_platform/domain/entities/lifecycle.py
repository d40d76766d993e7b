"""Soft-delete lifecycle shared by every tenant-owned entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class EntityStatus(str, Enum):
    """Lifecycle states of a persisted entity. Rows are never physically removed."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DELETED = "DELETED"

    @classmethod
    def parse(cls, raw: str | None) -> "EntityStatus | None":
        """Case-insensitive lookup that returns None for blank or unknown values."""
        if raw is None:
            return None
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return None


# Fields that only the persistence layer or change_status() may write.
SERVER_MANAGED_FIELDS = frozenset({
    "id",
    "created_at",
    "updated_at",
    "entity_status",
    "deleted_at",
    "deleted_by",
})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True)
class LifecycleEntity:
    """Bookkeeping columns carried by Person, Company, User, Speaker and PaymentMethod.

    Invariant: ``entity_status == DELETED`` if and only if ``deleted_at`` is set.
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    entity_status: EntityStatus = EntityStatus.ACTIVE
    deleted_at: datetime | None = None
    deleted_by: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def is_deleted(self) -> bool:
        return self.entity_status == EntityStatus.DELETED

    @property
    def is_active(self) -> bool:
        return self.entity_status == EntityStatus.ACTIVE


def status_change_values(status: EntityStatus, actor_id: str | None = None) -> dict:
    """Column values written by a status transition.

    Entering DELETED stamps ``deleted_at`` with the server clock and records the
    actor; any other target clears both, even when they were already unset.
    """
    if status == EntityStatus.DELETED:
        return {
            "entity_status": status,
            "deleted_at": utcnow(),
            "deleted_by": actor_id,
        }
    return {"entity_status": status, "deleted_at": None, "deleted_by": None}
