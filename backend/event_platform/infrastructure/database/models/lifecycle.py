"""Lifecycle columns shared by every soft-deletable table."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import DateTime, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from event_platform.domain.entities import EntityStatus

_LIVE_ROWS = text(f"entity_status <> '{EntityStatus.DELETED.value}'")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LifecycleMixin:
    """id, status, deletion bookkeeping and timestamps."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    entity_status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=EntityStatus.ACTIVE.value, index=True
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
        nullable=False,
    )


def live_unique_index(name: str, *columns: str) -> Index:
    """Unique index over ``columns`` restricted to non-deleted rows.

    A deleted row releases its value for reuse by a new row.
    """
    return Index(
        name,
        *columns,
        unique=True,
        sqlite_where=_LIVE_ROWS,
        postgresql_where=_LIVE_ROWS,
    )
