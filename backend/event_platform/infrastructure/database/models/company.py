"""SQLAlchemy ORM model for the Company entity."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from event_platform.infrastructure.database.base import Base

from .lifecycle import LifecycleMixin, live_unique_index


class CompanyModel(LifecycleMixin, Base):
    """ORM model — maps to the 'companies' table."""

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(150), nullable=False)
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    logo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    contact_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    address: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    commission_rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    settings: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    approved_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        live_unique_index("uq_companies_contact_email_live", "contact_email"),
    )

    def __repr__(self) -> str:
        return f"<CompanyModel(id={self.id}, name='{self.name}', status={self.entity_status})>"
