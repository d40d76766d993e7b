"""SQLAlchemy ORM model for the Speaker entity."""

from sqlalchemy import JSON, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from event_platform.infrastructure.database.base import Base

from .lifecycle import LifecycleMixin, live_unique_index


class SpeakerModel(LifecycleMixin, Base):
    """ORM model — maps to the 'speakers' table."""

    __tablename__ = "speakers"

    person_id: Mapped[str] = mapped_column(String(36), ForeignKey("persons.id"), nullable=False)
    company_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("companies.id"), nullable=False, index=True
    )
    specialty: Mapped[str] = mapped_column(String(100), nullable=False)
    years_experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)
    certifications: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    hourly_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="PEN")
    social_media: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    languages: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    topics: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    audience_size: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    uploaded_via: Mapped[str] = mapped_column(String(16), nullable=False, default="manual")
    created_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    updated_by: Mapped[str | None] = mapped_column(String(36), nullable=True)

    __table_args__ = (
        live_unique_index("uq_speakers_person_company_live", "person_id", "company_id"),
    )

    def __repr__(self) -> str:
        return f"<SpeakerModel(id={self.id}, company={self.company_id}, specialty='{self.specialty}')>"
