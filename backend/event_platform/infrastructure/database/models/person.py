"""SQLAlchemy ORM model for the Person entity."""

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from event_platform.infrastructure.database.base import Base

from .lifecycle import LifecycleMixin, live_unique_index


class PersonModel(LifecycleMixin, Base):
    """ORM model — maps to the 'persons' table."""

    __tablename__ = "persons"

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False)

    __table_args__ = (
        live_unique_index("uq_persons_email_live", "email"),
    )

    def __repr__(self) -> str:
        return f"<PersonModel(id={self.id}, email='{self.email}', status={self.entity_status})>"
