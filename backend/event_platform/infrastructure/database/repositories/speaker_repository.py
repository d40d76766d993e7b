"""Concrete repository implementation for Speaker backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import Select, case, func, select

from event_platform.application.interfaces import SpeakerRepository
from event_platform.domain.entities import (
    Currency,
    EntityStatus,
    Speaker,
    SpeakerStats,
    UploadSource,
)
from event_platform.infrastructure.database.models import PersonModel, SpeakerModel

from .base import SQLAlchemyEntityRepository
from .list_query import JsonArray, ListQuery

TOP_SPECIALTIES = 5


class SQLAlchemySpeakerRepository(SQLAlchemyEntityRepository[Speaker], SpeakerRepository):
    """Implements the SpeakerRepository port using SQLAlchemy async sessions."""

    model = SpeakerModel
    unique_fields = ("person_id", "company_id")
    sort_columns = {
        "createdAt": SpeakerModel.created_at,
        "updatedAt": SpeakerModel.updated_at,
        "specialty": SpeakerModel.specialty,
        "yearsExperience": SpeakerModel.years_experience,
        "hourlyRate": SpeakerModel.hourly_rate,
    }
    search_columns = (
        SpeakerModel.specialty,
        SpeakerModel.biography,
        PersonModel.first_name,
        PersonModel.last_name,
        PersonModel.email,
        JsonArray(SpeakerModel.topics),
        JsonArray(SpeakerModel.languages),
    )

    def _to_entity(self, model: SpeakerModel) -> Speaker:
        """Map ORM model → domain entity."""
        return Speaker(
            **self._lifecycle_fields(model),
            person_id=model.person_id,
            company_id=model.company_id,
            specialty=model.specialty,
            years_experience=model.years_experience,
            biography=model.biography,
            certifications=list(model.certifications or []),
            hourly_rate=model.hourly_rate,
            currency=Currency(model.currency),
            social_media=model.social_media,
            languages=list(model.languages or []),
            topics=list(model.topics or []),
            audience_size=model.audience_size,
            notes=model.notes,
            uploaded_via=UploadSource(model.uploaded_via),
            created_by=model.created_by,
            updated_by=model.updated_by,
        )

    def _to_model(self, entity: Speaker) -> SpeakerModel:
        """Map domain entity → ORM model (for creation)."""
        return SpeakerModel(
            **self._lifecycle_columns(entity),
            person_id=entity.person_id,
            company_id=entity.company_id,
            specialty=entity.specialty,
            years_experience=entity.years_experience,
            biography=entity.biography,
            certifications=entity.certifications,
            hourly_rate=entity.hourly_rate,
            currency=entity.currency.value,
            social_media=entity.social_media,
            languages=entity.languages,
            topics=entity.topics,
            audience_size=entity.audience_size,
            notes=entity.notes,
            uploaded_via=entity.uploaded_via.value,
            created_by=entity.created_by,
            updated_by=entity.updated_by,
        )

    def _base_select(self) -> Select:
        return select(SpeakerModel).outerjoin(
            PersonModel, PersonModel.id == SpeakerModel.person_id
        )

    def _apply_criteria(
        self,
        query: ListQuery,
        *,
        company_id: str | None = None,
        specialty: str | None = None,
        language: str | None = None,
        topic: str | None = None,
        min_years: int | None = None,
        max_years: int | None = None,
        min_rate: float | None = None,
        max_rate: float | None = None,
        currency: Any = None,
        uploaded_via: Any = None,
        **_: Any,
    ) -> None:
        query.equals(SpeakerModel.company_id, company_id)
        query.contains(SpeakerModel.specialty, specialty)
        query.contains(JsonArray(SpeakerModel.languages), language)
        query.contains(JsonArray(SpeakerModel.topics), topic)
        query.between(SpeakerModel.years_experience, min_years, max_years)
        query.between(SpeakerModel.hourly_rate, min_rate, max_rate)
        query.equals(SpeakerModel.currency, currency)
        query.equals(SpeakerModel.uploaded_via, uploaded_via)

    async def find_by_company(
        self, company_id: str, *, include_inactive: bool = False
    ) -> list[Speaker]:
        stmt = select(SpeakerModel).where(SpeakerModel.company_id == company_id)
        if include_inactive:
            stmt = stmt.where(self._live())
        else:
            stmt = stmt.where(SpeakerModel.entity_status == EntityStatus.ACTIVE.value)
        stmt = stmt.order_by(SpeakerModel.created_at.desc(), SpeakerModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def company_stats(self, company_id: str) -> SpeakerStats:
        active = SpeakerModel.entity_status == EntityStatus.ACTIVE.value
        totals_stmt = select(
            func.count(SpeakerModel.id),
            func.coalesce(func.sum(case((active, 1), else_=0)), 0),
            func.avg(SpeakerModel.years_experience),
            func.avg(SpeakerModel.hourly_rate),
        ).where(SpeakerModel.company_id == company_id, self._live())
        total, active_count, avg_years, avg_rate = (
            await self._session.execute(totals_stmt)
        ).one()

        count = func.count(SpeakerModel.id).label("count")
        top_stmt = (
            select(SpeakerModel.specialty, count)
            .where(SpeakerModel.company_id == company_id, active)
            .group_by(SpeakerModel.specialty)
            .order_by(count.desc(), SpeakerModel.specialty.asc())
            .limit(TOP_SPECIALTIES)
        )
        top_rows = (await self._session.execute(top_stmt)).all()

        return SpeakerStats(
            total_speakers=total,
            active_speakers=int(active_count),
            avg_experience=round(float(avg_years or 0), 1),
            avg_hourly_rate=round(float(avg_rate or 0), 2),
            top_specialties=[
                {"specialty": specialty, "count": n} for specialty, n in top_rows
            ],
        )
