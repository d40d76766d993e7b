"""Concrete repository implementation for Company backed by SQLAlchemy."""

from typing import Any

from event_platform.application.interfaces import CompanyRepository
from event_platform.domain.entities import Company, CompanyType
from event_platform.infrastructure.database.models import CompanyModel

from .base import SQLAlchemyEntityRepository, as_utc
from .list_query import ListQuery


class SQLAlchemyCompanyRepository(SQLAlchemyEntityRepository[Company], CompanyRepository):
    """Implements the CompanyRepository port using SQLAlchemy async sessions."""

    model = CompanyModel
    unique_fields = ("contact_email",)
    sort_columns = {
        "createdAt": CompanyModel.created_at,
        "updatedAt": CompanyModel.updated_at,
        "name": CompanyModel.name,
        "type": CompanyModel.type,
    }
    search_columns = (
        CompanyModel.name,
        CompanyModel.description,
        CompanyModel.contact_email,
        CompanyModel.contact_phone,
        CompanyModel.address["city"].as_string(),
        CompanyModel.address["country"].as_string(),
    )

    def _to_entity(self, model: CompanyModel) -> Company:
        """Map ORM model → domain entity."""
        return Company(
            **self._lifecycle_fields(model),
            name=model.name,
            contact_email=model.contact_email,
            type=CompanyType(model.type),
            description=model.description,
            logo=model.logo,
            website=model.website,
            contact_phone=model.contact_phone,
            address=model.address,
            commission_rate=model.commission_rate,
            settings=model.settings or {},
            approved_by=model.approved_by,
            approved_at=as_utc(model.approved_at),
        )

    def _to_model(self, entity: Company) -> CompanyModel:
        """Map domain entity → ORM model (for creation)."""
        return CompanyModel(
            **self._lifecycle_columns(entity),
            name=entity.name,
            contact_email=entity.contact_email,
            type=entity.type.value,
            description=entity.description,
            logo=entity.logo,
            website=entity.website,
            contact_phone=entity.contact_phone,
            address=entity.address,
            commission_rate=entity.commission_rate,
            settings=entity.settings,
            approved_by=entity.approved_by,
            approved_at=entity.approved_at,
        )

    def _apply_criteria(
        self,
        query: ListQuery,
        *,
        type: Any = None,
        country: str | None = None,
        city: str | None = None,
        **_: Any,
    ) -> None:
        query.equals(CompanyModel.type, type)
        query.contains(CompanyModel.address["country"].as_string(), country)
        query.contains(CompanyModel.address["city"].as_string(), city)
