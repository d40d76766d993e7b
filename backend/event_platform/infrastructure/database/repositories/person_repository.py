"""Concrete repository implementation for Person backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import func, select

from event_platform.application.interfaces import PersonRepository
from event_platform.domain.entities import Person, PersonType
from event_platform.infrastructure.database.models import PersonModel

from .base import SQLAlchemyEntityRepository
from .list_query import ListQuery


class SQLAlchemyPersonRepository(SQLAlchemyEntityRepository[Person], PersonRepository):
    """Implements the PersonRepository port using SQLAlchemy async sessions."""

    model = PersonModel
    unique_fields = ("email",)
    sort_columns = {
        "createdAt": PersonModel.created_at,
        "updatedAt": PersonModel.updated_at,
        "firstName": PersonModel.first_name,
        "lastName": PersonModel.last_name,
        "email": PersonModel.email,
        "type": PersonModel.type,
        "entityStatus": PersonModel.entity_status,
    }
    search_columns = (
        PersonModel.first_name,
        PersonModel.last_name,
        PersonModel.email,
    )

    def _to_entity(self, model: PersonModel) -> Person:
        """Map ORM model → domain entity."""
        return Person(
            **self._lifecycle_fields(model),
            first_name=model.first_name,
            last_name=model.last_name,
            type=PersonType(model.type),
            email=model.email,
            phone=model.phone,
            date_of_birth=model.date_of_birth,
        )

    def _to_model(self, entity: Person) -> PersonModel:
        """Map domain entity → ORM model (for creation)."""
        return PersonModel(
            **self._lifecycle_columns(entity),
            first_name=entity.first_name,
            last_name=entity.last_name,
            type=entity.type.value,
            email=entity.email,
            phone=entity.phone,
            date_of_birth=entity.date_of_birth,
        )

    def _apply_criteria(self, query: ListQuery, *, type: Any = None, **_: Any) -> None:
        query.equals(PersonModel.type, type)

    async def find_by_email(self, email: str, *, include_deleted: bool = False) -> Person | None:
        stmt = select(PersonModel).where(func.lower(PersonModel.email) == email.strip().lower())
        if not include_deleted:
            stmt = stmt.where(self._live())
        return await self._first(stmt.order_by(PersonModel.created_at.desc()))
