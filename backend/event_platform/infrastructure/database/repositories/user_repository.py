"""Concrete repository implementation for User backed by SQLAlchemy."""

from datetime import datetime
from typing import Any

from sqlalchemy import Select, func, select

from event_platform.application.interfaces import UserRepository
from event_platform.domain.entities import User, UserRole
from event_platform.infrastructure.database.models import PersonModel, UserModel

from .base import SQLAlchemyEntityRepository, as_utc
from .list_query import ListQuery


class SQLAlchemyUserRepository(SQLAlchemyEntityRepository[User], UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    model = UserModel
    unique_fields = ("email",)
    sort_columns = {
        "createdAt": UserModel.created_at,
        "updatedAt": UserModel.updated_at,
        "email": UserModel.email,
        "role": UserModel.role,
        "entityStatus": UserModel.entity_status,
        "lastLogin": UserModel.last_login,
    }
    # The person's names are reachable through the join in _base_select.
    search_columns = (
        UserModel.email,
        PersonModel.first_name,
        PersonModel.last_name,
    )

    def _to_entity(self, model: UserModel) -> User:
        """Map ORM model → domain entity."""
        return User(
            **self._lifecycle_fields(model),
            person_id=model.person_id,
            email=model.email,
            password_hash=model.password_hash,
            role=UserRole(model.role),
            company_id=model.company_id,
            email_verified=model.email_verified,
            last_login=as_utc(model.last_login),
            email_verification_token=model.email_verification_token,
            password_reset_token=model.password_reset_token,
            password_reset_expires=as_utc(model.password_reset_expires),
        )

    def _to_model(self, entity: User) -> UserModel:
        """Map domain entity → ORM model (for creation)."""
        return UserModel(
            **self._lifecycle_columns(entity),
            person_id=entity.person_id,
            email=entity.email,
            password_hash=entity.password_hash,
            role=entity.role.value,
            company_id=entity.company_id,
            email_verified=entity.email_verified,
            last_login=entity.last_login,
            email_verification_token=entity.email_verification_token,
            password_reset_token=entity.password_reset_token,
            password_reset_expires=entity.password_reset_expires,
        )

    def _base_select(self) -> Select:
        return select(UserModel).outerjoin(PersonModel, PersonModel.id == UserModel.person_id)

    def _apply_criteria(
        self,
        query: ListQuery,
        *,
        role: Any = None,
        company_id: str | None = None,
        email_verified: bool | None = None,
        **_: Any,
    ) -> None:
        query.equals(UserModel.role, role)
        query.equals(UserModel.company_id, company_id)
        query.equals(UserModel.email_verified, email_verified)

    async def find_by_email(self, email: str, *, include_deleted: bool = False) -> User | None:
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.strip().lower())
        if not include_deleted:
            stmt = stmt.where(self._live())
        return await self._first(stmt.order_by(UserModel.created_at.desc()))

    async def find_by_verification_token(self, token: str) -> User | None:
        stmt = select(UserModel).where(
            UserModel.email_verification_token == token,
            self._live(),
        )
        return await self._first(stmt)

    async def find_by_reset_token(self, token: str, now: datetime) -> User | None:
        stmt = select(UserModel).where(
            UserModel.password_reset_token == token,
            UserModel.password_reset_expires > now,
            self._live(),
        )
        return await self._first(stmt)
