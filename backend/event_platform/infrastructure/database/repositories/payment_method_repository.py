"""Concrete repository implementation for PaymentMethod backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import or_, select

from event_platform.application.interfaces import PaymentMethodRepository
from event_platform.domain.entities import EntityStatus, PaymentMethod, PaymentMethodType
from event_platform.infrastructure.database.models import PaymentMethodModel

from .base import SQLAlchemyEntityRepository
from .list_query import ListQuery


class SQLAlchemyPaymentMethodRepository(
    SQLAlchemyEntityRepository[PaymentMethod], PaymentMethodRepository
):
    """Implements the PaymentMethodRepository port using SQLAlchemy async sessions."""

    model = PaymentMethodModel
    sort_columns = {
        "createdAt": PaymentMethodModel.created_at,
        "updatedAt": PaymentMethodModel.updated_at,
        "name": PaymentMethodModel.name,
        "displayOrder": PaymentMethodModel.display_order,
        "type": PaymentMethodModel.type,
    }
    search_columns = (
        PaymentMethodModel.name,
        PaymentMethodModel.description,
    )

    def _to_entity(self, model: PaymentMethodModel) -> PaymentMethod:
        """Map ORM model → domain entity."""
        return PaymentMethod(
            **self._lifecycle_fields(model),
            name=model.name,
            description=model.description,
            type=PaymentMethodType(model.type),
            company_id=model.company_id,
            bank_account=model.bank_account,
            settings=model.settings or {},
            logo=model.logo,
            instructions=model.instructions,
            is_active=model.is_active,
            display_order=model.display_order,
            created_by=model.created_by,
            updated_by=model.updated_by,
        )

    def _to_model(self, entity: PaymentMethod) -> PaymentMethodModel:
        """Map domain entity → ORM model (for creation)."""
        return PaymentMethodModel(
            **self._lifecycle_columns(entity),
            name=entity.name,
            description=entity.description,
            type=entity.type.value,
            company_id=entity.company_id,
            bank_account=entity.bank_account,
            settings=entity.settings,
            logo=entity.logo,
            instructions=entity.instructions,
            is_active=entity.is_active,
            display_order=entity.display_order,
            created_by=entity.created_by,
            updated_by=entity.updated_by,
        )

    def _apply_criteria(
        self,
        query: ListQuery,
        *,
        type: Any = None,
        company_id: str | None = None,
        is_active: bool | None = None,
        **_: Any,
    ) -> None:
        query.equals(PaymentMethodModel.type, type)
        query.equals(PaymentMethodModel.company_id, company_id)
        query.equals(PaymentMethodModel.is_active, is_active)

    async def find_available(self, company_id: str | None) -> list[PaymentMethod]:
        stmt = select(PaymentMethodModel).where(
            PaymentMethodModel.entity_status == EntityStatus.ACTIVE.value,
            PaymentMethodModel.is_active.is_(True),
        )
        if company_id:
            stmt = stmt.where(
                or_(
                    PaymentMethodModel.company_id.is_(None),
                    PaymentMethodModel.company_id == company_id,
                )
            )
        else:
            stmt = stmt.where(PaymentMethodModel.company_id.is_(None))

        stmt = stmt.order_by(
            PaymentMethodModel.display_order.asc(),
            PaymentMethodModel.created_at.desc(),
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
