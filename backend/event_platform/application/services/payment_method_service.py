"""Application service (use case) for PaymentMethod operations."""

import logging

from event_platform.application.interfaces import PaymentMethodRepository
from event_platform.application.schemas import (
    PAYMENT_METHOD_DEFAULT_LIMIT,
    PAYMENT_METHOD_SORT_FIELDS,
    BaseFilter,
    PaymentMethodCreate,
    PaymentMethodUpdate,
)
from event_platform.domain.entities import (
    Actor,
    EntityStatus,
    PaymentMethod,
    PaymentMethodType,
)
from event_platform.domain.exceptions import PermissionDeniedError
from event_platform.domain.listing import Page

from .company_service import CompanyService
from .entity_lifecycle import EntityLifecycle

logger = logging.getLogger(__name__)


def _ensure_method_access(actor: Actor | None, company_id: str | None) -> None:
    """Company admins may only manage their own company's methods, never global ones."""
    if actor is not None and actor.is_company_admin and actor.company_id != company_id:
        raise PermissionDeniedError("Access denied. Payment method belongs to a different company.")


class PaymentMethodService:
    """Orchestrates payment methods; global ones have no company."""

    def __init__(self, repository: PaymentMethodRepository, company_service: CompanyService):
        self._repository = repository
        self._companies = company_service
        self._lifecycle = EntityLifecycle(repository)

    async def create_method(
        self, data: PaymentMethodCreate, actor: Actor | None = None
    ) -> PaymentMethod:
        values = data.model_dump(exclude_none=True)
        if actor is not None and actor.is_company_admin:
            values.setdefault("company_id", actor.company_id)
        _ensure_method_access(actor, values.get("company_id"))
        if values.get("company_id"):
            await self._companies.get_company(values["company_id"])

        method = PaymentMethod(**values)
        if actor is not None:
            method.created_by = actor.user_id
            method.updated_by = actor.user_id
        method = await self._lifecycle.create(method)
        logger.info("Payment method created: %s", method.id)
        return method

    async def get_method(self, method_id: str, actor: Actor | None = None) -> PaymentMethod:
        method = await self._lifecycle.find_by_id(method_id)
        _ensure_method_access(actor, method.company_id)
        return method

    async def list_methods(
        self,
        filters: BaseFilter,
        *,
        actor: Actor | None = None,
        type: PaymentMethodType | None = None,
        company_id: str | None = None,
        is_active: bool | None = None,
    ) -> Page[PaymentMethod]:
        if actor is not None and actor.is_company_admin:
            company_id = actor.company_id
        params = filters.to_params(
            sortable=PAYMENT_METHOD_SORT_FIELDS, default_limit=PAYMENT_METHOD_DEFAULT_LIMIT
        )
        return await self._lifecycle.list(
            params, type=type, company_id=company_id, is_active=is_active
        )

    async def available_methods(self, company_id: str | None = None) -> list[PaymentMethod]:
        """Methods offered at checkout: the company's own plus the global ones.

        A company without methods of its own falls back to the global ones.
        """
        methods = await self._repository.find_available(company_id)
        if company_id and not any(m.company_id == company_id for m in methods):
            logger.info(
                "No payment methods found for company %s, offering global methods", company_id
            )
        return methods

    async def update_method(
        self, method_id: str, data: PaymentMethodUpdate, actor: Actor | None = None
    ) -> PaymentMethod:
        await self.get_method(method_id, actor)
        patch = data.model_dump(exclude_unset=True, exclude_none=True)
        if "company_id" in patch:
            _ensure_method_access(actor, patch["company_id"])
            await self._companies.get_company(patch["company_id"])
        if actor is not None:
            patch["updated_by"] = actor.user_id
        method = await self._lifecycle.update(method_id, patch)
        logger.info("Payment method updated: %s", method_id)
        return method

    async def toggle_active(self, method_id: str, actor: Actor | None = None) -> PaymentMethod:
        method = await self.get_method(method_id, actor)
        patch: dict = {"is_active": not method.is_active}
        if actor is not None:
            patch["updated_by"] = actor.user_id
        method = await self._lifecycle.update(method_id, patch)
        logger.info(
            "Payment method %s: %s", "activated" if method.is_active else "deactivated", method_id
        )
        return method

    async def change_status(
        self, method_id: str, status: EntityStatus, actor: Actor | None = None
    ) -> PaymentMethod:
        method = await self._lifecycle.find_by_id(method_id, include_deleted=True)
        _ensure_method_access(actor, method.company_id)
        return await self._lifecycle.change_status(
            method_id, status, actor.user_id if actor else None
        )

    async def delete_method(self, method_id: str, actor: Actor | None = None) -> PaymentMethod:
        return await self.change_status(method_id, EntityStatus.DELETED, actor)
