"""Payment method endpoints: global methods plus per-company ones."""

from fastapi import APIRouter, Depends, Query, status

from event_platform.application.schemas import (
    BaseFilter,
    PageResponse,
    PaymentMethodCreate,
    PaymentMethodResponse,
    PaymentMethodUpdate,
    StatusChangeRequest,
)
from event_platform.application.services import PaymentMethodService
from event_platform.domain.entities import Actor, PaymentMethodType, UserRole
from event_platform.infrastructure.dependencies import (
    get_current_user,
    get_list_filter,
    get_payment_method_service,
    require_roles,
)

router = APIRouter(prefix="/payment-methods", tags=["Payment Methods"])

_admin = require_roles(UserRole.PLATFORM_ADMIN)
_manager = require_roles(UserRole.PLATFORM_ADMIN, UserRole.COMPANY_ADMIN)


@router.post("", response_model=PaymentMethodResponse, status_code=status.HTTP_201_CREATED)
async def create_payment_method(
    data: PaymentMethodCreate,
    actor: Actor = Depends(_manager),
    service: PaymentMethodService = Depends(get_payment_method_service),
) -> PaymentMethodResponse:
    method = await service.create_method(data, actor)
    return PaymentMethodResponse.model_validate(method)


@router.get("", response_model=PageResponse[PaymentMethodResponse])
async def list_payment_methods(
    filters: BaseFilter = Depends(get_list_filter),
    type: PaymentMethodType | None = Query(None, description="Filter by method type"),
    company_id: str | None = Query(None, alias="companyId"),
    is_active: bool | None = Query(None, alias="isActive"),
    actor: Actor = Depends(_manager),
    service: PaymentMethodService = Depends(get_payment_method_service),
) -> PageResponse[PaymentMethodResponse]:
    page = await service.list_methods(
        filters, actor=actor, type=type, company_id=company_id, is_active=is_active
    )
    return PageResponse[PaymentMethodResponse].from_page(
        page, PaymentMethodResponse.model_validate
    )


@router.get("/available", response_model=list[PaymentMethodResponse])
async def available_payment_methods(
    company_id: str | None = Query(None, alias="companyId"),
    _actor: Actor = Depends(get_current_user),
    service: PaymentMethodService = Depends(get_payment_method_service),
) -> list[PaymentMethodResponse]:
    """Methods offered at checkout, ordered by ``displayOrder``."""
    methods = await service.available_methods(company_id)
    return [PaymentMethodResponse.model_validate(m) for m in methods]


@router.get("/{method_id}", response_model=PaymentMethodResponse)
async def get_payment_method(
    method_id: str,
    actor: Actor = Depends(_manager),
    service: PaymentMethodService = Depends(get_payment_method_service),
) -> PaymentMethodResponse:
    method = await service.get_method(method_id, actor)
    return PaymentMethodResponse.model_validate(method)


@router.patch("/{method_id}", response_model=PaymentMethodResponse)
async def update_payment_method(
    method_id: str,
    data: PaymentMethodUpdate,
    actor: Actor = Depends(_manager),
    service: PaymentMethodService = Depends(get_payment_method_service),
) -> PaymentMethodResponse:
    method = await service.update_method(method_id, data, actor)
    return PaymentMethodResponse.model_validate(method)


@router.patch("/{method_id}/toggle-active", response_model=PaymentMethodResponse)
async def toggle_payment_method(
    method_id: str,
    actor: Actor = Depends(_manager),
    service: PaymentMethodService = Depends(get_payment_method_service),
) -> PaymentMethodResponse:
    """Flip ``isActive`` without touching the lifecycle status."""
    method = await service.toggle_active(method_id, actor)
    return PaymentMethodResponse.model_validate(method)


@router.patch("/{method_id}/status", response_model=PaymentMethodResponse)
async def change_payment_method_status(
    method_id: str,
    data: StatusChangeRequest,
    actor: Actor = Depends(_manager),
    service: PaymentMethodService = Depends(get_payment_method_service),
) -> PaymentMethodResponse:
    method = await service.change_status(method_id, data.entity_status, actor)
    return PaymentMethodResponse.model_validate(method)


@router.delete("/{method_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payment_method(
    method_id: str,
    actor: Actor = Depends(_admin),
    service: PaymentMethodService = Depends(get_payment_method_service),
) -> None:
    await service.delete_method(method_id, actor)
