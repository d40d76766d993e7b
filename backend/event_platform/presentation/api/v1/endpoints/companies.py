"""Company (tenant) endpoints, including logo upload."""

from fastapi import APIRouter, Depends, File, Query, UploadFile, status

from event_platform.config import get_settings
from event_platform.application.schemas import (
    BaseFilter,
    CompanyCreate,
    CompanyResponse,
    CompanyUpdate,
    PageResponse,
    StatusChangeRequest,
)
from event_platform.application.services import CompanyService
from event_platform.domain.entities import Actor, Company, CompanyType, UserRole
from event_platform.domain.exceptions import InvalidInputError
from event_platform.infrastructure.dependencies import (
    get_company_service,
    get_current_user,
    get_list_filter,
    require_roles,
)

router = APIRouter(prefix="/companies", tags=["Companies"])

_admin = require_roles(UserRole.PLATFORM_ADMIN)


def _to_response(company: Company) -> CompanyResponse:
    response = CompanyResponse.model_validate(company)
    if company.logo:
        base_url = get_settings().files_base_url.rstrip("/")
        response.logo_url = f"{base_url}/{company.logo}"
    return response


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
async def create_company(
    data: CompanyCreate,
    _actor: Actor = Depends(_admin),
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    company = await service.create_company(data)
    return _to_response(company)


@router.get("", response_model=PageResponse[CompanyResponse])
async def list_companies(
    filters: BaseFilter = Depends(get_list_filter),
    type: CompanyType | None = Query(None, description="Filter by company type"),
    country: str | None = Query(None, description="Substring of the address country"),
    city: str | None = Query(None, description="Substring of the address city"),
    _actor: Actor = Depends(get_current_user),
    service: CompanyService = Depends(get_company_service),
) -> PageResponse[CompanyResponse]:
    page = await service.list_companies(filters, type=type, country=country, city=city)
    return PageResponse[CompanyResponse].from_page(page, _to_response)


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: str,
    _actor: Actor = Depends(get_current_user),
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    company = await service.get_company(company_id)
    return _to_response(company)


@router.patch("/{company_id}", response_model=CompanyResponse)
async def update_company(
    company_id: str,
    data: CompanyUpdate,
    _actor: Actor = Depends(_admin),
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    company = await service.update_company(company_id, data)
    return _to_response(company)


@router.patch("/{company_id}/status", response_model=CompanyResponse)
async def change_company_status(
    company_id: str,
    data: StatusChangeRequest,
    actor: Actor = Depends(_admin),
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    company = await service.change_status(company_id, data.entity_status, actor.user_id)
    return _to_response(company)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(
    company_id: str,
    actor: Actor = Depends(_admin),
    service: CompanyService = Depends(get_company_service),
) -> None:
    await service.delete_company(company_id, actor.user_id)


@router.post("/{company_id}/logo", response_model=CompanyResponse)
async def upload_logo(
    company_id: str,
    file: UploadFile = File(...),
    _actor: Actor = Depends(_admin),
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    """Upload or replace the company logo (PNG, JPEG, WebP or SVG)."""
    content = await file.read()
    max_bytes = get_settings().max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise InvalidInputError(
            f"Logo exceeds the {get_settings().max_upload_size_mb} MB limit", field="file"
        )
    company = await service.upload_logo(
        company_id,
        content,
        file.filename or "logo",
        file.content_type or "application/octet-stream",
    )
    return _to_response(company)
