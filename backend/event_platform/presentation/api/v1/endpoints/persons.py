"""Person CRUD and lifecycle endpoints."""

from fastapi import APIRouter, Depends, Query, status

from event_platform.application.schemas import (
    BaseFilter,
    PageResponse,
    PersonCreate,
    PersonResponse,
    PersonUpdate,
    StatusChangeRequest,
)
from event_platform.application.services import PersonService
from event_platform.domain.entities import Actor, PersonType, UserRole
from event_platform.infrastructure.dependencies import (
    get_list_filter,
    get_person_service,
    require_roles,
)

router = APIRouter(prefix="/persons", tags=["Persons"])

_admin = require_roles(UserRole.PLATFORM_ADMIN)
_reader = require_roles(UserRole.PLATFORM_ADMIN, UserRole.COMPANY_ADMIN)


@router.post("", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
async def create_person(
    data: PersonCreate,
    _actor: Actor = Depends(_admin),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Create a new person (ACTIVE)."""
    person = await service.create_person(data)
    return PersonResponse.model_validate(person)


@router.get("", response_model=PageResponse[PersonResponse])
async def list_persons(
    filters: BaseFilter = Depends(get_list_filter),
    type: PersonType | None = Query(None, description="Filter by person type"),
    _actor: Actor = Depends(_reader),
    service: PersonService = Depends(get_person_service),
) -> PageResponse[PersonResponse]:
    """Paginated, filterable list; DELETED persons only with ``entityStatus=DELETED``."""
    page = await service.list_persons(filters, type=type)
    return PageResponse[PersonResponse].from_page(page, PersonResponse.model_validate)


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: str,
    _actor: Actor = Depends(_reader),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    person = await service.get_person(person_id)
    return PersonResponse.model_validate(person)


@router.patch("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: str,
    data: PersonUpdate,
    _actor: Actor = Depends(_admin),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    person = await service.update_person(person_id, data)
    return PersonResponse.model_validate(person)


@router.patch("/{person_id}/status", response_model=PersonResponse)
async def change_person_status(
    person_id: str,
    data: StatusChangeRequest,
    actor: Actor = Depends(_admin),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Move a person to ACTIVE, INACTIVE or DELETED."""
    person = await service.change_status(person_id, data.entity_status, actor.user_id)
    return PersonResponse.model_validate(person)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: str,
    actor: Actor = Depends(_admin),
    service: PersonService = Depends(get_person_service),
) -> None:
    """Soft-delete a person; the row is kept with ``entityStatus=DELETED``."""
    await service.delete_person(person_id, actor.user_id)
