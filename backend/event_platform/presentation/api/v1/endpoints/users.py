"""User account endpoints (platform administration)."""

from fastapi import APIRouter, Depends, Query, status

from event_platform.application.schemas import (
    BaseFilter,
    PageResponse,
    PersonResponse,
    StatusChangeRequest,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from event_platform.application.services import UserService
from event_platform.domain.entities import Actor, Person, User, UserRole
from event_platform.domain.exceptions import PermissionDeniedError
from event_platform.infrastructure.dependencies import (
    get_current_user,
    get_list_filter,
    get_user_service,
    require_roles,
)

router = APIRouter(prefix="/users", tags=["Users"])

_admin = require_roles(UserRole.PLATFORM_ADMIN)


def to_user_response(user: User, person: Person | None = None) -> UserResponse:
    response = UserResponse.model_validate(user)
    if person is not None:
        response.person = PersonResponse.model_validate(person)
    return response


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    _actor: Actor = Depends(_admin),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user together with its person record."""
    user, person = await service.create_user(data)
    return to_user_response(user, person)


@router.get("", response_model=PageResponse[UserResponse])
async def list_users(
    filters: BaseFilter = Depends(get_list_filter),
    role: UserRole | None = Query(None, description="Filter by role"),
    company_id: str | None = Query(None, alias="companyId"),
    email_verified: bool | None = Query(None, alias="emailVerified"),
    _actor: Actor = Depends(_admin),
    service: UserService = Depends(get_user_service),
) -> PageResponse[UserResponse]:
    page = await service.list_users(
        filters, role=role, company_id=company_id, email_verified=email_verified
    )
    return PageResponse[UserResponse].from_page(page, to_user_response)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    actor: Actor = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Platform admins may read any user; everyone else only themselves."""
    if not actor.is_platform_admin and actor.user_id != user_id:
        raise PermissionDeniedError("Access denied. You can only view your own account.")
    user, person = await service.get_profile(user_id)
    return to_user_response(user, person)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    data: UserUpdate,
    _actor: Actor = Depends(_admin),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.update_user(user_id, data)
    return to_user_response(user)


@router.patch("/{user_id}/status", response_model=UserResponse)
async def change_user_status(
    user_id: str,
    data: StatusChangeRequest,
    actor: Actor = Depends(_admin),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.change_status(user_id, data.entity_status, actor.user_id)
    return to_user_response(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    actor: Actor = Depends(_admin),
    service: UserService = Depends(get_user_service),
) -> None:
    await service.delete_user(user_id, actor.user_id)
