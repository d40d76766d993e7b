"""Unit tests for the UserService."""

import pytest
import pytest_asyncio

from event_platform.application.schemas import BaseFilter, CompanyCreate, UserCreate, UserUpdate
from event_platform.domain.entities import EntityStatus, PersonType, UserRole
from event_platform.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidInputError,
)


def _user_data(**overrides) -> UserCreate:
    values = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "password": "s3cret-pass",
    }
    values.update(overrides)
    return UserCreate(**values)


@pytest_asyncio.fixture
async def company(company_service):
    return await company_service.create_company(
        CompanyCreate(name="Acme Events", contact_email="hello@acme.example.com")
    )


@pytest.mark.asyncio
async def test_create_user_creates_person_and_hashes_password(user_service, person_service):
    user, person = await user_service.create_user(_user_data(email="Ada@Example.com"))

    assert user.email == "ada@example.com"
    assert user.person_id == person.id
    assert user.role == UserRole.USER
    assert user.password_hash.startswith("$2b$")
    assert user.email_verified is False

    stored = await person_service.get_person(person.id)
    assert stored.type == PersonType.USER_PERSON
    assert stored.email == "ada@example.com"


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected_before_creating_a_person(
    user_service, person_repository
):
    await user_service.create_user(_user_data())
    with pytest.raises(DuplicateEntityError):
        await user_service.create_user(_user_data(email="ADA@example.com"))
    assert len(person_repository.rows) == 1


@pytest.mark.asyncio
async def test_company_admin_requires_existing_company(user_service):
    with pytest.raises(EntityNotFoundError):
        await user_service.create_user(
            _user_data(role=UserRole.COMPANY_ADMIN, company_id="no-such-company")
        )


@pytest.mark.asyncio
async def test_company_admin_is_bound_to_company(user_service, company):
    user, _ = await user_service.create_user(
        _user_data(role=UserRole.COMPANY_ADMIN, company_id=company.id)
    )
    assert user.company_id == company.id


def test_user_role_cannot_carry_a_company():
    with pytest.raises(ValueError):
        _user_data(role=UserRole.USER, company_id="company-1")


@pytest.mark.asyncio
async def test_demoting_to_user_drops_the_company(user_service, company):
    user, _ = await user_service.create_user(
        _user_data(role=UserRole.COMPANY_ADMIN, company_id=company.id)
    )
    updated = await user_service.update_user(user.id, UserUpdate(role=UserRole.USER))
    assert updated.role == UserRole.USER
    assert updated.company_id is None


@pytest.mark.asyncio
async def test_promoting_without_company_is_rejected(user_service):
    user, _ = await user_service.create_user(_user_data())
    with pytest.raises(InvalidInputError) as exc_info:
        await user_service.update_user(user.id, UserUpdate(role=UserRole.COMPANY_ADMIN))
    assert exc_info.value.field == "companyId"


@pytest.mark.asyncio
async def test_get_profile_returns_person(user_service):
    user, person = await user_service.create_user(_user_data())
    found_user, found_person = await user_service.get_profile(user.id)
    assert found_user.id == user.id
    assert found_person.id == person.id


@pytest.mark.asyncio
async def test_deleted_user_email_can_register_again(user_service, person_service):
    user, person = await user_service.create_user(_user_data())
    await user_service.delete_user(user.id, actor_id="admin-1")

    removed = await person_service.get_person(person.id, include_deleted=True)
    assert removed.entity_status == EntityStatus.DELETED
    assert removed.deleted_by == "admin-1"

    again, again_person = await user_service.create_user(_user_data())
    assert again.id != user.id
    assert again_person.id != person.id


@pytest.mark.asyncio
async def test_restoring_user_restores_person(user_service, person_service):
    user, person = await user_service.create_user(_user_data())
    await user_service.delete_user(user.id)

    restored = await user_service.change_status(user.id, EntityStatus.INACTIVE)
    assert restored.entity_status == EntityStatus.INACTIVE
    stored = await person_service.get_person(person.id)
    assert stored.entity_status == EntityStatus.INACTIVE
    assert stored.deleted_at is None


@pytest.mark.asyncio
async def test_deactivating_user_keeps_person_active(user_service, person_service):
    user, person = await user_service.create_user(_user_data())
    await user_service.change_status(user.id, EntityStatus.INACTIVE)

    stored = await person_service.get_person(person.id)
    assert stored.entity_status == EntityStatus.ACTIVE


@pytest.mark.asyncio
async def test_list_users_filters_by_role(user_service, company):
    await user_service.create_user(_user_data())
    admin, _ = await user_service.create_user(
        _user_data(
            email="admin@example.com", role=UserRole.COMPANY_ADMIN, company_id=company.id
        )
    )

    page = await user_service.list_users(BaseFilter(), role=UserRole.COMPANY_ADMIN)
    assert [u.id for u in page.data] == [admin.id]
    assert page.total_items == 1


@pytest.mark.asyncio
async def test_status_change_records_actor(user_service):
    user, _ = await user_service.create_user(_user_data())
    deleted = await user_service.change_status(user.id, EntityStatus.DELETED, "admin-1")
    assert deleted.deleted_by == "admin-1"
    with pytest.raises(EntityNotFoundError):
        await user_service.get_user(user.id)
