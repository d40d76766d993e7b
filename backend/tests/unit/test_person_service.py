"""Unit tests for the PersonService."""

import pytest

from event_platform.application.schemas import BaseFilter, PersonCreate, PersonUpdate
from event_platform.domain.entities import EntityStatus, PersonType
from event_platform.domain.exceptions import DuplicateEntityError


async def _seed(person_service, count: int):
    return [
        await person_service.create_person(
            PersonCreate(
                first_name=f"Person{i:02d}",
                last_name="Tester",
                email=f"person{i:02d}@example.com",
                type=PersonType.SPEAKER_PERSON if i % 2 else PersonType.USER_PERSON,
            )
        )
        for i in range(count)
    ]


@pytest.mark.asyncio
async def test_list_defaults_to_twenty_per_page(person_service):
    await _seed(person_service, 25)
    page = await person_service.list_persons(BaseFilter())
    assert len(page.data) == 20
    assert page.total_items == 25
    assert page.total_pages == 2
    assert page.has_next_page is True


@pytest.mark.asyncio
async def test_page_past_the_end(person_service):
    await _seed(person_service, 12)
    page = await person_service.list_persons(BaseFilter(page=5, limit=10))
    assert page.data == []
    assert page.total_items == 12
    assert page.total_pages == 2
    assert page.current_page == 5
    assert page.has_previous_page is True
    assert page.has_next_page is False


@pytest.mark.asyncio
async def test_sort_by_first_name_ascending(person_service):
    await _seed(person_service, 3)
    page = await person_service.list_persons(BaseFilter(sort="firstName", order="asc"))
    assert [p.first_name for p in page.data] == ["Person00", "Person01", "Person02"]


@pytest.mark.asyncio
async def test_filter_by_type(person_service):
    await _seed(person_service, 4)
    page = await person_service.list_persons(BaseFilter(), type=PersonType.SPEAKER_PERSON)
    assert page.total_items == 2
    assert {p.type for p in page.data} == {PersonType.SPEAKER_PERSON}


@pytest.mark.asyncio
async def test_list_deleted_only(person_service):
    people = await _seed(person_service, 3)
    await person_service.delete_person(people[0].id, actor_id="admin-1")

    live = await person_service.list_persons(BaseFilter())
    assert live.total_items == 2

    deleted = await person_service.list_persons(BaseFilter(entity_status="DELETED"))
    assert [p.id for p in deleted.data] == [people[0].id]


@pytest.mark.asyncio
async def test_update_email_conflict(person_service):
    first, second = await _seed(person_service, 2)
    with pytest.raises(DuplicateEntityError):
        await person_service.update_person(second.id, PersonUpdate(email=first.email))


@pytest.mark.asyncio
async def test_find_by_email_is_case_insensitive(person_service):
    [person] = await _seed(person_service, 1)
    found = await person_service.find_by_email("  PERSON00@example.com ")
    assert found.id == person.id


@pytest.mark.asyncio
async def test_change_status_round_trip(person_service):
    [person] = await _seed(person_service, 1)
    inactive = await person_service.change_status(person.id, EntityStatus.INACTIVE)
    assert inactive.entity_status == EntityStatus.INACTIVE
    assert inactive.deleted_at is None
