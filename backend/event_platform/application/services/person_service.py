"""Application service (use case) for Person operations."""

from datetime import date

from event_platform.application.interfaces import PersonRepository
from event_platform.application.schemas import (
    PERSON_DEFAULT_LIMIT,
    PERSON_SORT_FIELDS,
    BaseFilter,
    PersonCreate,
    PersonUpdate,
)
from event_platform.domain.entities import EntityStatus, Person, PersonType
from event_platform.domain.listing import Page

from .entity_lifecycle import EntityLifecycle, normalize_email


class PersonService:
    """Orchestrates person CRUD and lifecycle. Depends on the repository port (DI)."""

    def __init__(self, repository: PersonRepository):
        self._repository = repository
        self._lifecycle = EntityLifecycle(
            repository,
            unique_keys=[("email",)],
            normalizers={"email": normalize_email},
        )

    async def create_person(self, data: PersonCreate) -> Person:
        person = Person(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            date_of_birth=data.date_of_birth,
            type=data.type,
        )
        return await self._lifecycle.create(person)

    async def create_for_user(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        phone: str | None = None,
        date_of_birth: date | None = None,
    ) -> Person:
        return await self.create_person(
            PersonCreate(
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                date_of_birth=date_of_birth,
                type=PersonType.USER_PERSON,
            )
        )

    async def create_for_speaker(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str | None = None,
        phone: str | None = None,
    ) -> Person:
        return await self.create_person(
            PersonCreate(
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                type=PersonType.SPEAKER_PERSON,
            )
        )

    async def get_person(self, person_id: str, include_deleted: bool = False) -> Person:
        return await self._lifecycle.find_by_id(person_id, include_deleted=include_deleted)

    async def find_by_email(self, email: str, include_deleted: bool = False) -> Person | None:
        normalized = normalize_email(email)
        if normalized is None:
            return None
        return await self._repository.find_by_email(normalized, include_deleted=include_deleted)

    async def list_persons(
        self, filters: BaseFilter, *, type: PersonType | None = None
    ) -> Page[Person]:
        params = filters.to_params(
            sortable=PERSON_SORT_FIELDS, default_limit=PERSON_DEFAULT_LIMIT
        )
        return await self._lifecycle.list(params, type=type)

    async def update_person(self, person_id: str, data: PersonUpdate) -> Person:
        patch = data.model_dump(exclude_unset=True, exclude_none=True)
        return await self._lifecycle.update(person_id, patch)

    async def change_status(
        self, person_id: str, status: EntityStatus, actor_id: str | None = None
    ) -> Person:
        return await self._lifecycle.change_status(person_id, status, actor_id)

    async def delete_person(self, person_id: str, actor_id: str | None = None) -> Person:
        return await self._lifecycle.soft_delete(person_id, actor_id)
