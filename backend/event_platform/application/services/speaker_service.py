"""Application service (use case) for Speaker operations, scoped per tenant."""

from event_platform.application.interfaces import SpeakerRepository
from event_platform.application.schemas import (
    SPEAKER_DEFAULT_LIMIT,
    SPEAKER_SORT_FIELDS,
    BaseFilter,
    SpeakerCreate,
    SpeakerUpdate,
    SpeakerWithPersonCreate,
)
from event_platform.domain.entities import (
    Actor,
    Currency,
    EntityStatus,
    Person,
    Speaker,
    SpeakerStats,
    UploadSource,
)
from event_platform.domain.exceptions import PermissionDeniedError
from event_platform.domain.listing import Page

from .company_service import CompanyService
from .entity_lifecycle import EntityLifecycle
from .person_service import PersonService

_PROFILE_FIELDS = (
    "specialty",
    "years_experience",
    "biography",
    "certifications",
    "hourly_rate",
    "currency",
    "social_media",
    "languages",
    "topics",
    "audience_size",
    "notes",
)


def _ensure_company_access(actor: Actor | None, company_id: str) -> None:
    """Company admins may only touch speakers of their own company."""
    if actor is not None and actor.is_company_admin and actor.company_id != company_id:
        raise PermissionDeniedError("Access denied. Speaker belongs to a different company.")


class SpeakerService:
    """Orchestrates speaker profiles. A speaker links a Person to a Company."""

    def __init__(
        self,
        repository: SpeakerRepository,
        person_service: PersonService,
        company_service: CompanyService,
    ):
        self._repository = repository
        self._persons = person_service
        self._companies = company_service
        self._lifecycle = EntityLifecycle(
            repository,
            unique_keys=[("person_id", "company_id")],
        )

    # ── Create ───────────────────────────────────────────────────────

    async def create_speaker(self, data: SpeakerCreate, actor: Actor | None = None) -> Speaker:
        _ensure_company_access(actor, data.company_id)
        await self._companies.get_active_company(data.company_id)
        await self._persons.get_person(data.person_id)

        values = data.model_dump(include=set(_PROFILE_FIELDS), exclude_none=True)
        speaker = Speaker(
            person_id=data.person_id,
            company_id=data.company_id,
            uploaded_via=data.uploaded_via,
            created_by=actor.user_id if actor else None,
            **values,
        )
        return await self._lifecycle.create(speaker)

    async def create_with_person(
        self, data: SpeakerWithPersonCreate, actor: Actor | None = None
    ) -> tuple[Speaker, Person]:
        """Create a speaker-type Person and the speaker profile on top of it."""
        _ensure_company_access(actor, data.company_id)
        await self._companies.get_active_company(data.company_id)

        person = await self._persons.create_for_speaker(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
        )
        values = data.model_dump(include=set(_PROFILE_FIELDS), exclude_none=True)
        speaker = Speaker(
            person_id=person.id,
            company_id=data.company_id,
            uploaded_via=UploadSource.MANUAL,
            created_by=actor.user_id if actor else None,
            **values,
        )
        speaker = await self._lifecycle.create(speaker)
        return speaker, person

    # ── Read ─────────────────────────────────────────────────────────

    async def get_speaker(
        self, speaker_id: str, actor: Actor | None = None, include_deleted: bool = False
    ) -> Speaker:
        speaker = await self._lifecycle.find_by_id(speaker_id, include_deleted=include_deleted)
        _ensure_company_access(actor, speaker.company_id)
        return speaker

    async def list_speakers(
        self,
        filters: BaseFilter,
        *,
        actor: Actor | None = None,
        company_id: str | None = None,
        specialty: str | None = None,
        language: str | None = None,
        topic: str | None = None,
        min_years: int | None = None,
        max_years: int | None = None,
        min_rate: float | None = None,
        max_rate: float | None = None,
        currency: Currency | None = None,
        uploaded_via: UploadSource | None = None,
    ) -> Page[Speaker]:
        """Company admins always see their own company, whatever ``company_id`` says."""
        if actor is not None and actor.is_company_admin:
            company_id = actor.company_id
        params = filters.to_params(
            sortable=SPEAKER_SORT_FIELDS, default_limit=SPEAKER_DEFAULT_LIMIT
        )
        return await self._lifecycle.list(
            params,
            company_id=company_id,
            specialty=specialty,
            language=language,
            topic=topic,
            min_years=min_years,
            max_years=max_years,
            min_rate=min_rate,
            max_rate=max_rate,
            currency=currency,
            uploaded_via=uploaded_via,
        )

    async def list_by_company(
        self, company_id: str, include_inactive: bool = False, actor: Actor | None = None
    ) -> list[Speaker]:
        _ensure_company_access(actor, company_id)
        return await self._repository.find_by_company(
            company_id, include_inactive=include_inactive
        )

    async def company_stats(self, company_id: str, actor: Actor | None = None) -> SpeakerStats:
        _ensure_company_access(actor, company_id)
        await self._companies.get_company(company_id)
        return await self._repository.company_stats(company_id)

    # ── Mutations ────────────────────────────────────────────────────

    async def update_speaker(
        self, speaker_id: str, data: SpeakerUpdate, actor: Actor | None = None
    ) -> Speaker:
        await self.get_speaker(speaker_id, actor)
        patch = data.model_dump(exclude_unset=True, exclude_none=True)
        if "company_id" in patch:
            _ensure_company_access(actor, patch["company_id"])
            await self._companies.get_active_company(patch["company_id"])
        if actor is not None:
            patch["updated_by"] = actor.user_id
        return await self._lifecycle.update(speaker_id, patch)

    async def change_status(
        self, speaker_id: str, status: EntityStatus, actor: Actor | None = None
    ) -> Speaker:
        await self.get_speaker(speaker_id, actor, include_deleted=True)
        return await self._lifecycle.change_status(
            speaker_id, status, actor.user_id if actor else None
        )

    async def delete_speaker(self, speaker_id: str, actor: Actor | None = None) -> Speaker:
        return await self.change_status(speaker_id, EntityStatus.DELETED, actor)
