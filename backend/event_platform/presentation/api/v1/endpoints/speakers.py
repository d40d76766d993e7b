"""Speaker endpoints: scoped to the caller's company for company admins."""

from fastapi import APIRouter, Depends, Query, status

from event_platform.application.schemas import (
    BaseFilter,
    PageResponse,
    PersonResponse,
    SpeakerCreate,
    SpeakerResponse,
    SpeakerStatsResponse,
    SpeakerUpdate,
    SpeakerWithPersonCreate,
    SpeakerWithPersonResponse,
    StatusChangeRequest,
)
from event_platform.application.services import SpeakerService
from event_platform.domain.entities import Actor, Currency, UploadSource, UserRole
from event_platform.infrastructure.dependencies import (
    get_list_filter,
    get_speaker_service,
    require_roles,
)

router = APIRouter(prefix="/speakers", tags=["Speakers"])

_admin = require_roles(UserRole.PLATFORM_ADMIN)
_manager = require_roles(UserRole.PLATFORM_ADMIN, UserRole.COMPANY_ADMIN)


@router.post("", response_model=SpeakerResponse, status_code=status.HTTP_201_CREATED)
async def create_speaker(
    data: SpeakerCreate,
    actor: Actor = Depends(_manager),
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerResponse:
    """Register an existing person as a speaker of an ACTIVE company."""
    speaker = await service.create_speaker(data, actor)
    return SpeakerResponse.model_validate(speaker)


@router.post(
    "/with-person",
    response_model=SpeakerWithPersonResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_speaker_with_person(
    data: SpeakerWithPersonCreate,
    actor: Actor = Depends(_manager),
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerWithPersonResponse:
    """Create the person and the speaker profile in one request."""
    speaker, person = await service.create_with_person(data, actor)
    return SpeakerWithPersonResponse(
        speaker=SpeakerResponse.model_validate(speaker),
        person=PersonResponse.model_validate(person),
    )


@router.get("", response_model=PageResponse[SpeakerResponse])
async def list_speakers(
    filters: BaseFilter = Depends(get_list_filter),
    company_id: str | None = Query(None, alias="companyId"),
    specialty: str | None = Query(None),
    language: str | None = Query(None),
    topic: str | None = Query(None),
    min_years: int | None = Query(None, alias="minYears", ge=0),
    max_years: int | None = Query(None, alias="maxYears", ge=0),
    min_rate: float | None = Query(None, alias="minRate", ge=0),
    max_rate: float | None = Query(None, alias="maxRate", ge=0),
    currency: Currency | None = Query(None),
    uploaded_via: UploadSource | None = Query(None, alias="uploadedVia"),
    actor: Actor = Depends(_manager),
    service: SpeakerService = Depends(get_speaker_service),
) -> PageResponse[SpeakerResponse]:
    page = await service.list_speakers(
        filters,
        actor=actor,
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
    return PageResponse[SpeakerResponse].from_page(page, SpeakerResponse.model_validate)


@router.get("/company/{company_id}", response_model=list[SpeakerResponse])
async def list_company_speakers(
    company_id: str,
    include_inactive: bool = Query(False, alias="includeInactive"),
    actor: Actor = Depends(_manager),
    service: SpeakerService = Depends(get_speaker_service),
) -> list[SpeakerResponse]:
    """ACTIVE speakers of a company, newest first."""
    speakers = await service.list_by_company(company_id, include_inactive, actor)
    return [SpeakerResponse.model_validate(s) for s in speakers]


@router.get("/company/{company_id}/stats", response_model=SpeakerStatsResponse)
async def company_speaker_stats(
    company_id: str,
    actor: Actor = Depends(_manager),
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerStatsResponse:
    stats = await service.company_stats(company_id, actor)
    return SpeakerStatsResponse.model_validate(stats)


@router.get("/{speaker_id}", response_model=SpeakerResponse)
async def get_speaker(
    speaker_id: str,
    actor: Actor = Depends(_manager),
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerResponse:
    speaker = await service.get_speaker(speaker_id, actor)
    return SpeakerResponse.model_validate(speaker)


@router.patch("/{speaker_id}", response_model=SpeakerResponse)
async def update_speaker(
    speaker_id: str,
    data: SpeakerUpdate,
    actor: Actor = Depends(_manager),
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerResponse:
    speaker = await service.update_speaker(speaker_id, data, actor)
    return SpeakerResponse.model_validate(speaker)


@router.patch("/{speaker_id}/status", response_model=SpeakerResponse)
async def change_speaker_status(
    speaker_id: str,
    data: StatusChangeRequest,
    actor: Actor = Depends(_manager),
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerResponse:
    speaker = await service.change_status(speaker_id, data.entity_status, actor)
    return SpeakerResponse.model_validate(speaker)


@router.delete("/{speaker_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_speaker(
    speaker_id: str,
    actor: Actor = Depends(_admin),
    service: SpeakerService = Depends(get_speaker_service),
) -> None:
    await service.delete_speaker(speaker_id, actor)
