"""Application service (use case) for Company operations, including logo upload."""

import logging

from event_platform.application.interfaces import CompanyRepository, ObjectStorage
from event_platform.application.schemas import (
    COMPANY_DEFAULT_LIMIT,
    COMPANY_SORT_FIELDS,
    BaseFilter,
    CompanyCreate,
    CompanyUpdate,
)
from event_platform.domain.entities import Company, CompanyType, EntityStatus
from event_platform.domain.exceptions import InvalidInputError
from event_platform.domain.listing import Page

from .entity_lifecycle import EntityLifecycle, normalize_email

logger = logging.getLogger(__name__)

LOGO_MIME_TYPES = frozenset({"image/png", "image/jpeg", "image/webp", "image/svg+xml"})


class CompanyService:
    """Orchestrates company (tenant) CRUD, lifecycle and logo storage."""

    def __init__(self, repository: CompanyRepository, storage: ObjectStorage):
        self._repository = repository
        self._storage = storage
        self._lifecycle = EntityLifecycle(
            repository,
            unique_keys=[("contact_email",)],
            normalizers={"contact_email": normalize_email},
        )

    async def create_company(self, data: CompanyCreate) -> Company:
        values = data.model_dump(exclude_none=True)
        company = Company(**values)
        return await self._lifecycle.create(company)

    async def get_company(self, company_id: str, include_deleted: bool = False) -> Company:
        return await self._lifecycle.find_by_id(company_id, include_deleted=include_deleted)

    async def get_active_company(self, company_id: str) -> Company:
        """A non-deleted company that must also be ACTIVE."""
        company = await self.get_company(company_id)
        if not company.is_active:
            raise InvalidInputError("Company is not active", field="companyId")
        return company

    async def list_companies(
        self,
        filters: BaseFilter,
        *,
        type: CompanyType | None = None,
        country: str | None = None,
        city: str | None = None,
    ) -> Page[Company]:
        params = filters.to_params(
            sortable=COMPANY_SORT_FIELDS, default_limit=COMPANY_DEFAULT_LIMIT
        )
        return await self._lifecycle.list(params, type=type, country=country, city=city)

    async def update_company(self, company_id: str, data: CompanyUpdate) -> Company:
        patch = data.model_dump(exclude_unset=True, exclude_none=True)
        return await self._lifecycle.update(company_id, patch)

    async def change_status(
        self, company_id: str, status: EntityStatus, actor_id: str | None = None
    ) -> Company:
        return await self._lifecycle.change_status(company_id, status, actor_id)

    async def delete_company(self, company_id: str, actor_id: str | None = None) -> Company:
        return await self._lifecycle.soft_delete(company_id, actor_id)

    async def upload_logo(
        self, company_id: str, content: bytes, filename: str, mime_type: str
    ) -> Company:
        """Store a new logo and point the company at it.

        The previous logo is removed afterwards on a best-effort basis.
        """
        if mime_type not in LOGO_MIME_TYPES:
            raise InvalidInputError(f"Unsupported logo type '{mime_type}'", field="file")
        if not content:
            raise InvalidInputError("Logo file is empty", field="file")

        company = await self.get_company(company_id)
        previous = company.logo

        stored = await self._storage.upload(
            content, filename, mime_type, folder=f"companies/{company_id}"
        )
        updated = await self._lifecycle.update(company_id, {"logo": stored.key})

        if previous and previous != stored.key:
            await self._discard_file(previous)
        return updated

    async def _discard_file(self, key: str) -> None:
        try:
            await self._storage.delete(key)
        except Exception as exc:
            logger.warning("Could not delete old file '%s': %s", key, exc)
