"""Shared DTOs — camelCase wire format, filter parameters and the paginated envelope."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from event_platform.domain.entities import EntityStatus
from event_platform.domain.listing import ListParams, Page

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for every request/response body: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EntityResponse(CamelModel):
    """Lifecycle bookkeeping shared by every entity response."""

    id: str
    entity_status: EntityStatus
    deleted_at: datetime | None = None
    deleted_by: str | None = None
    created_at: datetime
    updated_at: datetime


class StatusChangeRequest(CamelModel):
    """Body of ``PATCH /<resource>/{id}/status``."""

    entity_status: EntityStatus


class PageResponse(CamelModel, Generic[T]):
    """``{data, totalItems, totalPages, currentPage, hasNextPage, hasPreviousPage}``."""

    data: list[T]
    total_items: int
    total_pages: int
    current_page: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_page(cls, page: Page[Any], convert: Any = None) -> "PageResponse[T]":
        items = [convert(item) for item in page.data] if convert else page.data
        return cls(
            data=items,
            total_items=page.total_items,
            total_pages=page.total_pages,
            current_page=page.current_page,
            has_next_page=page.has_next_page,
            has_previous_page=page.has_previous_page,
        )


class MessageResponse(CamelModel):
    message: str


@dataclass
class BaseFilter:
    """Raw listing query parameters common to every resource.

    Values are kept as received; ``to_params`` applies the clamping and the
    per-resource sort whitelist.
    """

    page: int | None = None
    limit: int | None = None
    sort: str | None = None
    order: str | None = None
    search: str | None = None
    entity_status: str | None = None
    created_from: str | None = None
    created_to: str | None = None

    def to_params(self, *, sortable: frozenset[str], default_limit: int) -> ListParams:
        return ListParams.normalize(
            sortable=sortable,
            default_limit=default_limit,
            page=self.page,
            limit=self.limit,
            sort=self.sort,
            order=self.order,
            search=self.search,
            entity_status=self.entity_status,
            created_from=self.created_from,
            created_to=self.created_to,
        )
