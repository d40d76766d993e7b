"""Listing primitives — normalized filter parameters and the paginated envelope.

Listing endpoints are deliberately permissive: out-of-range paging values are
clamped and unknown sort, order or status values fall back to defaults instead
of raising.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import Generic, TypeVar

from .entities.lifecycle import EntityStatus

T = TypeVar("T")

DEFAULT_SORT = "createdAt"
MAX_LIMIT = 100

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class ListParams:
    """A clamped, whitelisted listing request ready for the query builder."""

    page: int = 1
    limit: int = 10
    sort: str = DEFAULT_SORT
    descending: bool = True
    search: str | None = None
    status: EntityStatus | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def normalize(
        cls,
        *,
        sortable: frozenset[str],
        default_limit: int = 10,
        page: int | None = None,
        limit: int | None = None,
        sort: str | None = None,
        order: str | None = None,
        search: str | None = None,
        entity_status: str | EntityStatus | None = None,
        created_from: str | None = None,
        created_to: str | None = None,
    ) -> "ListParams":
        """Build params from raw request values.

        ``sort`` must be one of ``sortable`` (API field names); anything else
        becomes ``createdAt``. Only ``"asc"`` (any case) sorts ascending.
        """
        if isinstance(entity_status, EntityStatus):
            status = entity_status
        else:
            status = EntityStatus.parse(entity_status)
        term = search.strip() if search else None
        return cls(
            page=max(1, page or 1),
            limit=min(max(limit if limit is not None else default_limit, 1), MAX_LIMIT),
            sort=sort if sort in sortable else DEFAULT_SORT,
            descending=(order or "").strip().lower() != "asc",
            search=term or None,
            status=status,
            created_from=parse_date_bound(created_from),
            created_to=parse_date_bound(created_to, end_of_day=True),
        )


@dataclass
class Page(Generic[T]):
    """Uniform paginated envelope returned by every listing operation."""

    data: list[T] = field(default_factory=list)
    total_items: int = 0
    total_pages: int = 1
    current_page: int = 1
    has_next_page: bool = False
    has_previous_page: bool = False

    @classmethod
    def build(cls, data: list[T], total_items: int, params: ListParams) -> "Page[T]":
        total_pages = total_pages_for(total_items, params.limit)
        return cls(
            data=data,
            total_items=total_items,
            total_pages=total_pages,
            current_page=params.page,
            has_next_page=params.page < total_pages,
            has_previous_page=params.page > 1,
        )


def total_pages_for(total_items: int, limit: int) -> int:
    """``max(1, ceil(total_items / limit))`` — an empty result still has one page."""
    return max(1, math.ceil(total_items / limit))


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so ``term`` matches as a literal substring."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def contains_pattern(term: str) -> str:
    """LIKE pattern matching ``term`` as a literal substring; pair with ``escape=LIKE_ESCAPE``."""
    return f"%{escape_like(term)}%"


def parse_date_bound(raw: str | None, *, end_of_day: bool = False) -> datetime | None:
    """Parse an ISO date or datetime into an aware UTC datetime.

    A date-only upper bound covers the whole day. Unparseable values yield None.
    """
    if not raw or not raw.strip():
        return None
    value = raw.strip()
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if end_of_day and _is_date_only(value):
        parsed = datetime.combine(parsed.date(), time.max)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _is_date_only(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True

