"""Filter/pagination query builder: turns ListParams into count + page statements.

Column names never come from the request: sort keys are looked up in a
per-resource whitelist and search terms are bound as escaped LIKE patterns.
"""

from typing import Any

from sqlalchemy import ColumnElement, Select, String, column, exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement

from event_platform.domain.entities import EntityStatus
from event_platform.domain.listing import DEFAULT_SORT, LIKE_ESCAPE, ListParams, contains_pattern


# ── JSON arrays ─────────────────────────────────────────────────────


class json_array_elements(FunctionElement):
    """Set-returning function yielding each element of a JSON array as text."""

    name = "json_array_elements"
    inherit_cache = True


@compiles(json_array_elements)
def _json_each(element, compiler, **kw):
    return "json_each(%s)" % compiler.process(element.clauses, **kw)


@compiles(json_array_elements, "postgresql")
def _json_array_elements_text(element, compiler, **kw):
    return "json_array_elements_text(%s)" % compiler.process(element.clauses, **kw)


class JsonArray:
    """A JSON array column whose elements are matched one by one.

    Matching the serialized text would see escaped non-ASCII characters and
    the JSON punctuation, so terms are compared against each decoded element.
    """

    def __init__(self, array_column: Any):
        self.column = array_column

    def any_element(self, term: str) -> ColumnElement[bool]:
        elements = json_array_elements(self.column).table_valued(column("value", String))
        return exists(
            select(1).select_from(elements).where(_ilike(elements.c.value, term))
        )


class ListQuery:
    """Accumulates WHERE clauses for one listing request, then runs it.

    Usage:
        query = ListQuery(PersonModel, params, sort_columns=..., search_columns=...)
        query.equals(PersonModel.type, "speaker_person")
        rows, total = await query.execute(session)
    """

    def __init__(
        self,
        model: Any,
        params: ListParams,
        *,
        sort_columns: dict[str, Any],
        search_columns: tuple[Any, ...] = (),
        base: Select | None = None,
    ):
        self._model = model
        self._params = params
        self._sort_columns = sort_columns
        self._search_columns = search_columns
        self._stmt = base if base is not None else select(model)
        self._apply_common()

    # ── Clause helpers (None values are ignored) ─────────────────────

    def where(self, *clauses: ColumnElement[bool]) -> "ListQuery":
        self._stmt = self._stmt.where(*clauses)
        return self

    def equals(self, column: Any, value: Any) -> "ListQuery":
        if value is None:
            return self
        return self.where(column == getattr(value, "value", value))

    def iequals(self, column: Any, value: str | None) -> "ListQuery":
        if not value:
            return self
        return self.where(func.lower(column) == value.strip().lower())

    def between(self, column: Any, low: Any = None, high: Any = None) -> "ListQuery":
        if low is not None:
            self.where(column >= low)
        if high is not None:
            self.where(column <= high)
        return self

    def contains(self, column: Any, term: str | None) -> "ListQuery":
        """Case-insensitive literal substring match."""
        if not term or not term.strip():
            return self
        return self.where(_ilike(column, term.strip()))

    # ── Execution ────────────────────────────────────────────────────

    def statements(self) -> tuple[Select, Select]:
        """The (count, page) statements; exposed for inspection in tests."""
        count_stmt = select(func.count()).select_from(self._stmt.order_by(None).subquery())

        sort_column = self._sort_columns.get(self._params.sort)
        if sort_column is None:
            sort_column = self._sort_columns[DEFAULT_SORT]
        if self._params.descending:
            ordering = (sort_column.desc(), self._model.id.desc())
        else:
            ordering = (sort_column.asc(), self._model.id.asc())
        page_stmt = (
            self._stmt.order_by(*ordering)
            .offset(self._params.skip)
            .limit(self._params.limit)
        )
        return count_stmt, page_stmt

    async def execute(self, session: AsyncSession) -> tuple[list[Any], int]:
        """Run the count and the page window. Returns (rows, total_items).

        The statements run one after the other: an AsyncSession does not
        allow concurrent operations.
        """
        count_stmt, page_stmt = self.statements()
        total = (await session.execute(count_stmt)).scalar_one()
        rows = (await session.execute(page_stmt)).scalars().all()
        return list(rows), total

    # ── Internals ────────────────────────────────────────────────────

    def _apply_common(self) -> None:
        params = self._params
        status_column = self._model.entity_status
        if params.status is None:
            self.where(status_column != EntityStatus.DELETED.value)
        else:
            self.where(status_column == params.status.value)

        self.between(self._model.created_at, params.created_from, params.created_to)

        if params.search and self._search_columns:
            self.where(or_(*(_ilike(column, params.search) for column in self._search_columns)))


def _ilike(column: Any, term: str) -> ColumnElement[bool]:
    if isinstance(column, JsonArray):
        return column.any_element(term)
    return column.ilike(contains_pattern(term), escape=LIKE_ESCAPE)
