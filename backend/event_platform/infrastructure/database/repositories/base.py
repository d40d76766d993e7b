"""Generic SQLAlchemy implementation of the lifecycle repository port."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from event_platform.domain.entities import EntityStatus, LifecycleEntity
from event_platform.domain.exceptions import DuplicateEntityError
from event_platform.domain.listing import ListParams, Page

from .list_query import ListQuery

E = TypeVar("E", bound=LifecycleEntity)


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; everything stored is UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def to_column_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


class SQLAlchemyEntityRepository(Generic[E]):
    """Shared reads, conditional writes and listing for one ORM model.

    Subclasses set ``model``, ``sort_columns``, ``search_columns`` and
    ``unique_fields`` and implement the ``_to_entity`` / ``_to_model`` mappers.
    """

    model: Any = None
    sort_columns: dict[str, Any] = {}
    search_columns: tuple[Any, ...] = ()
    unique_fields: tuple[str, ...] = ()

    def __init__(self, session: AsyncSession):
        self._session = session

    # ── Mappers ──────────────────────────────────────────────────────

    def _to_entity(self, model: Any) -> E:
        raise NotImplementedError

    def _to_model(self, entity: E) -> Any:
        raise NotImplementedError

    @staticmethod
    def _lifecycle_fields(model: Any) -> dict[str, Any]:
        return {
            "id": model.id,
            "entity_status": EntityStatus(model.entity_status),
            "deleted_at": as_utc(model.deleted_at),
            "deleted_by": model.deleted_by,
            "created_at": as_utc(model.created_at),
            "updated_at": as_utc(model.updated_at),
        }

    @staticmethod
    def _lifecycle_columns(entity: LifecycleEntity) -> dict[str, Any]:
        return {
            "id": entity.id,
            "entity_status": entity.entity_status.value,
            "deleted_at": entity.deleted_at,
            "deleted_by": entity.deleted_by,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    # ── Reads ────────────────────────────────────────────────────────

    def _live(self):
        return self.model.entity_status != EntityStatus.DELETED.value

    async def get_by_id(self, entity_id: str, *, include_deleted: bool = False) -> E | None:
        stmt = select(self.model).where(self.model.id == entity_id)
        if not include_deleted:
            stmt = stmt.where(self._live())
        return await self._first(stmt)

    async def exists_live(
        self, values: dict[str, Any], *, exclude_id: str | None = None
    ) -> bool:
        stmt = select(self.model.id).where(self._live())
        for name, value in values.items():
            column = getattr(self.model, name)
            value = to_column_value(value)
            if isinstance(value, str):
                stmt = stmt.where(func.lower(column) == value.lower())
            else:
                stmt = stmt.where(column == value)
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def find_page(self, params: ListParams, **criteria: Any) -> Page[E]:
        query = ListQuery(
            self.model,
            params,
            sort_columns=self.sort_columns,
            search_columns=self.search_columns,
            base=self._base_select(),
        )
        self._apply_criteria(query, **criteria)
        rows, total = await query.execute(self._session)
        return Page.build([self._to_entity(row) for row in rows], total, params)

    def _base_select(self) -> Select:
        return select(self.model)

    def _apply_criteria(self, query: ListQuery, **criteria: Any) -> None:
        """Resource-specific filters; the base resource has none."""

    async def _first(self, stmt: Select) -> E | None:
        # populate_existing refreshes instances already in the identity map
        # after a bulk UPDATE.
        result = await self._session.execute(stmt.execution_options(populate_existing=True))
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    # ── Writes ───────────────────────────────────────────────────────

    async def create(self, entity: E) -> E:
        model = self._to_model(entity)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise self._duplicate(entity) from exc
        return self._to_entity(model)

    async def update_fields(self, entity_id: str, values: dict[str, Any]) -> E | None:
        stmt = update(self.model).where(self.model.id == entity_id, self._live())
        matched = await self._write(stmt, values)
        if not matched:
            return None
        return await self.get_by_id(entity_id, include_deleted=True)

    async def transition_status(
        self, entity_id: str, status: EntityStatus, values: dict[str, Any]
    ) -> E | None:
        stmt = update(self.model).where(
            self.model.id == entity_id,
            self.model.entity_status != status.value,
        )
        matched = await self._write(stmt, values)
        if not matched:
            return None
        return await self.get_by_id(entity_id, include_deleted=True)

    async def _write(self, stmt: Any, values: dict[str, Any]) -> bool:
        """Run a single conditional UPDATE. Returns whether a row matched."""
        columns = {name: to_column_value(value) for name, value in values.items()}
        columns["updated_at"] = datetime.now(timezone.utc)
        stmt = stmt.values(**columns).execution_options(synchronize_session=False)
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as exc:
            raise self._duplicate(None, values) from exc
        return result.rowcount > 0

    def _duplicate(
        self, entity: E | None, values: dict[str, Any] | None = None
    ) -> DuplicateEntityError:
        values = values or {}
        fields = self.unique_fields or ("id",)
        shown = [
            str(to_column_value(values.get(name, getattr(entity, name, None))))
            for name in fields
        ]
        return DuplicateEntityError(self.entity_name, ",".join(fields), ",".join(shown))
