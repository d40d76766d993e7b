"""Soft-delete lifecycle manager: one parametrized component per entity type.

Owns the rules every resource service shares:

* creation with a uniqueness guard scoped to non-deleted rows,
* reads that hide DELETED rows unless asked otherwise,
* patches that may not touch server-managed fields,
* status transitions, the only path that writes ``entity_status``,
  ``deleted_at`` and ``deleted_by``.

A transition to the status an entity already has is an idempotent no-op: the
stored entity comes back unchanged (a second delete keeps the original
``deleted_at``). Only an id that does not exist at all is reported as not found.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from event_platform.application.interfaces import EntityRepository
from event_platform.domain.entities import (
    SERVER_MANAGED_FIELDS,
    EntityStatus,
    LifecycleEntity,
    status_change_values,
)
from event_platform.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidInputError,
)
from event_platform.domain.listing import ListParams, Page

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=LifecycleEntity)

Normalizer = Callable[[Any], Any]


def normalize_email(value: str | None) -> str | None:
    """Trim and lowercase an email; blank becomes None."""
    if value is None:
        return None
    value = value.strip().lower()
    return value or None


class EntityLifecycle(Generic[E]):
    """Create / find / update / change-status contract over an EntityRepository."""

    def __init__(
        self,
        repository: EntityRepository[E],
        *,
        unique_keys: Iterable[tuple[str, ...]] = (),
        normalizers: dict[str, Normalizer] | None = None,
    ) -> None:
        self._repository = repository
        self._unique_keys = tuple(unique_keys)
        self._normalizers = normalizers or {}

    @property
    def entity_name(self) -> str:
        return self._repository.entity_name

    # ── Create / read ────────────────────────────────────────────────

    async def create(self, entity: E) -> E:
        """Persist ``entity`` as ACTIVE after checking its scoped-unique keys."""
        for name, normalizer in self._normalizers.items():
            setattr(entity, name, normalizer(getattr(entity, name)))

        for key in self._unique_keys:
            values = {name: getattr(entity, name) for name in key}
            await self._ensure_available(values)

        entity.entity_status = EntityStatus.ACTIVE
        entity.deleted_at = None
        entity.deleted_by = None

        created = await self._repository.create(entity)
        logger.info("Created %s %s", self.entity_name, created.id)
        return created

    async def find_by_id(self, entity_id: str, include_deleted: bool = False) -> E:
        entity = await self._repository.get_by_id(entity_id, include_deleted=include_deleted)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity

    async def list(self, params: ListParams, **criteria: Any) -> Page[E]:
        return await self._repository.find_page(params, **criteria)

    # ── Update ───────────────────────────────────────────────────────

    async def update(self, entity_id: str, patch: dict[str, Any]) -> E:
        """Apply a partial update to a non-deleted entity.

        Scoped-unique fields in the patch are re-validated against every other
        non-deleted entity.
        """
        forbidden = sorted(SERVER_MANAGED_FIELDS.intersection(patch))
        if forbidden:
            raise InvalidInputError(
                f"Fields cannot be updated directly: {', '.join(forbidden)}",
                field=forbidden[0],
            )

        current = await self.find_by_id(entity_id)
        values = self._normalize(patch)
        if not values:
            return current

        for key in self._unique_keys:
            if not any(name in values for name in key):
                continue
            merged = {name: values.get(name, getattr(current, name)) for name in key}
            unchanged = all(merged[name] == getattr(current, name) for name in key)
            if not unchanged:
                await self._ensure_available(merged, exclude_id=entity_id)

        updated = await self._repository.update_fields(entity_id, values)
        if updated is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        logger.info("Updated %s %s (%s)", self.entity_name, entity_id, ", ".join(sorted(values)))
        return updated

    # ── Status transitions ───────────────────────────────────────────

    async def change_status(
        self,
        entity_id: str,
        new_status: EntityStatus,
        actor_id: str | None = None,
    ) -> E:
        """Move an entity to ``new_status``; every transition is permitted.

        Authorization is the caller's concern. Leaving DELETED re-checks the
        scoped-unique keys, since another entity may have taken the value.
        """
        if new_status != EntityStatus.DELETED and self._unique_keys:
            current = await self.find_by_id(entity_id, include_deleted=True)
            if current.is_deleted:
                for key in self._unique_keys:
                    values = {name: getattr(current, name) for name in key}
                    await self._ensure_available(values, exclude_id=entity_id)

        values = status_change_values(new_status, actor_id)
        updated = await self._repository.transition_status(entity_id, new_status, values)
        if updated is not None:
            logger.info(
                "%s %s status -> %s (actor=%s)",
                self.entity_name,
                entity_id,
                new_status.value,
                actor_id,
            )
            return updated

        # No row matched: either the id is unknown or the status is unchanged.
        existing = await self.find_by_id(entity_id, include_deleted=True)
        logger.debug(
            "%s %s already %s; transition skipped",
            self.entity_name,
            entity_id,
            existing.entity_status.value,
        )
        return existing

    async def soft_delete(self, entity_id: str, actor_id: str | None = None) -> E:
        return await self.change_status(entity_id, EntityStatus.DELETED, actor_id)

    # ── Helpers ──────────────────────────────────────────────────────

    def _normalize(self, values: dict[str, Any]) -> dict[str, Any]:
        normalized = dict(values)
        for name, normalizer in self._normalizers.items():
            if name in normalized:
                normalized[name] = normalizer(normalized[name])
        return normalized

    async def _ensure_available(
        self, values: dict[str, Any], exclude_id: str | None = None
    ) -> None:
        """Raise DuplicateEntityError when a non-deleted entity holds ``values``.

        Keys with a missing component are not constrained.
        """
        if any(value is None for value in values.values()):
            return
        if await self._repository.exists_live(values, exclude_id=exclude_id):
            field = ",".join(values)
            value = ",".join(str(v) for v in values.values())
            raise DuplicateEntityError(self.entity_name, field, value)
