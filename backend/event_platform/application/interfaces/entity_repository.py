"""Abstract repository interface (port) shared by every soft-deletable entity."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from event_platform.domain.entities import EntityStatus, LifecycleEntity
from event_platform.domain.listing import ListParams, Page

E = TypeVar("E", bound=LifecycleEntity)


class EntityRepository(ABC, Generic[E]):
    """Port for lifecycle-aware persistence: implemented in the infrastructure layer.

    Reads exclude DELETED rows unless ``include_deleted`` is passed. Writes are
    single conditional statements so concurrent requests cannot lose updates.
    """

    entity_name: str = "Entity"

    @abstractmethod
    async def get_by_id(self, entity_id: str, *, include_deleted: bool = False) -> E | None:
        """Retrieve a single entity by its id."""
        ...

    @abstractmethod
    async def exists_live(
        self, values: dict[str, Any], *, exclude_id: str | None = None
    ) -> bool:
        """True when a non-deleted entity other than ``exclude_id`` matches all ``values``.

        String values are compared case-insensitively.
        """
        ...

    @abstractmethod
    async def create(self, entity: E) -> E:
        """Persist a new entity.

        Raises DuplicateEntityError when the store's scoped unique index rejects it.
        """
        ...

    @abstractmethod
    async def update_fields(self, entity_id: str, values: dict[str, Any]) -> E | None:
        """Apply ``values`` to a non-deleted entity. Returns None when nothing matched."""
        ...

    @abstractmethod
    async def transition_status(
        self, entity_id: str, status: EntityStatus, values: dict[str, Any]
    ) -> E | None:
        """Write ``values`` where the entity exists and is not already in ``status``.

        Returns the updated entity, or None when no row matched.
        """
        ...

    @abstractmethod
    async def find_page(self, params: ListParams, **criteria: Any) -> Page[E]:
        """Return one page of entities matching ``params`` and resource ``criteria``."""
        ...
