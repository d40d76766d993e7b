"""Abstract repository interface (port) for Person persistence."""

from abc import abstractmethod

from event_platform.domain.entities import Person

from .entity_repository import EntityRepository


class PersonRepository(EntityRepository[Person]):
    """Port for person persistence."""

    entity_name = "Person"

    @abstractmethod
    async def find_by_email(self, email: str, *, include_deleted: bool = False) -> Person | None:
        """Retrieve a person by normalized email."""
        ...
