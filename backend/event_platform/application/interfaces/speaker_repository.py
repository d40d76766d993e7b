"""Abstract repository interface (port) for Speaker persistence."""

from abc import abstractmethod

from event_platform.domain.entities import Speaker, SpeakerStats

from .entity_repository import EntityRepository


class SpeakerRepository(EntityRepository[Speaker]):
    """Port for speaker persistence."""

    entity_name = "Speaker"

    @abstractmethod
    async def find_by_company(
        self, company_id: str, *, include_inactive: bool = False
    ) -> list[Speaker]:
        """ACTIVE speakers of a company (all non-deleted with ``include_inactive``), newest first."""
        ...

    @abstractmethod
    async def company_stats(self, company_id: str) -> SpeakerStats:
        """Aggregate figures over a company's non-deleted speakers."""
        ...
