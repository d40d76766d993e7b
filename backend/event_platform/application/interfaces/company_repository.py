"""Abstract repository interface (port) for Company persistence."""

from event_platform.domain.entities import Company

from .entity_repository import EntityRepository


class CompanyRepository(EntityRepository[Company]):
    """Port for company persistence: the generic lifecycle contract suffices."""

    entity_name = "Company"
