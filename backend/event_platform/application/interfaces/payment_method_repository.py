"""Abstract repository interface (port) for PaymentMethod persistence."""

from abc import abstractmethod

from event_platform.domain.entities import PaymentMethod

from .entity_repository import EntityRepository


class PaymentMethodRepository(EntityRepository[PaymentMethod]):
    """Port for payment method persistence."""

    entity_name = "PaymentMethod"

    @abstractmethod
    async def find_available(self, company_id: str | None) -> list[PaymentMethod]:
        """ACTIVE, switched-on methods ordered by ``display_order``.

        With a ``company_id`` returns that company's methods plus the global
        ones; without one, only global methods.
        """
        ...
