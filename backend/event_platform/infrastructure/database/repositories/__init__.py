from .base import SQLAlchemyEntityRepository
from .list_query import ListQuery
from .person_repository import SQLAlchemyPersonRepository
from .company_repository import SQLAlchemyCompanyRepository
from .user_repository import SQLAlchemyUserRepository
from .speaker_repository import SQLAlchemySpeakerRepository
from .payment_method_repository import SQLAlchemyPaymentMethodRepository

__all__ = [
    "SQLAlchemyEntityRepository",
    "ListQuery",
    "SQLAlchemyPersonRepository",
    "SQLAlchemyCompanyRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemySpeakerRepository",
    "SQLAlchemyPaymentMethodRepository",
]
