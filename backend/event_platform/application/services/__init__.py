from .entity_lifecycle import EntityLifecycle, normalize_email
from .person_service import PersonService
from .company_service import CompanyService
from .user_service import UserService
from .speaker_service import SpeakerService
from .payment_method_service import PaymentMethodService
from .auth_service import AuthResult, AuthService

__all__ = [
    "EntityLifecycle",
    "normalize_email",
    "PersonService",
    "CompanyService",
    "UserService",
    "SpeakerService",
    "PaymentMethodService",
    "AuthResult",
    "AuthService",
]
