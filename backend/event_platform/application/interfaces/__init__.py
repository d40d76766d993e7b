from .entity_repository import EntityRepository
from .person_repository import PersonRepository
from .company_repository import CompanyRepository
from .user_repository import UserRepository
from .speaker_repository import SpeakerRepository
from .payment_method_repository import PaymentMethodRepository
from .object_storage import ObjectStorage, StoredObject
from .email_sender import EmailMessage, EmailSender
from .password_hasher import PasswordHasher
from .token_issuer import IssuedToken, TokenIssuer

__all__ = [
    "EntityRepository",
    "PersonRepository",
    "CompanyRepository",
    "UserRepository",
    "SpeakerRepository",
    "PaymentMethodRepository",
    "ObjectStorage",
    "StoredObject",
    "EmailMessage",
    "EmailSender",
    "PasswordHasher",
    "IssuedToken",
    "TokenIssuer",
]
