from .common import (
    BaseFilter,
    CamelModel,
    EntityResponse,
    MessageResponse,
    PageResponse,
    StatusChangeRequest,
)
from .person import (
    PERSON_DEFAULT_LIMIT,
    PERSON_SORT_FIELDS,
    PersonCreate,
    PersonResponse,
    PersonUpdate,
)
from .company import (
    COMPANY_DEFAULT_LIMIT,
    COMPANY_SORT_FIELDS,
    AddressSchema,
    CompanyCreate,
    CompanyResponse,
    CompanySettingsSchema,
    CompanyUpdate,
)
from .user import (
    USER_DEFAULT_LIMIT,
    USER_SORT_FIELDS,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from .speaker import (
    SPEAKER_DEFAULT_LIMIT,
    SPEAKER_SORT_FIELDS,
    SpeakerCreate,
    SpeakerResponse,
    SpeakerStatsResponse,
    SpeakerUpdate,
    SpeakerWithPersonCreate,
    SpeakerWithPersonResponse,
)
from .payment_method import (
    PAYMENT_METHOD_DEFAULT_LIMIT,
    PAYMENT_METHOD_SORT_FIELDS,
    PaymentMethodCreate,
    PaymentMethodResponse,
    PaymentMethodUpdate,
)
from .auth import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    TokenResponse,
)

__all__ = [
    "BaseFilter",
    "CamelModel",
    "EntityResponse",
    "MessageResponse",
    "PageResponse",
    "StatusChangeRequest",
    "PERSON_DEFAULT_LIMIT",
    "PERSON_SORT_FIELDS",
    "PersonCreate",
    "PersonResponse",
    "PersonUpdate",
    "COMPANY_DEFAULT_LIMIT",
    "COMPANY_SORT_FIELDS",
    "AddressSchema",
    "CompanyCreate",
    "CompanyResponse",
    "CompanySettingsSchema",
    "CompanyUpdate",
    "USER_DEFAULT_LIMIT",
    "USER_SORT_FIELDS",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
    "SPEAKER_DEFAULT_LIMIT",
    "SPEAKER_SORT_FIELDS",
    "SpeakerCreate",
    "SpeakerResponse",
    "SpeakerStatsResponse",
    "SpeakerUpdate",
    "SpeakerWithPersonCreate",
    "SpeakerWithPersonResponse",
    "PAYMENT_METHOD_DEFAULT_LIMIT",
    "PAYMENT_METHOD_SORT_FIELDS",
    "PaymentMethodCreate",
    "PaymentMethodResponse",
    "PaymentMethodUpdate",
    "AuthResponse",
    "ChangePasswordRequest",
    "ForgotPasswordRequest",
    "LoginRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    "TokenResponse",
]
