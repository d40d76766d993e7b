"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from datetime import timedelta

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from event_platform.config import get_settings
from event_platform.application.interfaces import (
    EmailSender,
    ObjectStorage,
    PasswordHasher,
    TokenIssuer,
)
from event_platform.application.schemas import BaseFilter
from event_platform.application.services import (
    AuthService,
    CompanyService,
    PaymentMethodService,
    PersonService,
    SpeakerService,
    UserService,
)
from event_platform.domain.entities import Actor, UserRole
from event_platform.domain.exceptions import AuthenticationError, PermissionDeniedError
from event_platform.infrastructure.database.session import get_db_session
from event_platform.infrastructure.database.repositories import (
    SQLAlchemyCompanyRepository,
    SQLAlchemyPaymentMethodRepository,
    SQLAlchemyPersonRepository,
    SQLAlchemySpeakerRepository,
    SQLAlchemyUserRepository,
)
from event_platform.infrastructure.email import LoggingEmailSender
from event_platform.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer
from event_platform.infrastructure.storage.local_object_storage import LocalObjectStorage

_bearer = HTTPBearer(auto_error=False)


# ── Collaborators ───────────────────────────────────────────────────


def get_object_storage() -> ObjectStorage:
    settings = get_settings()
    return LocalObjectStorage(upload_dir=settings.upload_dir, base_url=settings.files_base_url)


def get_email_sender() -> EmailSender:
    return LoggingEmailSender()


def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)


def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return JwtTokenIssuer(
        secret=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.jwt_access_token_expire_minutes,
    )


# ── Services ────────────────────────────────────────────────────────


async def get_person_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[PersonService, None]:
    """Provides a PersonService instance with its repository wired up."""
    yield PersonService(SQLAlchemyPersonRepository(session))


async def get_company_service(
    session: AsyncSession = Depends(get_db_session),
    storage: ObjectStorage = Depends(get_object_storage),
) -> AsyncGenerator[CompanyService, None]:
    """Provides a CompanyService with its repository and object storage."""
    yield CompanyService(SQLAlchemyCompanyRepository(session), storage)


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
    person_service: PersonService = Depends(get_person_service),
    company_service: CompanyService = Depends(get_company_service),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService; persons and companies share the request session."""
    yield UserService(
        SQLAlchemyUserRepository(session),
        person_service,
        company_service,
        password_hasher,
    )


async def get_speaker_service(
    session: AsyncSession = Depends(get_db_session),
    person_service: PersonService = Depends(get_person_service),
    company_service: CompanyService = Depends(get_company_service),
) -> AsyncGenerator[SpeakerService, None]:
    yield SpeakerService(SQLAlchemySpeakerRepository(session), person_service, company_service)


async def get_payment_method_service(
    session: AsyncSession = Depends(get_db_session),
    company_service: CompanyService = Depends(get_company_service),
) -> AsyncGenerator[PaymentMethodService, None]:
    yield PaymentMethodService(SQLAlchemyPaymentMethodRepository(session), company_service)


async def get_auth_service(
    user_service: UserService = Depends(get_user_service),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
    email_sender: EmailSender = Depends(get_email_sender),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService with token issuing and notification email."""
    settings = get_settings()
    yield AuthService(
        user_service,
        token_issuer,
        email_sender,
        reset_token_ttl=timedelta(minutes=settings.password_reset_token_expire_minutes),
    )


# ── Authentication & authorization ──────────────────────────────────


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
    session: AsyncSession = Depends(get_db_session),
) -> Actor:
    """Resolve the bearer token to the calling user.

    The account must still exist and be ACTIVE; role and company come from the
    stored user, so a demotion takes effect before the token expires.
    """
    if credentials is None:
        raise AuthenticationError("Authentication required")

    claims = token_issuer.decode(credentials.credentials)
    user = await SQLAlchemyUserRepository(session).get_by_id(claims.user_id)
    if user is None or not user.is_active:
        raise AuthenticationError("User not found or inactive")

    return Actor(
        user_id=user.id,
        email=user.email,
        role=user.role,
        company_id=user.company_id,
    )


def require_roles(*roles: UserRole):
    """Dependency factory: the current user must hold one of ``roles``."""

    async def _check_role(actor: Actor = Depends(get_current_user)) -> Actor:
        if actor.role not in roles:
            raise PermissionDeniedError(
                f"Role '{actor.role.value}' is not allowed to perform this action"
            )
        return actor

    return _check_role


# ── Listing query parameters ────────────────────────────────────────


def get_list_filter(
    page: int | None = Query(None, description="1-based page number"),
    limit: int | None = Query(None, description="Page size, clamped to 1..100"),
    sort: str | None = Query(None, description="Sort field (camelCase)"),
    order: str | None = Query(None, description="asc or desc"),
    search: str | None = Query(None, description="Case-insensitive substring search"),
    entity_status: str | None = Query(None, alias="entityStatus"),
    created_from: str | None = Query(None, alias="createdFrom"),
    created_to: str | None = Query(None, alias="createdTo"),
) -> BaseFilter:
    """Common listing parameters, kept raw; services normalize them per resource."""
    return BaseFilter(
        page=page,
        limit=limit,
        sort=sort,
        order=order,
        search=search,
        entity_status=entity_status,
        created_from=created_from,
        created_to=created_to,
    )
