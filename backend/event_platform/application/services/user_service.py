"""Application service (use case) for User account operations."""

import logging
from datetime import datetime, timezone

from event_platform.application.interfaces import PasswordHasher, UserRepository
from event_platform.application.schemas import (
    USER_DEFAULT_LIMIT,
    USER_SORT_FIELDS,
    BaseFilter,
    UserCreate,
    UserUpdate,
)
from event_platform.domain.entities import EntityStatus, Person, User, UserRole
from event_platform.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidInputError,
)
from event_platform.domain.listing import Page

from .company_service import CompanyService
from .entity_lifecycle import EntityLifecycle, normalize_email
from .person_service import PersonService

logger = logging.getLogger(__name__)


def _check_role_company(role: UserRole, company_id: str | None) -> None:
    if role == UserRole.COMPANY_ADMIN and not company_id:
        raise InvalidInputError("companyId is required for company_admin users", field="companyId")
    if role == UserRole.USER and company_id:
        raise InvalidInputError("companyId is not allowed for user role", field="companyId")


class UserService:
    """Orchestrates accounts: each user owns a Person and may belong to a Company."""

    def __init__(
        self,
        repository: UserRepository,
        person_service: PersonService,
        company_service: CompanyService,
        password_hasher: PasswordHasher,
    ):
        self._repository = repository
        self._persons = person_service
        self._companies = company_service
        self._hasher = password_hasher
        self._lifecycle = EntityLifecycle(
            repository,
            unique_keys=[("email",)],
            normalizers={"email": normalize_email},
        )

    # ── Create / read ────────────────────────────────────────────────

    async def create_user(self, data: UserCreate) -> tuple[User, Person]:
        """Create the person record and the account on top of it."""
        email = normalize_email(data.email)
        _check_role_company(data.role, data.company_id)
        if await self._repository.exists_live({"email": email}):
            raise DuplicateEntityError("User", "email", email)
        if data.company_id:
            await self._companies.get_company(data.company_id)

        person = await self._persons.create_for_user(
            first_name=data.first_name,
            last_name=data.last_name,
            email=email,
            phone=data.phone,
            date_of_birth=data.date_of_birth,
        )
        user = User(
            person_id=person.id,
            email=email,
            password_hash=self._hasher.hash(data.password),
            role=data.role,
            company_id=data.company_id,
        )
        user = await self._lifecycle.create(user)
        return user, person

    async def get_user(self, user_id: str, include_deleted: bool = False) -> User:
        return await self._lifecycle.find_by_id(user_id, include_deleted=include_deleted)

    async def get_profile(self, user_id: str) -> tuple[User, Person | None]:
        """The user and their person record (None if it was removed)."""
        user = await self.get_user(user_id)
        try:
            person = await self._persons.get_person(user.person_id, include_deleted=True)
        except EntityNotFoundError:
            person = None
        return user, person

    async def find_by_email(self, email: str) -> User | None:
        normalized = normalize_email(email)
        if normalized is None:
            return None
        return await self._repository.find_by_email(normalized)

    async def list_users(
        self,
        filters: BaseFilter,
        *,
        role: UserRole | None = None,
        company_id: str | None = None,
        email_verified: bool | None = None,
    ) -> Page[User]:
        params = filters.to_params(sortable=USER_SORT_FIELDS, default_limit=USER_DEFAULT_LIMIT)
        return await self._lifecycle.list(
            params, role=role, company_id=company_id, email_verified=email_verified
        )

    # ── Mutations ────────────────────────────────────────────────────

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        current = await self.get_user(user_id)
        patch = data.model_dump(exclude_unset=True, exclude_none=True)

        role = patch.get("role", current.role)
        company_id = patch.get("company_id", current.company_id)
        if role == UserRole.USER and "role" in patch and "company_id" not in patch:
            company_id = None
            patch["company_id"] = None
        _check_role_company(role, company_id)
        if patch.get("company_id"):
            await self._companies.get_company(patch["company_id"])

        return await self._lifecycle.update(user_id, patch)

    async def change_status(
        self, user_id: str, status: EntityStatus, actor_id: str | None = None
    ) -> User:
        """Transition the account; deleting or restoring it carries its person along."""
        user = await self._lifecycle.change_status(user_id, status, actor_id)
        await self._sync_person(user, actor_id)
        return user

    async def delete_user(self, user_id: str, actor_id: str | None = None) -> User:
        return await self.change_status(user_id, EntityStatus.DELETED, actor_id)

    async def _sync_person(self, user: User, actor_id: str | None) -> None:
        # The person holds the same email, so it must not outlive the account.
        try:
            person = await self._persons.get_person(user.person_id, include_deleted=True)
        except EntityNotFoundError:
            logger.warning("User %s has no person record %s", user.id, user.person_id)
            return
        if user.is_deleted:
            await self._persons.delete_person(person.id, actor_id)
        elif person.is_deleted:
            await self._persons.change_status(person.id, user.entity_status, actor_id)

    # ── Credentials ──────────────────────────────────────────────────

    def verify_password(self, user: User, password: str) -> bool:
        return self._hasher.verify(password, user.password_hash)

    async def update_password(self, user_id: str, new_password: str) -> User:
        """Store a new hash and invalidate any pending reset token."""
        user = await self._lifecycle.update(
            user_id,
            {
                "password_hash": self._hasher.hash(new_password),
                "password_reset_token": None,
                "password_reset_expires": None,
            },
        )
        logger.info("Password updated for user %s", user_id)
        return user

    async def record_login(self, user_id: str) -> User:
        return await self._lifecycle.update(
            user_id, {"last_login": datetime.now(timezone.utc)}
        )

    async def set_verification_token(self, user_id: str, token: str) -> User:
        return await self._lifecycle.update(user_id, {"email_verification_token": token})

    async def verify_email(self, token: str) -> User:
        user = await self._repository.find_by_verification_token(token)
        if user is None:
            raise InvalidInputError("Invalid or expired verification token", field="token")
        return await self._lifecycle.update(
            user.id, {"email_verified": True, "email_verification_token": None}
        )

    async def set_reset_token(self, user_id: str, token: str, expires: datetime) -> User:
        return await self._lifecycle.update(
            user_id,
            {"password_reset_token": token, "password_reset_expires": expires},
        )

    async def find_by_reset_token(self, token: str) -> User | None:
        return await self._repository.find_by_reset_token(token, datetime.now(timezone.utc))
