"""In-memory fake repositories and service fixtures for unit tests."""

from collections import Counter
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

import pytest

from event_platform.application.interfaces import (
    CompanyRepository,
    PaymentMethodRepository,
    PersonRepository,
    SpeakerRepository,
    UserRepository,
)
from event_platform.application.services import (
    AuthService,
    CompanyService,
    PaymentMethodService,
    PersonService,
    SpeakerService,
    UserService,
)
from event_platform.domain.entities import (
    EntityStatus,
    Person,
    PersonType,
    Speaker,
    SpeakerStats,
    User,
)
from event_platform.domain.listing import ListParams, Page
from event_platform.infrastructure.email import LoggingEmailSender
from event_platform.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer
from event_platform.infrastructure.storage.local_object_storage import LocalObjectStorage

_SORT_ATTRIBUTES = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "name": "name",
    "type": "type",
    "entityStatus": "entity_status",
}


def _matches(stored: Any, wanted: Any) -> bool:
    if isinstance(stored, str) and isinstance(wanted, str):
        return stored.lower() == wanted.lower()
    return stored == wanted


class InMemoryRepository:
    """Dict-backed implementation of the generic lifecycle repository port.

    Entities are copied on the way in and out, like rows in a database.
    """

    search_fields: tuple[str, ...] = ()

    def __init__(self):
        self.rows: dict[str, Any] = {}

    async def get_by_id(self, entity_id, *, include_deleted=False):
        entity = self.rows.get(entity_id)
        if entity is None or (entity.is_deleted and not include_deleted):
            return None
        return replace(entity)

    async def exists_live(self, values, *, exclude_id=None):
        return any(
            not entity.is_deleted
            and entity.id != exclude_id
            and all(_matches(getattr(entity, name), value) for name, value in values.items())
            for entity in self.rows.values()
        )

    async def create(self, entity):
        self.rows[entity.id] = replace(entity)
        return replace(entity)

    async def update_fields(self, entity_id, values):
        entity = self.rows.get(entity_id)
        if entity is None or entity.is_deleted:
            return None
        self._apply(entity, values)
        return replace(entity)

    async def transition_status(self, entity_id, status, values):
        entity = self.rows.get(entity_id)
        if entity is None or entity.entity_status == status:
            return None
        self._apply(entity, values)
        return replace(entity)

    async def find_page(self, params: ListParams, **criteria):
        items = [
            entity
            for entity in self.rows.values()
            if (entity.entity_status == params.status if params.status else not entity.is_deleted)
        ]
        for name, value in criteria.items():
            if value is not None and items and hasattr(items[0], name):
                items = [entity for entity in items if getattr(entity, name) == value]
        if params.search:
            term = params.search.lower()
            items = [
                entity
                for entity in items
                if any(term in (getattr(entity, f) or "").lower() for f in self.search_fields)
            ]
        attribute = _SORT_ATTRIBUTES.get(params.sort, "created_at")
        items.sort(key=lambda e: (getattr(e, attribute), e.id), reverse=params.descending)
        window = items[params.skip : params.skip + params.limit]
        return Page.build([replace(e) for e in window], len(items), params)

    @staticmethod
    def _apply(entity, values):
        for name, value in values.items():
            setattr(entity, name, value)
        entity.updated_at = datetime.now(timezone.utc)


class FakePersonRepository(InMemoryRepository, PersonRepository):
    search_fields = ("first_name", "last_name", "email")

    async def find_by_email(self, email, *, include_deleted=False):
        for person in self.rows.values():
            if person.email == email and (include_deleted or not person.is_deleted):
                return replace(person)
        return None


class FakeCompanyRepository(InMemoryRepository, CompanyRepository):
    search_fields = ("name", "description", "contact_email")


class FakeUserRepository(InMemoryRepository, UserRepository):
    search_fields = ("email",)

    async def find_by_email(self, email, *, include_deleted=False) -> User | None:
        for user in self.rows.values():
            if user.email == email and (include_deleted or not user.is_deleted):
                return replace(user)
        return None

    async def find_by_verification_token(self, token):
        for user in self.rows.values():
            if user.email_verification_token == token and not user.is_deleted:
                return replace(user)
        return None

    async def find_by_reset_token(self, token, now):
        for user in self.rows.values():
            if (
                user.password_reset_token == token
                and user.password_reset_expires is not None
                and user.password_reset_expires > now
                and not user.is_deleted
            ):
                return replace(user)
        return None


class FakeSpeakerRepository(InMemoryRepository, SpeakerRepository):
    search_fields = ("specialty", "biography")

    async def find_by_company(self, company_id, *, include_inactive=False) -> list[Speaker]:
        speakers = [
            s
            for s in self.rows.values()
            if s.company_id == company_id
            and (not s.is_deleted if include_inactive else s.is_active)
        ]
        speakers.sort(key=lambda s: s.created_at, reverse=True)
        return [replace(s) for s in speakers]

    async def company_stats(self, company_id) -> SpeakerStats:
        live = [s for s in self.rows.values() if s.company_id == company_id and not s.is_deleted]
        active = [s for s in live if s.is_active]
        rates = [s.hourly_rate for s in live if s.hourly_rate is not None]
        top = Counter(s.specialty for s in active).most_common(5)
        return SpeakerStats(
            total_speakers=len(live),
            active_speakers=len(active),
            avg_experience=round(sum(s.years_experience for s in live) / len(live), 1) if live else 0.0,
            avg_hourly_rate=round(sum(rates) / len(rates), 2) if rates else 0.0,
            top_specialties=[{"specialty": name, "count": n} for name, n in top],
        )


class FakePaymentMethodRepository(InMemoryRepository, PaymentMethodRepository):
    search_fields = ("name", "description")

    async def find_available(self, company_id):
        methods = [
            m
            for m in self.rows.values()
            if m.entity_status == EntityStatus.ACTIVE
            and m.is_active
            and (m.company_id is None or (company_id and m.company_id == company_id))
        ]
        methods.sort(key=lambda m: m.display_order)
        return [replace(m) for m in methods]


# ── Fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def person_repository() -> FakePersonRepository:
    return FakePersonRepository()


@pytest.fixture
def person_service(person_repository) -> PersonService:
    return PersonService(person_repository)


@pytest.fixture
def storage(tmp_path) -> LocalObjectStorage:
    return LocalObjectStorage(upload_dir=str(tmp_path / "uploads"), base_url="/files")


@pytest.fixture
def company_service(storage) -> CompanyService:
    return CompanyService(FakeCompanyRepository(), storage)


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    # Minimum bcrypt cost keeps the suite fast.
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def user_service(user_repository, person_service, company_service, password_hasher) -> UserService:
    return UserService(user_repository, person_service, company_service, password_hasher)


@pytest.fixture
def token_issuer() -> JwtTokenIssuer:
    return JwtTokenIssuer(secret="unit-test-secret-key-with-enough-bytes", expire_minutes=30)


@pytest.fixture
def email_sender() -> LoggingEmailSender:
    return LoggingEmailSender()


@pytest.fixture
def auth_service(user_service, token_issuer, email_sender) -> AuthService:
    return AuthService(user_service, token_issuer, email_sender)


@pytest.fixture
def speaker_repository() -> FakeSpeakerRepository:
    return FakeSpeakerRepository()


@pytest.fixture
def speaker_service(speaker_repository, person_service, company_service) -> SpeakerService:
    return SpeakerService(speaker_repository, person_service, company_service)


@pytest.fixture
def payment_method_service(company_service) -> PaymentMethodService:
    return PaymentMethodService(FakePaymentMethodRepository(), company_service)


@pytest.fixture
def make_person():
    """Build an unsaved Person; keyword overrides replace the defaults."""

    def _make(**overrides: Any) -> Person:
        values: dict[str, Any] = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "type": PersonType.USER_PERSON,
            "email": "ada@example.com",
        }
        values.update(overrides)
        return Person(**values)

    return _make
