"""Integration fixtures: the real app over an in-memory SQLite database.

Every test gets a fresh database. Uploads land in a temporary directory and
outbound email is collected in ``outbox`` instead of being sent.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from event_platform.application.schemas import CompanyCreate, UserCreate
from event_platform.application.services import CompanyService, PersonService, UserService
from event_platform.domain.entities import UserRole
from event_platform.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
)
from event_platform.infrastructure.database.repositories import (
    SQLAlchemyCompanyRepository,
    SQLAlchemyPersonRepository,
    SQLAlchemyUserRepository,
)
from event_platform.infrastructure.database.session import get_db_session
from event_platform.infrastructure.dependencies import (
    get_email_sender,
    get_object_storage,
    get_password_hasher,
    get_token_issuer,
)
from event_platform.infrastructure.email import LoggingEmailSender
from event_platform.infrastructure.security import BcryptPasswordHasher
from event_platform.infrastructure.storage.local_object_storage import LocalObjectStorage
from event_platform.main import app

PASSWORD = "s3cret-pass"


@pytest_asyncio.fixture
async def session_factory():
    engine = build_engine("sqlite:///:memory:")
    await create_tables(engine)

    yield build_session_factory(engine)

    await engine.dispose()


@pytest.fixture
def storage(tmp_path) -> LocalObjectStorage:
    return LocalObjectStorage(upload_dir=str(tmp_path / "uploads"), base_url="/files")


@pytest.fixture
def outbox() -> LoggingEmailSender:
    return LoggingEmailSender()


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest_asyncio.fixture
async def client(session_factory, storage, outbox, password_hasher):
    async def _session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_object_storage] = lambda: storage
    app.dependency_overrides[get_email_sender] = lambda: outbox
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http

    app.dependency_overrides.clear()


# ── Seed data ───────────────────────────────────────────────────────


@pytest.fixture
def auth_headers():
    """Bearer headers for a stored user, signed with the application's issuer."""

    def _headers(user) -> dict[str, str]:
        token = get_token_issuer().issue(user).access_token
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def make_user(session_factory, storage, password_hasher):
    """Create a user straight through the services, bypassing the API's role checks."""

    async def _make(
        email: str,
        role: UserRole = UserRole.USER,
        company_id: str | None = None,
        password: str = PASSWORD,
    ):
        async with session_factory() as session:
            persons = PersonService(SQLAlchemyPersonRepository(session))
            companies = CompanyService(SQLAlchemyCompanyRepository(session), storage)
            users = UserService(
                SQLAlchemyUserRepository(session), persons, companies, password_hasher
            )
            user, _ = await users.create_user(
                UserCreate(
                    first_name="Test",
                    last_name="Account",
                    email=email,
                    password=password,
                    role=role,
                    company_id=company_id,
                )
            )
            await session.commit()
        return user

    return _make


@pytest.fixture
def make_company(session_factory, storage):
    async def _make(name: str, contact_email: str, **values):
        async with session_factory() as session:
            companies = CompanyService(SQLAlchemyCompanyRepository(session), storage)
            company = await companies.create_company(
                CompanyCreate(name=name, contact_email=contact_email, **values)
            )
            await session.commit()
        return company

    return _make


@pytest_asyncio.fixture
async def admin(make_user):
    return await make_user("root@example.com", role=UserRole.PLATFORM_ADMIN)


@pytest.fixture
def admin_headers(admin, auth_headers) -> dict[str, str]:
    return auth_headers(admin)
