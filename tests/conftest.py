"""
Pytest configuration.

API tests run against an in-memory SQLite database and a pinned clock; the
environment is set before the application is imported.
"""

import os

# Set environment variables for tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from juridico_app.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from juridico_app.core.database import Base, get_db  # noqa: E402
from juridico_app.core.security import create_access_token, get_password_hash  # noqa: E402
from juridico_app.domain.clock import fixed_clock, get_clock  # noqa: E402
from juridico_app.models import Case, Employee, User  # noqa: E402
from juridico_app.models.user import default_permissions  # noqa: E402

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)
PASSWORD = "secret123"


@pytest.fixture
def db_engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    return fixed_clock(NOW)


@pytest.fixture
def app(session_factory, clock):
    from juridico_app.main import app as fastapi_app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_clock] = lambda: clock
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Anonymous client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def client_for(app):
    """Build a client already carrying a session cookie for ``user``."""
    clients = []

    def _client_for(user: User) -> TestClient:
        token = create_access_token({"sub": str(user.id), "role": user.role})
        test_client = TestClient(app, cookies={get_settings().SESSION_COOKIE_NAME: token})
        clients.append(test_client)
        return test_client

    yield _client_for

    for test_client in clients:
        test_client.close()


def make_user(db, username: str, role: str, permissions: dict | None = None, **fields) -> User:
    user = User(
        username=username,
        password_hash=get_password_hash(PASSWORD),
        role=role,
        permissions=permissions if permissions is not None else default_permissions(),
        **fields,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin(db_session):
    return make_user(db_session, "admin", "admin", first_name="Ana", last_name="Admin")


@pytest.fixture
def editor(db_session):
    return make_user(db_session, "editor", "editor")


@pytest.fixture
def viewer(db_session):
    return make_user(db_session, "viewer", "viewer")


@pytest.fixture
def user_factory(db_session):
    def _make(username: str, role: str = "viewer", permissions: dict | None = None, **fields) -> User:
        return make_user(db_session, username, role, permissions, **fields)

    return _make


@pytest.fixture
def case_factory(db_session):
    def _make(**overrides) -> Case:
        fields = {
            "client_name": "Maria Souza",
            "process_number": "0001234-56.2026.5.02.0001",
            "description": "Reclamação trabalhista",
            "status": "novo",
        }
        fields.update(overrides)
        case = Case(**fields)
        db_session.add(case)
        db_session.commit()
        db_session.refresh(case)
        return case

    return _make


@pytest.fixture
def employee_factory(db_session):
    def _make(**overrides) -> Employee:
        fields = {
            "nome": "João Pereira",
            "matricula": "1001",
            "empresa": "2",
            "status": "ativo",
        }
        fields.update(overrides)
        employee = Employee(**fields)
        db_session.add(employee)
        db_session.commit()
        db_session.refresh(employee)
        return employee

    return _make
