# tests/unit/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tracker.main import app
from tracker.db import Base, get_db
from tracker import models
from tracker.auth import create_access_token, get_password_hash
from tracker.core.settings import Settings
from tracker.enums import UserRole


def _set_sqlite_pragma(dbapi_connection, _):
    # Enforce FKs in SQLite (off by default otherwise)
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def engine():
    # Fresh in-memory DB per test, shared across threads (TestClient) via StaticPool
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _set_sqlite_pragma)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def _override_get_db(db_session):
    def _get_db():
        yield db_session
    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def settings():
    return Settings(
        default_business_id="default-business",
        default_business_name="Default Organization",
        default_business_description="Default business for new users",
        seed_sample_data=True,
    )


@pytest.fixture
def business(db_session):
    """A business with no projects"""
    business = models.Business(id="b1", name="Test Business")
    db_session.add(business)
    db_session.commit()
    db_session.refresh(business)
    return business


@pytest.fixture
def other_business(db_session):
    business = models.Business(id="b2", name="Other Business")
    db_session.add(business)
    db_session.commit()
    db_session.refresh(business)
    return business


def _make_user(db_session, email: str, password: str = "testpass123", display_name: str = None) -> models.User:
    user = models.User(
        id=f"user_{email.split('@')[0]}",
        email=email,
        password_hash=get_password_hash(password),
        display_name=display_name,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def _make_profile(db_session, user: models.User, business: models.Business, role: UserRole) -> models.UserProfile:
    profile = models.UserProfile(
        id=f"profile_{user.id}",
        user_id=user.id,
        business_id=business.id,
        role=role,
        name=user.display_name or user.email,
    )
    db_session.add(profile)
    db_session.commit()
    db_session.refresh(profile)
    return profile


def _headers_for(user: models.User) -> dict:
    token = create_access_token(data={"sub": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(db_session, business):
    user = _make_user(db_session, "admin@example.com", display_name="Ada Admin")
    _make_profile(db_session, user, business, UserRole.ADMIN)
    return user


@pytest.fixture
def staff_user(db_session, business):
    user = _make_user(db_session, "staff@example.com", display_name="Sam Staff")
    _make_profile(db_session, user, business, UserRole.STAFF)
    return user


@pytest.fixture
def admin_headers(admin_user):
    return _headers_for(admin_user)


@pytest.fixture
def staff_headers(staff_user):
    return _headers_for(staff_user)


@pytest.fixture
def make_user(db_session):
    def _factory(email: str, password: str = "testpass123", display_name: str = None):
        return _make_user(db_session, email, password, display_name)
    return _factory


@pytest.fixture
def make_profile(db_session):
    def _factory(user, business, role: UserRole = UserRole.STAFF):
        return _make_profile(db_session, user, business, role)
    return _factory


@pytest.fixture
def headers_for():
    return _headers_for
