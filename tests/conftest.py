import pytest
from fastapi.testclient import TestClient

from usuarios_api import models  # noqa
from usuarios_api.core.config import Settings
from usuarios_api.core.security import PasswordHasher
from usuarios_api.db.base import Base
from usuarios_api.db.session import create_db_engine, create_session_factory
from usuarios_api.main import create_app
from usuarios_api.schemas.usuario import UsuarioCreate

# Test database (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Lowest bcrypt cost keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture(scope="function")
def db_session():
    """Create a test database session."""
    engine = create_db_engine(TEST_DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    SessionLocal = create_session_factory(engine)

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def ana_in():
    return UsuarioCreate(
        full_name="Ana",
        email="ana@x.com",
        phone="11 99999-0000",
        institution="USP",
        field_of_knowledge="Biologia",
        password="secret123",
    )


@pytest.fixture
def test_settings():
    return Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        BCRYPT_ROUNDS=TEST_BCRYPT_ROUNDS,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(test_settings):
    """TestClient over a fresh app; the context manager runs the lifespan (create_all)."""
    app = create_app(test_settings)
    with TestClient(app) as c:
        yield c
