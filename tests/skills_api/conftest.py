"""Shared test fixtures.

Provides an in-memory SQLite database shared via ``StaticPool``, a FastAPI
``TestClient`` bound to it, and a few pre-populated rows.
"""

from collections.abc import Generator

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from skills_api.database import Base, get_db
from skills_api.main import app
from skills_api.models.skill import Skill
from skills_api.models.theme import Theme

SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Dependency override that uses the test in-memory database."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_db() -> Generator[None, None, None]:
    """Create and tear down tables around each test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient with the DB dependency overridden."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """SQLAlchemy session for pre-populating test data."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sample_themes(db) -> list[Theme]:
    """Create the four default themes."""
    themes = [Theme(name=name) for name in ("Frontend", "Backend", "SpokenLang", "Frameworks")]
    db.add_all(themes)
    db.commit()
    for theme in themes:
        db.refresh(theme)
    return themes


@pytest.fixture
def sample_skill(db, sample_themes) -> Skill:
    """Create a Python skill under the Backend theme."""
    skill = Skill(skill="Python", level=85, theme_id=sample_themes[1].id)
    db.add(skill)
    db.commit()
    db.refresh(skill)
    return skill


@pytest.fixture
def test_engine():
    """The in-memory engine behind ``client`` and ``db``."""
    return engine


@pytest.fixture
def api_transport() -> Generator[httpx.ASGITransport, None, None]:
    """ASGI transport into the app, bound to the test database."""
    app.dependency_overrides[get_db] = override_get_db
    yield httpx.ASGITransport(app=app)
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory() -> sessionmaker:
    """Session factory bound to the in-memory engine."""
    return TestingSessionLocal


@pytest.fixture
def lenient_client() -> Generator[TestClient, None, None]:
    """TestClient that returns server errors as responses instead of raising them."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
