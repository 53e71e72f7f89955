"""
Shared fixtures for the podcast service tests.

Database-backed tests run against a private in-memory SQLite engine so they
never touch the configured DATABASE_URL.
"""
import pytest
from unittest.mock import AsyncMock, Mock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from podcast_platform.podcast_platform.podcast_service.auth import JwtOptions, JwtService
from podcast_platform.podcast_platform.podcast_service.db import Base
from podcast_platform.podcast_platform.podcast_service import models  # noqa: F401

TEST_KEY = "test-private-key-for-signing-session-tokens"


@pytest.fixture
def db_session():
    """Create a fresh in-memory database session for each test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def jwt_service():
    return JwtService(JwtOptions(private_key=TEST_KEY))


@pytest.fixture
def user_store():
    store = Mock()
    store.find_by_email = AsyncMock()
    store.find_one_or_fail = AsyncMock()
    store.save = AsyncMock()
    return store


@pytest.fixture
def podcast_store():
    store = Mock()
    store.find_all = AsyncMock()
    store.find_by_id = AsyncMock()
    store.save = AsyncMock()
    store.delete = AsyncMock()
    return store
