"""Shared test fixtures."""

import os

# Keep the application's own engine away from the on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from category_tree.database import Base, get_db
from category_tree.main import app
from category_tree.models.category import Category


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_category(db_session, label, parent=None):
    """Insert a category directly, bypassing the service checks."""
    category = Category(label=label, parent_id=parent.id if parent else None)
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def sample_tree(db_session):
    """
    Create a small hierarchy and return the ids by name:

        Sports
        ├── Football
        │   └── Premier League
        └── Tennis
        Music
    """
    sports = make_category(db_session, "Sports")
    football = make_category(db_session, "Football", sports)
    tennis = make_category(db_session, "Tennis", sports)
    premier = make_category(db_session, "Premier League", football)
    music = make_category(db_session, "Music")
    return {
        "sports": sports.id,
        "football": football.id,
        "tennis": tennis.id,
        "premier": premier.id,
        "music": music.id,
    }
