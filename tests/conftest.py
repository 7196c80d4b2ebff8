"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest
from sqlalchemy.orm import sessionmaker

from database.repositories import SqlProviderRepository
from database.seed import load_seed_providers, seed_providers
from tests import create_test_engine


@pytest.fixture(scope="session")
def sample_providers():
    """The sixteen bundled sample providers."""
    return load_seed_providers()


@pytest.fixture
def sqlite_engine():
    engine = create_test_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(sqlite_engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_session(db_session):
    """Session over a database holding the sample providers."""
    seed_providers(SqlProviderRepository(db_session))
    db_session.commit()
    return db_session


@pytest.fixture
def api_client(sqlite_engine):
    """
    TestClient over the full application, backed by a seeded in-memory database.

    Report rate limiting is disabled; tests that exercise it enable it explicitly.
    """
    from fastapi.testclient import TestClient
    from web.backend.app import create_app
    from web.backend.dependencies import get_db
    from web.backend.routers.reports import limiter

    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)
    session = SessionLocal()
    seed_providers(SqlProviderRepository(session))
    session.commit()
    session.close()

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app = create_app()
    app.dependency_overrides[get_db] = override_get_db

    limiter.enabled = False
    limiter.reset()
    client = TestClient(app)
    yield client
    limiter.enabled = True
    limiter.reset()
