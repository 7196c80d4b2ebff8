#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run against in-memory SQLite, no external services needed:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Run only the search core
    uv run python -m pytest tests/unit/core -v

    # Using unittest
    uv run python -m unittest discover tests -v
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from database.database import init_db


def create_test_engine() -> Engine:
    """
    In-memory SQLite engine with the schema created.

    StaticPool keeps a single connection so every session (and the
    TestClient's worker thread) sees the same database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    return engine
