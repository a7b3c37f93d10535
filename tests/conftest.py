"""
Shared fixtures: a fresh in-memory SQLite store per test and an API client bound to it
"""

import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from app.core.db import Base, build_engine, get_store, init_db
from app.services.record_store import RecordStore

@pytest.fixture
def engine():
    """In-memory engine with every table created and no seed rows"""
    test_engine = build_engine("sqlite:///:memory:", echo=False)
    init_db(test_engine, seed=False)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()

@pytest.fixture
def store(engine):
    return RecordStore(engine)

@pytest.fixture
def client(store):
    """API client with the record store dependency pointed at the test database"""
    from main import app

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
