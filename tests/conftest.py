"""
Pytest configuration and fixtures
"""
import os

# Must be set before the application settings are first loaded
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from typing import Any, Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from admissions.core.database import Database
from admissions.main import app
from admissions.services.sql_store import SqlAlchemyApplicationStore
from admissions.services.store import (
    ApplicationStore,
    InMemoryApplicationStore,
    get_store,
    sample_applications,
)


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def store() -> InMemoryApplicationStore:
    """Fresh in-memory store seeded with the two sample applications"""
    return InMemoryApplicationStore(sample_applications())


@pytest.fixture(scope="function")
def test_db() -> Generator[Database, None, None]:
    """
    In-memory SQLite database

    Each test gets a fresh database with all tables created.
    """
    database = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database.create_all()

    try:
        yield database
    finally:
        database.close()


@pytest.fixture(scope="function")
def sql_store(test_db: Database) -> SqlAlchemyApplicationStore:
    return SqlAlchemyApplicationStore(test_db)


def _client_for(store: ApplicationStore) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(store: InMemoryApplicationStore) -> Generator[TestClient, None, None]:
    """Test client backed by the seeded in-memory store"""
    yield from _client_for(store)


@pytest.fixture(scope="function")
def sql_client(sql_store: SqlAlchemyApplicationStore) -> Generator[TestClient, None, None]:
    """Test client backed by the SQLite store"""
    yield from _client_for(sql_store)


@pytest.fixture(scope="function")
def client_for() -> Generator[Callable[[ApplicationStore], TestClient], None, None]:
    """
    Build a client around any store (e.g. a failing mock)

    Usage:
        test_client = client_for(broken_store)
    """
    opened: list[TestClient] = []

    def _make(store: ApplicationStore) -> TestClient:
        app.dependency_overrides[get_store] = lambda: store
        test_client = TestClient(app)
        opened.append(test_client)
        return test_client

    yield _make

    for test_client in opened:
        test_client.close()
    app.dependency_overrides.clear()


# ============================================================================
# TEST DATA GENERATORS
# ============================================================================

@pytest.fixture
def application_payload() -> Callable[..., dict[str, Any]]:
    """
    Factory for valid creation payloads

    Usage:
        payload = application_payload(phone="010-0000-0000", generation=3)
    """
    def _payload(**overrides) -> dict[str, Any]:
        payload = {
            "name": "박서준",
            "phone": "010-9876-5432",
            "birthDate": "1980-05-17",
            "gender": "남",
            "companyPosition": "(주)한빛물산 / 대표이사",
            "address": "서울특별시 강남구 테헤란로 123",
            "interests": ["경제, 경영, 산업 전반", "미래기술 (AI, 챗GPT)"],
            "golf": "Yes",
            "referrer": "김민수",
            "taxInvoice": "발행",
            "generation": 3,
        }
        payload.update(overrides)
        return payload

    return _payload


# ============================================================================
# CONFIGURATION
# ============================================================================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
