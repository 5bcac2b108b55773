"""Test configuration and fixtures for the Employee Records API.

This module provides isolated test environments:
- Temporary SQLite database per test
- Test clients for both store backends
- Direct access to the record store for "given" setup
"""
import os
import sys
from pathlib import Path
from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient

# Ensure app is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment BEFORE importing app modules
os.environ["EMPLOYEES_STORE"] = "sqlite"
os.environ["EMPLOYEES_LOG_LEVEL"] = "WARNING"


@pytest.fixture(scope="function")
def isolated_environment(tmp_path: Path) -> Dict:
    """Create completely isolated environment for a single test.

    Returns:
        Dict with paths: db_path, base_dir
    """
    return {
        "db_path": tmp_path / "test.db",
        "base_dir": tmp_path,
    }


@pytest.fixture(scope="function")
def patched_config(isolated_environment: Dict):
    """Monkey-patch app configuration to use the isolated database."""
    import app.config as config

    original_db_path = config.DATABASE_PATH
    config.DATABASE_PATH = isolated_environment["db_path"]

    yield isolated_environment

    config.DATABASE_PATH = original_db_path


@pytest.fixture(scope="function")
def fresh_database(patched_config: Dict):
    """Initialize fresh database with schema for each test."""
    from app.database import close_db, init_db

    # Drop connections left over from earlier tests
    close_db()
    init_db()

    yield patched_config["db_path"]

    close_db()


@pytest.fixture(scope="function")
def db_connection(fresh_database: Path):
    """sqlite3 connection to the test database (this thread)."""
    from app.database import get_db

    return get_db()


@pytest.fixture(params=["sqlite", "memory"])
def store_backend(request) -> str:
    """Run API tests once per record store backend."""
    return request.param


@pytest.fixture(scope="function")
def client(fresh_database: Path, store_backend: str) -> Generator[TestClient, None, None]:
    """Create test client with fresh isolated environment.

    Usage:
        def test_something(client):
            response = client.get("/api/employees")
            assert response.status_code == 200
    """
    from app.main import create_app

    with TestClient(create_app(store_backend)) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def employee_store(client: TestClient):
    """The record store the client's application reads from.

    Tests use it to save employees directly, bypassing the API.
    """
    from app.database import get_db
    from app.infrastructure.repositories import EmployeeRepository

    store = client.app.state.employee_store
    if store is None:
        store = EmployeeRepository(get_db())
    return store


@pytest.fixture
def ravi():
    from app.models import Employee

    return Employee(name="ravi", email="ravi@gmail.com", role="developer")


@pytest.fixture
def arun():
    from app.models import Employee

    return Employee(name="arun", email="arun@gmail.com", role="tester")
