"""Test configuration and fixtures"""

import pytest
from fastapi.testclient import TestClient

from bugtracker.config import Settings
from bugtracker.main import create_app
from bugtracker.storage import BugService, Database


@pytest.fixture
def database_url(tmp_path):
    """URL of a fresh SQLite database file for one test"""
    return f"sqlite:///{tmp_path / 'bugs.db'}"


@pytest.fixture
def database(database_url):
    """Database handle with the schema created from the models"""
    db = Database(database_url)
    db.create_all()

    yield db

    db.drop_all()
    db.dispose()


@pytest.fixture
def bug_service(database):
    return BugService(database)


@pytest.fixture
def app(database):
    """Application bound to the per-test database"""
    return create_app(Settings(), database=database)


@pytest.fixture
def client(app):
    """Create test client"""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def valid_bug_data():
    return {
        "title": "Test Bug",
        "description": "This is a test bug description",
        "reportedBy": "Test User",
    }
