"""
This module contains pytest fixtures and configuration for testing.
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add the project's root directory to the system path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

# Import the main app
from main import app
from pos_api.common.store import get_store


@pytest.fixture
def test_app():
    """
    Create a FastAPI test application.
    """
    return app


@pytest.fixture
def client(test_app):
    """
    Create a test client for the FastAPI application.
    """
    return TestClient(test_app)


@pytest.fixture(autouse=True)
def catalog_store():
    """
    Give every test an empty catalog store.
    """
    store = get_store()
    store.clear()
    yield store
    store.clear()
