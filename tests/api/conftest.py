"""
Test configuration and fixtures for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from catalog.infrastructure.api.app import create_app
from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


@pytest.fixture
def settings():
    return Settings(STORAGE_BACKEND="memory", LOG_LEVEL="WARNING")


@pytest.fixture
def repository():
    return InMemoryProductRepository()


@pytest.fixture
def client(repository, settings):
    """Test client backed by a fresh in-memory repository."""
    with TestClient(create_app(repository, settings)) as test_client:
        yield test_client


@pytest.fixture
def lamp_payload():
    return {
        "name": "Lamp",
        "description": "Desk lamp",
        "price": {"amount": 19.99, "currency": "USD"},
        "stockQuantity": 3,
    }


@pytest.fixture
def lamp(client, lamp_payload):
    """A created product, as returned by the API."""
    response = client.post("/products", json=lamp_payload)
    assert response.status_code == 201
    return response.json()
