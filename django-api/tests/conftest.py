"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest
from rest_framework.test import APIClient

from events.services import EventService
from events.stores.memory_store import InMemoryEventStore

NOW = datetime(2024, 6, 1, 12, 0, 0)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def service(store: InMemoryEventStore) -> EventService:
    return EventService(store, clock=lambda: NOW)
