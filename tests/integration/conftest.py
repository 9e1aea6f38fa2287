"""Shared fixtures for integration tests."""

import uuid

import pytest

from mongoapi.client import ClientConfig, MongoApiClient


@pytest.fixture
def live_client():
    """Client pointed at the proxy described by MONGO_API_* variables."""
    return MongoApiClient(config=ClientConfig.from_env())


@pytest.fixture
def scratch_target(live_client):
    """Unique database/collection names, dropped after the test."""
    db_name = f"it-{uuid.uuid4().hex[:8]}"
    table_name = "players"
    live_client.into_db(db_name).into_table(table_name)
    yield db_name, table_name
    live_client.delete_database(db_name)
