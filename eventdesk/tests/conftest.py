"""
Pytest configuration and fixtures for EventDesk tests.

This module provides shared fixtures for testing client functionality,
including a fake EventAPI server, temporary configuration files, and
test data.
"""

import json
import tempfile
from pathlib import Path
from typing import Any, Dict, Generator, List, Optional, Set
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import yaml

from eventdesk.src.api_client import ApiResult


# ============================================================================
# Fake EventAPI Server
# ============================================================================


class FakeEventServer:
    """
    In-memory EventAPI served through httpx.MockTransport.

    Attributes:
        events: Stored events keyed by id, in insertion order
        envelope: Wrap the list response as {"data": [...]}
        failing: Operations ("all", "add", "update", "delete", "get") that
            answer 500
        requests: (method, path) of every request received
    """

    def __init__(self, events: Optional[List[Dict[str, Any]]] = None, envelope: bool = False):
        self.events: Dict[str, Dict[str, Any]] = {
            str(e["id"]): dict(e) for e in events or []
        }
        self.envelope = envelope
        self.failing: Set[str] = set()
        self.requests: List[tuple] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def count(self, method: str) -> int:
        return sum(1 for m, _ in self.requests if m == method)

    def handle(self, request: httpx.Request) -> httpx.Response:
        method = request.method
        path = request.url.path
        self.requests.append((method, path))

        parts = path.strip("/").split("/")
        if len(parts) < 2 or parts[0] != "eventapi":
            return httpx.Response(404, json={"detail": "Not found"})
        operation = parts[1]
        if operation in self.failing:
            return httpx.Response(500, json={"detail": "Internal error"})

        if method == "GET" and operation == "all":
            body = list(self.events.values())
            return httpx.Response(200, json={"data": body} if self.envelope else body)

        if method == "POST" and operation == "add":
            data = json.loads(request.content)
            if data["id"] in self.events:
                return httpx.Response(409, json={"detail": "Duplicate id"})
            self.events[data["id"]] = data
            return httpx.Response(201, json=data)

        if method == "PUT" and operation == "update":
            data = json.loads(request.content)
            if data["id"] not in self.events:
                return httpx.Response(404, json={"detail": "Event not found"})
            self.events[data["id"]] = data
            return httpx.Response(200, json=data)

        if method == "DELETE" and operation == "delete" and len(parts) == 3:
            if self.events.pop(parts[2], None) is None:
                return httpx.Response(404, json={"detail": "Event not found"})
            return httpx.Response(204)

        if method == "GET" and operation == "get" and len(parts) == 3:
            event = self.events.get(parts[2])
            if event is None:
                return httpx.Response(404, json={"detail": "Event not found"})
            return httpx.Response(200, json=event)

        return httpx.Response(405, json={"detail": "Method not allowed"})


# ============================================================================
# Event Fixtures
# ============================================================================


@pytest.fixture
def sample_event() -> dict:
    """
    Create a sample event payload.

    Returns:
        Dictionary representing an event
    """
    return {
        "id": "1",
        "name": "Launch",
        "date": "2025-01-01",
        "location": "HQ",
        "organizer": "Alice",
    }


@pytest.fixture
def sample_events(sample_event: dict) -> list:
    """Two events as returned by the list endpoint."""
    return [
        sample_event,
        {
            "id": "2",
            "name": "Retro",
            "date": "2025-02-14",
            "location": "Room 4",
            "organizer": "Bob",
        },
    ]


@pytest.fixture
def fake_server() -> FakeEventServer:
    """Empty fake EventAPI server."""
    return FakeEventServer()


@pytest.fixture
def seeded_server(sample_events: list) -> FakeEventServer:
    """Fake EventAPI server holding the sample events."""
    return FakeEventServer(sample_events)


# ============================================================================
# Mock API Fixtures
# ============================================================================


@pytest.fixture
def mock_api() -> MagicMock:
    """
    Create a mock EventApiClient whose calls all succeed with empty bodies.

    Returns:
        Mock with AsyncMock operations returning ApiResult
    """
    api = MagicMock()
    api.list_events = AsyncMock(return_value=ApiResult.success([]))
    api.create_event = AsyncMock(return_value=ApiResult.success(None))
    api.update_event = AsyncMock(return_value=ApiResult.success(None))
    api.delete_event = AsyncMock(return_value=ApiResult.success(None))
    api.get_event = AsyncMock(return_value=ApiResult.success(None))
    api.close = AsyncMock()
    return api


@pytest.fixture
def mock_server_url() -> str:
    """
    Get the mock server URL for testing.

    Returns:
        Mock server URL string
    """
    return "http://localhost:8080"


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def temp_config_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for client configuration files.

    Yields:
        Path to temporary configuration directory
    """
    with tempfile.TemporaryDirectory(prefix="eventdesk_test_") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def client_config() -> dict:
    """Sample client configuration."""
    return {
        "server_url": "http://localhost:8080",
        "timeout_seconds": 10.0,
        "log_level": "DEBUG",
    }


@pytest.fixture
def client_config_file(temp_config_dir: Path, client_config: dict) -> Path:
    """
    Create a temporary client configuration file.

    Returns:
        Path to the configuration file
    """
    config_path = temp_config_dir / "client-config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(client_config, f)
    return config_path


@pytest.fixture
def clean_environment(monkeypatch) -> None:
    """
    Remove EventDesk environment variables to ensure test isolation.
    """
    for var in (
        "EVENTDESK_SERVER_URL",
        "EVENTDESK_LOG_LEVEL",
        "EVENTDESK_CONFIG_PATH",
    ):
        monkeypatch.delenv(var, raising=False)
