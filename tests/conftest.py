"""Shared test fixtures for all test modules."""

from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest

CAPTURED_AT = 1_702_300_000_000_000_000

Handler = Callable[[httpx.Request], httpx.Response]
ClientFactory = Callable[[Handler], httpx.Client]

SAMPLE_EXPOSITION = """\
# HELP http_requests_total Total HTTP requests.
# TYPE http_requests_total counter
http_requests_total{method="GET", status="200"} 1027
# TYPE cpu_temp_celsius gauge
cpu_temp_celsius 42.7
"""


@pytest.fixture
def captured_at() -> int:
    """Fixed capture timestamp in nanoseconds."""
    return CAPTURED_AT


@pytest.fixture
def sample_exposition() -> str:
    """Exposition body with two metrics and three comment lines."""
    return SAMPLE_EXPOSITION


@pytest.fixture
def exposition_file(tmp_path: Path, sample_exposition: str) -> Path:
    """Write the sample exposition body to a temporary file."""
    path = tmp_path / "metrics.txt"
    path.write_text(sample_exposition, encoding="utf-8")
    return path


@pytest.fixture
def mock_client() -> Iterator[ClientFactory]:
    """Factory fixture that creates an httpx.Client backed by a MockTransport.

    Usage:
        def test_something(mock_client):
            client = mock_client(lambda request: httpx.Response(200, text="ok"))
    """
    clients: list[httpx.Client] = []

    def _client(handler: Handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _client
    for client in clients:
        client.close()
