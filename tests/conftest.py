"""Shared test fixtures for all test modules."""

from collections.abc import Callable

import pytest

try:
    import httpx
except ImportError:
    httpx = None

from lve_exporter.adapters.source.static import StaticStatsSource
from lve_exporter.core.catalog import MetricCatalog, build_catalog
from lve_exporter.core.engine import LveStatsEngine


@pytest.fixture
def alice_payload() -> bytes:
    """Minimal payload with a single CPU usage reading for alice."""
    return b'{"users":[{"username":"alice","usage":{"cpu":{"lve":0.5}}}]}'


@pytest.fixture
def catalog() -> MetricCatalog:
    """Freshly built metric catalog."""
    return build_catalog()


@pytest.fixture
def engine_for() -> Callable[[bytes], LveStatsEngine]:
    """Factory fixture building an engine over a static payload."""

    def _engine(payload: bytes) -> LveStatsEngine:
        return LveStatsEngine(StaticStatsSource(payload))

    return _engine


@pytest.fixture
def asgi_send_capture():
    """Fixture that returns a send callable and a responses list for capture.

    Returns a tuple of (send_func, responses_list) for recording ASGI messages.
    """

    responses: list[dict[str, object]] = []

    async def send(message: dict[str, object]) -> None:
        """Capture ASGI messages."""
        responses.append(message)

    return send, responses


@pytest.fixture
def asgi_scope():
    """Factory fixture for creating ASGI scope dicts."""

    def _scope(method: str = "GET", path: str = "/metrics") -> dict[str, object]:
        return {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [],
        }

    return _scope


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            app = create_app(source)
            async with asgi_test_client(app) as client:
                response = await client.get("/metrics")
    """
    if httpx is None:
        pytest.skip("httpx not installed")

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
