import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import httpx
import pytest
import pytest_asyncio

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tiktok_business_api.client import Client  # noqa: E402

TEST_BASE_URL = "https://business-api.test"
TEST_TOKEN = "test-token"


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set a predictable TIKTOK_* environment for every test.

    Variables that change the host are removed so a developer's shell
    cannot leak into settings-driven tests.
    """
    monkeypatch.setenv("TIKTOK_ACCESS_TOKEN", TEST_TOKEN)
    monkeypatch.delenv("TIKTOK_AD_IS_SANDBOX", raising=False)
    monkeypatch.delenv("TIKTOK_API_BASE_URL", raising=False)
    monkeypatch.delenv("TIKTOK_REQUEST_TIMEOUT", raising=False)

    yield


def envelope(
    data: Any = None,
    code: int = 0,
    message: str = "OK",
    request_id: str = "req-test",
) -> dict:
    """Build a response envelope as the API sends it."""
    return {"code": code, "message": message, "request_id": request_id, "data": data}


class FakeAPIServer:
    """Scripted stand-in for the API behind an ``httpx.MockTransport``.

    Queued responses are served in order; the last one is repeated once
    the queue runs dry. Every request is recorded.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: List[Any] = []

    def respond(self, data: Any = None, code: int = 0, message: str = "OK",
                request_id: str = "req-test", status_code: int = 200) -> None:
        self._responses.append(
            httpx.Response(
                status_code,
                json=envelope(data, code=code, message=message, request_id=request_id),
            )
        )

    def respond_raw(self, response: httpx.Response) -> None:
        self._responses.append(response)

    def fail_with(self, error: Exception) -> None:
        self._responses.append(error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json=envelope({}))
        item = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last_request(self) -> Optional[httpx.Request]:
        return self.requests[-1] if self.requests else None

    def last_params(self) -> httpx.QueryParams:
        return self.last_request.url.params

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def api_server():
    """Fake API server recording requests."""
    return FakeAPIServer()


@pytest_asyncio.fixture
async def http_client(api_server):
    """httpx client routed to the fake API server."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(api_server.handler))
    yield client
    await client.aclose()


@pytest.fixture
def client(http_client):
    """API client authenticated with the test token."""
    return Client(
        access_token=TEST_TOKEN, base_url=TEST_BASE_URL, http_client=http_client
    )
