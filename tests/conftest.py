"""
pytest configuration and fixtures.
"""

from typing import Callable, Dict, Optional, Tuple

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpcatalog.http import HTTPRequest, HTTPResponse, ok


class FakeClock:
    """Manually advanced time source for rate-limit tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_request() -> Callable[..., HTTPRequest]:
    """Factory for requests from a URL, a host and a client IP."""

    def _make(
        url: str = "/",
        method: str = "GET",
        host: str = "example.com",
        client_ip: str = "127.0.0.1",
        headers: Optional[Dict[str, str]] = None,
    ) -> HTTPRequest:
        request_headers = {"Host": host} if host else {}
        request_headers.update(headers or {})
        client_address: Tuple[str, int] = (client_ip, 54321)
        return HTTPRequest.from_url(method, url, headers=request_headers, client_address=client_address)

    return _make


@pytest.fixture
def app() -> Callable[[HTTPRequest], HTTPResponse]:
    """Final handler that echoes the request path as JSON."""

    def _app(request: HTTPRequest) -> HTTPResponse:
        return ok({"path": request.path})

    return _app


@pytest.fixture
def empty_app() -> Callable[[HTTPRequest], HTTPResponse]:
    """Final handler that returns 200 with no body."""

    def _app(request: HTTPRequest) -> HTTPResponse:
        return HTTPResponse(status=200)

    return _app
