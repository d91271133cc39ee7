"""
Shared fixtures: a fake server that records the last request it received.
"""
from typing import Optional

import httpx
import pytest

from http_builder import close_default_client

DEFAULT_BODY = b"default body"


class RecordingServer:
    """Answers every request with a fixed response and keeps the last request."""

    def __init__(self, status: int = 200, body: bytes = DEFAULT_BODY):
        self.status = status
        self.body = body
        self.request: Optional[httpx.Request] = None
        self.request_body: Optional[bytes] = None
        self.calls = 0
        self.client = httpx.Client(transport=httpx.MockTransport(self._handle))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.request = request
        self.request_body = request.read()
        self.calls += 1
        return httpx.Response(self.status, content=self.body)

    @property
    def request_uri(self) -> bytes:
        assert self.request is not None
        return self.request.url.raw_path

    def raw_headers(self):
        assert self.request is not None
        return self.request.headers.raw


@pytest.fixture
def server():
    s = RecordingServer()
    yield s
    s.client.close()


@pytest.fixture
def make_server():
    created = []

    def factory(status: int = 200, body: bytes = DEFAULT_BODY) -> RecordingServer:
        s = RecordingServer(status, body)
        created.append(s)
        return s

    yield factory
    for s in created:
        s.client.close()


@pytest.fixture(autouse=True)
def reset_default_client():
    yield
    close_default_client()
