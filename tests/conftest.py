"""Pytest configuration and shared fixtures"""

import json
import time
from typing import Any

import pytest

from bittrex_api.api.client import BittrexClient
from bittrex_api.api.constants import ApiVersion


class FakeResponse:
    def __init__(self, body: bytes) -> None:
        self._body = body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *args: Any) -> None:
        return None


class FakeSession:
    """
    Records every GET instead of hitting the network.

    ``responses`` are served in order; the last one repeats. Bytes are sent
    as-is, str is UTF-8 encoded, anything else is JSON encoded. An Exception
    instance in the queue is raised from ``get`` instead.
    """

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses) or [{"success": True, "message": "", "result": None}]
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def queue(self, *responses: Any) -> None:
        self.responses = list(responses)

    def get(self, url: Any, headers: dict[str, str] | None = None) -> FakeResponse:
        self.calls.append({"url": str(url), "headers": dict(headers or {}), "time": time.monotonic()})
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, bytes):
            return FakeResponse(response)
        body = response if isinstance(response, str) else json.dumps(response)
        return FakeResponse(body.encode("utf-8"))

    async def close(self) -> None:
        self.closed = True

    @property
    def urls(self) -> list[str]:
        return [call["url"] for call in self.calls]


def envelope(result: Any = None, success: bool = True, message: str = "") -> dict[str, Any]:
    return {"success": success, "message": message, "result": result}


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def make_client(fake_session: FakeSession):
    """Factory for clients wired to the fake session; rate limit set high for fast tests."""

    def _make(
        api_version: ApiVersion = ApiVersion.V1_1,
        calls_per_second: float = 1000,
        session: FakeSession | None = None,
    ) -> BittrexClient:
        return BittrexClient(
            api_key="test_key",
            api_secret="test_secret",
            calls_per_second=calls_per_second,
            api_version=api_version,
            session=session or fake_session,
        )

    return _make


@pytest.fixture
def v1_client(make_client) -> BittrexClient:
    return make_client(ApiVersion.V1_1)


@pytest.fixture
def v2_client(make_client) -> BittrexClient:
    return make_client(ApiVersion.V2_0)
