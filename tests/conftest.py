from typing import Callable, List, Union

import httpx
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from media_relay.core.state import state
from media_relay.infra.http import build_http_client
from media_relay.main import app

Handler = Callable[[httpx.Request], httpx.Response]


class UpstreamStub:
    """Stands in for the third-party APIs and records every outbound request"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._handler: Handler = lambda request: httpx.Response(200, json={})

    def respond_with(self, response: Union[httpx.Response, Handler]) -> None:
        if isinstance(response, httpx.Response):
            self._handler = lambda request: response
        else:
            self._handler = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest_asyncio.fixture(scope="function")
async def upstream():
    stub = UpstreamStub()
    previous = state.http_client
    state.http_client = build_http_client(transport=httpx.MockTransport(stub))
    yield stub
    await state.http_client.aclose()
    state.http_client = previous


@pytest_asyncio.fixture(scope="function")
async def client(upstream):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
