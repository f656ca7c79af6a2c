import inspect
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from xai_kit.api.client import XAIClient

Handler = Callable[[httpx.Request], Any]


@pytest.fixture
def sent() -> list[httpx.Request]:
    """Requests that reached the mock transport."""
    return []


@pytest.fixture
def make_client(sent: list[httpx.Request]) -> Callable[..., XAIClient]:
    """Build a client whose transport records requests and delegates to a handler.

    The handler may be sync or async and may raise httpx transport errors.
    """

    def _make(handler: Handler | None = None, **kwargs: Any) -> XAIClient:
        async def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if handler is None:
                return httpx.Response(200, json={})
            result = handler(request)
            if inspect.isawaitable(result):
                result = await result
            return result

        kwargs.setdefault("api_key", "test-key")
        return XAIClient(transport=httpx.MockTransport(_record), **kwargs)

    return _make
