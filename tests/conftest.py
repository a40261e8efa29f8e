"""
Shared fixtures for CacheFly SDK tests
"""

from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from cachefly_sdk import CacheFlyClient, ClientConfig

BASE_URL = "https://api.cachefly.test/api/2.5"
API_PREFIX = "/api/2.5"


class FakeCacheFlyAPI:
    """Routes requests to canned responses and records every request."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Tuple[int, Any, Optional[bytes]]] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        json: Any = None,
        status_code: int = 200,
        content: Optional[bytes] = None,
    ) -> None:
        self.routes[(method, API_PREFIX + path)] = (status_code, json, content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": f"No route for {request.url.path}"})
        status_code, body, content = route
        if body is not None:
            return httpx.Response(status_code, json=body)
        return httpx.Response(status_code, content=content or b"")

    @property
    def calls(self) -> List[Tuple[str, str]]:
        return [(r.method, r.url.path[len(API_PREFIX):]) for r in self.requests]


def metadata_payload(*names: str) -> Dict[str, Any]:
    return {
        "meta": {"count": len(names)},
        "data": [
            {
                "_id": f"opt{i}",
                "name": name,
                "title": name.upper(),
                "type": "dynamic",
                "readOnly": False,
                "property": {"name": name, "type": "boolean"},
            }
            for i, name in enumerate(names, start=1)
        ],
    }


@pytest.fixture
def api():
    return FakeCacheFlyAPI()


@pytest.fixture
def client_config():
    return ClientConfig(timeout=5, max_connections=2)


@pytest.fixture
def client(api, client_config):
    transport = httpx.MockTransport(api)
    client = CacheFlyClient(
        "test-token",
        base_url=BASE_URL,
        config=client_config,
        transport=transport,
        async_transport=transport,
    )
    yield client
    client.close()
