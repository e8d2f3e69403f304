"""Pytest configuration and fixtures"""
import os
import json
import pytest
import httpx

# Set test environment variables
os.environ.setdefault("SECRET_KEY", "test_secret")
os.environ.setdefault("ALGORITHM", "HS256")
os.environ.setdefault("CART_API_URL", "http://cart.test/api")

from cart_history import CartCaretaker, CartOriginator


@pytest.fixture
def s0():
    return [{"id": 1, "productVariantId": 10, "quantity": 1}]


@pytest.fixture
def s1():
    return [
        {"id": 1, "productVariantId": 10, "quantity": 1},
        {"id": 2, "productVariantId": 20, "quantity": 3},
    ]


@pytest.fixture
def s2():
    return [{"id": 2, "productVariantId": 20, "quantity": 5}]


@pytest.fixture
def originator():
    return CartOriginator()


@pytest.fixture
def events():
    """Collected HistoryEvents"""
    return []


@pytest.fixture
def caretaker(originator, events):
    return CartCaretaker(originator, observers=[events.append])


class FakeCartAPI:
    """In-memory stand-in for the upstream cart service."""

    def __init__(self, token="good-token"):
        self.token = token
        self.items = []
        self.next_id = 1
        self.requests = []
        self.fail_with = None
        self.fail_methods = None

    def _reply(self, data=None, status_code=200):
        return httpx.Response(status_code, json={"data": data})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None and (self.fail_methods is None or request.method in self.fail_methods):
            return httpx.Response(self.fail_with, json={"message": "boom"})
        if request.headers.get("Authorization") != f"Bearer {self.token}":
            return httpx.Response(401, json={"message": "unauthorized"})

        path = request.url.path.split("/shoppingCart", 1)[1]
        body = json.loads(request.content) if request.content else {}

        if request.method == "GET" and not path:
            return self._reply(self.items)
        if request.method == "POST" and not path:
            item = {"id": self.next_id, **body}
            self.next_id += 1
            self.items.append(item)
            return self._reply(item, status_code=201)

        item_id = int(path.lstrip("/"))
        matches = [i for i in self.items if i["id"] == item_id]
        if not matches:
            return httpx.Response(404, json={"message": "not found"})
        if request.method == "GET":
            return self._reply(matches[0])
        if request.method == "PUT":
            matches[0]["quantity"] = body["quantity"]
            return self._reply(matches[0])
        if request.method == "DELETE":
            self.items.remove(matches[0])
            return self._reply(None)
        return httpx.Response(405)


@pytest.fixture
def fake_cart_api():
    return FakeCartAPI()
