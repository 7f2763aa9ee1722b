"""Shared fixtures: safe env defaults and a fake Stripe gateway."""

import os
from types import SimpleNamespace

import pytest

# Must be set before the app module is imported.
os.environ.setdefault("TRACING_ENABLED", "false")
os.environ.setdefault("SERVICE_NAME", "stripe-facade-test")

from fastapi.testclient import TestClient  # noqa: E402

from driverpay.services.stripe_facade.client import get_gateway  # noqa: E402
from driverpay.services.stripe_facade.main import app  # noqa: E402


class FakeGateway:
    """Records calls and replays canned Stripe outcomes."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.customer_id = "cus_123"
        self.failures: dict[str, Exception] = {}

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failures:
            raise self.failures[operation]

    def create_customer(self, params):
        self.calls.append(("create_customer", params))
        self._maybe_fail("create_customer")
        return self.customer_id

    def retrieve_payment_method(self, payment_method_id):
        self.calls.append(("retrieve_payment_method", payment_method_id))
        self._maybe_fail("retrieve_payment_method")
        return SimpleNamespace(id=payment_method_id)

    def attach_payment_method(self, payment_method_id, customer_id):
        self.calls.append(("attach_payment_method", payment_method_id, customer_id))
        self._maybe_fail("attach_payment_method")


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
