"""Payment-method attach endpoint behavior."""

import pytest
import stripe

from driverpay.services.stripe_facade.client import StripeGateway, get_gateway
from driverpay.services.stripe_facade.main import app


ATTACH_PATH = "/api/stripe/payment-methods/attach"


def test_attach_success(client, gateway):
    """Retrieve then attach, and acknowledge with the fixed success body."""

    resp = client.post(ATTACH_PATH, json={"paymentMethodId": "pm_1", "customerId": "cus_1"})

    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "message": "Payment method attached successfully"}
    assert gateway.calls == [
        ("retrieve_payment_method", "pm_1"),
        ("attach_payment_method", "pm_1", "cus_1"),
    ]


def test_retrieve_rejection_maps_to_400_and_skips_attach(client, gateway):
    """An unknown payment method stops before the attach round-trip."""

    gateway.failures["retrieve_payment_method"] = stripe.InvalidRequestError(
        "No such payment_method: pm_x", "id"
    )

    resp = client.post(ATTACH_PATH, json={"paymentMethodId": "pm_x", "customerId": "cus_1"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Failed to attach payment method: No such payment_method: pm_x"}
    assert [call[0] for call in gateway.calls] == ["retrieve_payment_method"]


def test_attach_rejection_maps_to_400(client, gateway):
    """A Stripe error on the second round-trip uses the same prefix."""

    gateway.failures["attach_payment_method"] = stripe.InvalidRequestError(
        "No such customer: 'cus_missing'", "customer"
    )

    resp = client.post(ATTACH_PATH, json={"paymentMethodId": "pm_1", "customerId": "cus_missing"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Failed to attach payment method: No such customer: 'cus_missing'"}


def test_missing_ids_are_not_validated_locally(client, gateway):
    """Absent ids are handed to the gateway unchanged; Stripe decides."""

    client.post(ATTACH_PATH, json={})

    assert gateway.calls[0] == ("retrieve_payment_method", None)


@pytest.fixture
def sdk_client(client):
    """Client wired to a real StripeGateway instead of the fake."""

    app.dependency_overrides[get_gateway] = lambda: StripeGateway(api_key="sk_test_unused")
    yield client


def test_missing_payment_method_id_is_rejected_by_stripe_sdk(sdk_client):
    """The SDK refuses a missing id before any network call, surfacing as 400."""

    resp = sdk_client.post(ATTACH_PATH, json={"customerId": "cus_1"})

    assert resp.status_code == 400
    body = resp.json()
    assert list(body) == ["error"]
    assert body["error"].startswith(
        "Failed to attach payment method: Could not determine which URL to request"
    )


def test_attach_unexpected_fault(client, gateway):
    """Non-Stripe exceptions during attach map to 500."""

    gateway.failures["attach_payment_method"] = ValueError("bad state")

    resp = client.post(ATTACH_PATH, json={"paymentMethodId": "pm_1", "customerId": "cus_1"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Unexpected error: bad state"}
