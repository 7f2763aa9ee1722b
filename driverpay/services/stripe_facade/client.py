"""Thin handle over the Stripe SDK bound to one secret key.

The key is passed as a per-request option on every call, so nothing touches
the process-global `stripe.api_key`.
"""

import time
from functools import lru_cache
from typing import Any

import stripe

from driverpay.common.config import settings
from driverpay.common.logging import logger
from driverpay.common.metrics import stripe_call_duration_seconds, stripe_calls_total


class StripeGateway:
    """Blocking Stripe calls used by the facade, with per-call metrics."""

    def __init__(self, api_key: str, api_version: str | None = None, service_name: str = "stripe-facade") -> None:
        self.api_key = api_key
        self.api_version = api_version
        self.service_name = service_name

    def _request_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"api_key": self.api_key}
        if self.api_version:
            options["stripe_version"] = self.api_version
        return options

    def _call(self, operation: str, fn, *args, **kwargs):
        start = time.perf_counter()
        outcome = "error"
        try:
            result = fn(*args, **kwargs)
            outcome = "success"
            return result
        except stripe.StripeError:
            outcome = "rejected"
            raise
        finally:
            stripe_call_duration_seconds.labels(
                service=self.service_name,
                operation=operation,
            ).observe(max(0.0, time.perf_counter() - start))
            stripe_calls_total.labels(
                service=self.service_name,
                operation=operation,
                outcome=outcome,
            ).inc()

    def create_customer(self, params: dict[str, str]) -> str:
        """Create a customer and return its Stripe id."""

        customer = self._call(
            "customers.create",
            stripe.Customer.create,
            **params,
            **self._request_options(),
        )
        logger.info("stripe customer created customer_id=%s", customer.id)
        return customer.id

    def retrieve_payment_method(self, payment_method_id: str | None):
        return self._call(
            "payment_methods.retrieve",
            stripe.PaymentMethod.retrieve,
            payment_method_id,
            **self._request_options(),
        )

    def attach_payment_method(self, payment_method_id: str, customer_id: str | None) -> None:
        self._call(
            "payment_methods.attach",
            stripe.PaymentMethod.attach,
            payment_method_id,
            customer=customer_id,
            **self._request_options(),
        )
        logger.info(
            "stripe payment method attached payment_method_id=%s customer_id=%s",
            payment_method_id,
            customer_id,
        )


@lru_cache
def get_gateway() -> StripeGateway:
    """Process-wide gateway built from settings on first use."""

    return StripeGateway(
        api_key=settings.stripe_secret_key,
        api_version=settings.stripe_api_version,
        service_name=settings.service_name,
    )
