"""Customer registration and payment-method binding against Stripe.

Each operation is one logical upstream action. Stripe errors become
`UpstreamRejection`; everything else propagates to the caller.
"""

import stripe

from driverpay.common.logging import logger
from driverpay.services.stripe_facade.client import StripeGateway
from driverpay.services.stripe_facade.errors import (
    ATTACH_PAYMENT_METHOD_PREFIX,
    CREATE_CUSTOMER_PREFIX,
    UpstreamRejection,
)
from driverpay.services.stripe_facade.schemas import (
    AttachPaymentMethodRequest,
    AttachPaymentMethodResponse,
    CustomerCreateRequest,
    CustomerCreateResponse,
)


def upstream_message(exc: stripe.StripeError) -> str:
    """Provider message without request id or error code decoration."""

    return exc.user_message or str(exc)


class StripeFacadeService:
    """Adapts the facade's JSON contract to Stripe SDK calls."""

    def __init__(self, gateway: StripeGateway) -> None:
        self.gateway = gateway

    def create_customer(self, req: CustomerCreateRequest) -> CustomerCreateResponse:
        try:
            customer_id = self.gateway.create_customer(req.to_stripe_params())
        except stripe.StripeError as exc:
            logger.warning("stripe rejected customer creation: %s", upstream_message(exc))
            raise UpstreamRejection(CREATE_CUSTOMER_PREFIX, upstream_message(exc)) from exc
        return CustomerCreateResponse(id=customer_id, customer_id=customer_id)

    def attach_payment_method(self, req: AttachPaymentMethodRequest) -> AttachPaymentMethodResponse:
        """Retrieve the payment method, then attach it to the customer.

        Two round-trips with no atomicity between them.
        """

        try:
            payment_method = self.gateway.retrieve_payment_method(req.payment_method_id)
            self.gateway.attach_payment_method(payment_method.id, req.customer_id)
        except stripe.StripeError as exc:
            logger.warning(
                "stripe rejected payment method attach payment_method_id=%s: %s",
                req.payment_method_id,
                upstream_message(exc),
            )
            raise UpstreamRejection(ATTACH_PAYMENT_METHOD_PREFIX, upstream_message(exc)) from exc
        return AttachPaymentMethodResponse()
