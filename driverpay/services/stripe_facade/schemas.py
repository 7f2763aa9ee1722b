"""Request/response schemas for the Stripe facade endpoints.

Wire names are camelCase to match the mobile client.
"""

from pydantic import BaseModel, ConfigDict, Field


class CustomerCreateRequest(BaseModel):
    """Payload accepted by `POST /customers`. Every field is optional."""

    email: str | None = None
    name: str | None = None
    phone: str | None = None
    description: str | None = None

    def to_stripe_params(self) -> dict[str, str]:
        # Absent fields are left out; empty strings are forwarded as-is.
        return self.model_dump(exclude_none=True)


class CustomerCreateResponse(BaseModel):
    """Customer id, duplicated under `id` and `customerId` for older clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    customer_id: str = Field(alias="customerId")


class AttachPaymentMethodRequest(BaseModel):
    """Payload accepted by `POST /payment-methods/attach`."""

    model_config = ConfigDict(populate_by_name=True)

    payment_method_id: str | None = Field(default=None, alias="paymentMethodId")
    customer_id: str | None = Field(default=None, alias="customerId")


class AttachPaymentMethodResponse(BaseModel):
    """Fixed acknowledgement returned once Stripe accepts the attach."""

    status: str = "success"
    message: str = "Payment method attached successfully"
