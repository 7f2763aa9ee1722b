"""HTTP routes for customer creation and payment-method attach."""

from typing import Callable

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ValidationError
from starlette.concurrency import run_in_threadpool

from driverpay.common.config import settings
from driverpay.common.logging import logger, operation_ctx
from driverpay.services.stripe_facade.client import StripeGateway, get_gateway
from driverpay.services.stripe_facade.errors import FacadeError, UnexpectedFault
from driverpay.services.stripe_facade.schemas import (
    AttachPaymentMethodRequest,
    CustomerCreateRequest,
)
from driverpay.services.stripe_facade.service import StripeFacadeService

router = APIRouter(prefix=settings.api_prefix)


def describe_validation_error(exc: ValidationError) -> str:
    """Single-line `field: reason` summary of a body that does not fit the schema."""

    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


async def _dispatch(
    request: Request,
    operation: str,
    schema: type[BaseModel],
    handler: Callable[[BaseModel], BaseModel],
) -> dict:
    """Decode the body, run the blocking handler off-loop, map faults to 500."""

    operation_ctx.set(operation)
    try:
        payload = schema.model_validate(await request.json())
        result = await run_in_threadpool(handler, payload)
    except FacadeError:
        raise
    except ValidationError as exc:
        logger.warning("malformed body operation=%s errors=%s", operation, exc.error_count())
        raise UnexpectedFault(describe_validation_error(exc)) from exc
    except Exception as exc:
        logger.exception("unexpected failure operation=%s", operation)
        raise UnexpectedFault(str(exc)) from exc
    return result.model_dump(by_alias=True)


@router.post("/customers")
async def create_customer(request: Request, gateway: StripeGateway = Depends(get_gateway)):
    """Register a Stripe customer and return its id twice (`id`, `customerId`)."""

    service = StripeFacadeService(gateway)
    return await _dispatch(request, "create_customer", CustomerCreateRequest, service.create_customer)


@router.post("/payment-methods/attach")
async def attach_payment_method(request: Request, gateway: StripeGateway = Depends(get_gateway)):
    """Bind an already tokenized payment method to an existing customer."""

    service = StripeFacadeService(gateway)
    return await _dispatch(
        request,
        "attach_payment_method",
        AttachPaymentMethodRequest,
        service.attach_payment_method,
    )
