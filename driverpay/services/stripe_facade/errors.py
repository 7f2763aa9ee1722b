"""Failure types surfaced to API callers and their JSON rendering.

Every failure body is exactly `{"error": <message>}`. Upstream rejections map
to 400, anything else to 500.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from driverpay.common.logging import logger


CREATE_CUSTOMER_PREFIX = "Failed to create customer"
ATTACH_PAYMENT_METHOD_PREFIX = "Failed to attach payment method"
UNEXPECTED_PREFIX = "Unexpected error"


class FacadeError(Exception):
    """Base for failures rendered as an `{"error": ...}` body."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, str]:
        return {"error": self.message}


class UpstreamRejection(FacadeError):
    """Stripe answered with a structured error."""

    status_code = 400

    def __init__(self, prefix: str, upstream_message: str) -> None:
        super().__init__(f"{prefix}: {upstream_message}")


class UnexpectedFault(FacadeError):
    """Anything that is not an upstream rejection: bad JSON, bugs, etc."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(f"{UNEXPECTED_PREFIX}: {message}")


def register_error_handlers(app: FastAPI) -> None:
    """Render facade failures as JSON. Framework 404/405 stay untouched."""

    @app.exception_handler(FacadeError)
    async def facade_error_handler(request: Request, exc: FacadeError):
        logger.info(
            "request failed path=%s status=%s",
            request.url.path,
            exc.status_code,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())
