"""Stripe facade API.

Exposes customer creation and payment-method attach for the driver app,
injecting the server-held Stripe key.
"""

from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from driverpay.common.config import settings
from driverpay.common.logging import configure_logging, trace_id_ctx
from driverpay.common.metrics import (
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
)
from driverpay.common.startup import log_startup_config
from driverpay.common.tracing import instrument_app, setup_tracing
from driverpay.services.stripe_facade.errors import register_error_handlers
from driverpay.services.stripe_facade.routes import router

configure_logging()
setup_tracing(settings.service_name)
log_startup_config(settings)
app = FastAPI(title="Driver Pay Stripe Facade")
instrument_app(app)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_error_handlers(app)
app.include_router(router)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Record request count and latency, and propagate the correlation id."""

    trace_id = request.headers.get("x-correlation-id") or str(uuid4())
    trace_id_ctx.set(trace_id)
    start = perf_counter()
    route = request.url.path
    method = request.method
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        route_obj = request.scope.get("route")
        if route_obj is not None and getattr(route_obj, "path", None):
            route = route_obj.path
        response.headers["x-correlation-id"] = trace_id
        return response
    finally:
        elapsed = max(0.0, perf_counter() - start)
        http_request_duration_seconds.labels(
            service=settings.service_name,
            route=route,
            method=method,
        ).observe(elapsed)
        http_requests_total.labels(
            service=settings.service_name,
            route=route,
            method=method,
            status_code=str(status_code),
        ).inc()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()
