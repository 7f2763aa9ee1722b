"""Prometheus metric definitions for the facade."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)
stripe_calls_total = Counter(
    "stripe_calls_total",
    "Outbound Stripe calls by operation and outcome",
    ["service", "operation", "outcome"],
)
stripe_call_duration_seconds = Histogram(
    "stripe_call_duration_seconds",
    "Outbound Stripe call duration seconds",
    ["service", "operation"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
