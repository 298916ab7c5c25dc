"""Prometheus metric definitions for the gateway."""

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
payment_intent_requests_total = Counter(
    "payment_intent_requests_total",
    "Total payment intent creation requests",
    ["service"],
)
payment_intent_failures_total = Counter(
    "payment_intent_failures_total",
    "Failed payment intent creations by error type",
    ["service", "error_type"],
)
provider_latency_seconds = Histogram(
    "provider_latency_seconds",
    "Latency of payment provider create calls",
    ["service"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
