"""HTTP surface for payment intent creation.

`create_app` wires settings, the provider and the service together; tests
build their own app with a substitute provider.
"""

from time import perf_counter
from uuid import uuid4

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from paygate.common.config import GatewaySettings
from paygate.common.errors import PaymentIntentError, ValidationError
from paygate.common.logging import configure_logging, request_id_ctx
from paygate.common.metrics import (
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
    payment_intent_requests_total,
)
from paygate.common.startup import log_startup_config, warn_missing_credentials
from paygate.common.tracing import instrument_app, setup_tracing
from paygate.services.payment_intents.provider import PaymentProvider, StripePaymentProvider
from paygate.services.payment_intents.schemas import ErrorResponse, PaymentIntentResult
from paygate.services.payment_intents.service import PaymentIntentService


def get_service(request: Request) -> PaymentIntentService:
    return request.app.state.payment_intents


async def handle_payment_intent_error(request: Request, exc: PaymentIntentError) -> JSONResponse:
    """Single translation point from either error kind to the 400 response shape."""

    del request
    return JSONResponse(status_code=400, content={"error": exc.message})


def create_app(
    settings: GatewaySettings | None = None,
    provider: PaymentProvider | None = None,
) -> FastAPI:
    """Build the gateway app. The Stripe provider is used unless one is injected."""

    settings = settings or GatewaySettings()
    configure_logging(settings)
    if settings.tracing_enabled:
        setup_tracing(settings)
    log_startup_config(settings)
    warn_missing_credentials(settings)

    if provider is None:
        provider = StripePaymentProvider(settings.stripe_secret_key, settings.stripe_api_version)

    app = FastAPI(title="Payment Intent Gateway")
    app.state.settings = settings
    app.state.payment_intents = PaymentIntentService(
        provider,
        default_currency=settings.default_currency,
        service_name=settings.service_name,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PaymentIntentError, handle_payment_intent_error)
    instrument_app(app)

    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        """Record request count and latency, and propagate the request id."""

        start = perf_counter()
        route = request.url.path
        method = request.method
        status_code = 500
        request_id = request.headers.get("x-request-id") or str(uuid4())
        token = request_id_ctx.set(request_id)
        try:
            response = await call_next(request)
            status_code = response.status_code
            route_obj = request.scope.get("route")
            if route_obj is not None and getattr(route_obj, "path", None):
                route = route_obj.path
            response.headers["x-request-id"] = request_id
            return response
        finally:
            request_id_ctx.reset(token)
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

    @app.post(
        "/payments/create-payment-intent",
        response_model=PaymentIntentResult,
        responses={400: {"model": ErrorResponse}},
    )
    async def create_payment_intent(
        request: Request,
        service: PaymentIntentService = Depends(get_service),
    ):
        """Create a provider PaymentIntent and return its client secret."""

        payment_intent_requests_total.labels(service=settings.service_name).inc()
        try:
            payload = await request.json()
        except ValueError as exc:
            raise ValidationError("Invalid request body") from exc
        return await service.create_payment_intent(payload)

    @app.get("/metrics")
    def metrics():
        """Prometheus scrape endpoint."""

        return metrics_response()

    @app.get("/health")
    def health():
        """Liveness probe; never touches the provider."""

        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Serve the module-level app with uvicorn on the configured host/port."""

    settings: GatewaySettings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
