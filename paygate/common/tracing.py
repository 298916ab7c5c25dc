"""OpenTelemetry wiring for the gateway app.

Export is opt-in (`TRACING_ENABLED`); request spans from the FastAPI
instrumentor are always attached so a collector can be added without code
changes.
"""

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter

from paygate.common.config import GatewaySettings


def build_tracer_provider(settings: GatewaySettings) -> TracerProvider:
    """Tracer provider tagged with the gateway name, exporting over OTLP HTTP."""

    resource = Resource.create({"service.name": settings.service_name})
    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=settings.otel_exporter_otlp_endpoint)
    provider.add_span_processor(BatchSpanProcessor(exporter))
    return provider


def setup_tracing(settings: GatewaySettings) -> None:
    """Register the gateway tracer provider globally."""

    trace.set_tracer_provider(build_tracer_provider(settings))


def instrument_app(app: FastAPI) -> None:
    FastAPIInstrumentor.instrument_app(app)
