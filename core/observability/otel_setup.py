"""
Todo OpenTelemetry Setup

Traces for service operations (one span per TaskService call).
Without setup_otel() the API's no-op tracer provider is used, so spans
cost nothing in tests and scripts.
"""
from __future__ import annotations
from typing import Any, Optional
import os

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

TRACER_NAME = "todo"


def setup_otel(
    service_name: str = "todo-backend",
    endpoint: Optional[str] = None,
) -> trace.Tracer:
    """Initialize OpenTelemetry, exporting over OTLP when an endpoint is set."""
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)

    otlp_endpoint = endpoint or os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if otlp_endpoint:
        # Only required when exporting; install the "otlp" extra.
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        exporter = OTLPSpanExporter(endpoint=otlp_endpoint)
        provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    return trace.get_tracer(TRACER_NAME)


def get_tracer() -> trace.Tracer:
    return trace.get_tracer(TRACER_NAME)


def service_span(tracer: trace.Tracer, operation: str, **attributes: Any):
    """Start a current span for a service operation; None attributes are dropped."""
    return tracer.start_as_current_span(
        f"task_service.{operation}",
        attributes={
            f"todo.{k}": v for k, v in attributes.items() if v is not None
        },
    )
