import grpc

# OpenTelemetry imports
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.resources import Resource
from opentelemetry.semconv.resource import ResourceAttributes
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

from honeycomb_tracing.config import CA_PINNED
from honeycomb_tracing.errors import AlreadyRegisteredError, CertificateError, ExporterError


def read_certificate(path):
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise CertificateError(path, e.strerror or str(e)) from e


def build_credentials(config):
    """Return gRPC channel credentials and channel options for the configured variant."""
    if config.variant == CA_PINNED:
        pem = read_certificate(config.ca_cert_path)
        return grpc.ssl_channel_credentials(root_certificates=pem), None

    # System trust store, but pin the TLS server name to the endpoint host
    options = (("grpc.ssl_target_name_override", config.server_name),)
    return grpc.ssl_channel_credentials(), options


def build_exporter(config):
    credentials, channel_options = build_credentials(config)
    try:
        return OTLPSpanExporter(
            endpoint=config.endpoint,
            headers=config.headers,
            # Never let the endpoint scheme or OTEL_EXPORTER_OTLP_INSECURE drop TLS
            insecure=False,
            credentials=credentials,
            channel_options=channel_options,
        )
    except (ValueError, TypeError) as e:
        raise ExporterError(f"failed to instantiate opentelemetry tracing: {e}") from e


def init_tracer(config):
    """Build a tracer provider that batches spans to the configured OTLP endpoint."""
    resource = Resource.create({
        ResourceAttributes.SERVICE_NAME: config.service_name,
        ResourceAttributes.DEPLOYMENT_ENVIRONMENT: config.environment
    })

    trace_provider = TracerProvider(resource=resource)
    span_processor = BatchSpanProcessor(build_exporter(config))
    trace_provider.add_span_processor(span_processor)
    return trace_provider


def register_tracing(trace_provider):
    """Install the provider as the process-wide tracer provider.

    The OpenTelemetry API only warns when a provider is replaced, so a second
    call here raises instead, whoever installed the current one.
    """
    if not isinstance(trace.get_tracer_provider(), trace.ProxyTracerProvider):
        raise AlreadyRegisteredError()
    trace.set_tracer_provider(trace_provider)
    return trace_provider
