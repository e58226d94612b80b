import os
from prometheus_client import start_http_server, Counter

from honeycomb_tracing.errors import InvalidMetricsPortError

# Prometheus metrics
SPANS_EMITTED = Counter('honeycomb_demo_spans_emitted', 'Demo spans started by the emitter', ['span_name'])
HEARTBEATS = Counter('honeycomb_demo_heartbeats', 'Idle loop heartbeats')


def metrics_port(environ=None):
    """Return the configured METRICS_PORT, or None when metrics are disabled."""
    env = os.environ if environ is None else environ
    value = env.get('METRICS_PORT')
    if not value:
        return None
    try:
        port = int(value)
    except ValueError:
        raise InvalidMetricsPortError(value) from None
    if not 0 < port < 65536:
        raise InvalidMetricsPortError(value)
    return port


def start_metrics_server(logger, environ=None):
    port = metrics_port(environ)
    if port is None:
        return None
    start_http_server(port)
    logger.info("Metrics server started", port=port)
    return port
