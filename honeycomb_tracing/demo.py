import asyncio
import sys

from opentelemetry import trace

from honeycomb_tracing.config import load_config
from honeycomb_tracing.errors import StartupError
from honeycomb_tracing.metrics import HEARTBEATS, SPANS_EMITTED, start_metrics_server
from honeycomb_tracing.structured_logger import StructuredLogger
from honeycomb_tracing.tracer import init_tracer, register_tracing

TRACER_NAME = "ex.com/basic"
HEARTBEAT_MESSAGE = "just sleeping, press ctrl-c to exit"


def emit_demo_spans(tracer):
    """Emit the fixed operation / sub operation span pair."""
    with tracer.start_as_current_span("operation") as span:
        SPANS_EMITTED.labels("operation").inc()
        span.add_event("Nice operation!", {"bogons": 100})
        span.set_attribute("ex.com/another", "yes")

        with tracer.start_as_current_span("Sub operation...") as child:
            SPANS_EMITTED.labels("Sub operation...").inc()
            child.set_attribute("lemons", "five")
            child.add_event("Sub span event")


async def idle_forever(logger, interval=1.0):
    while True:
        logger.info(HEARTBEAT_MESSAGE)
        HEARTBEATS.inc()
        await asyncio.sleep(interval)


def run(variant):
    """Start tracing for the given transport variant, emit the demo spans and idle."""
    logger = StructuredLogger("honeycomb-tracing-demo")

    try:
        config = load_config(variant)
        logger = StructuredLogger(config.service_name)
        register_tracing(init_tracer(config))
        start_metrics_server(logger)
    except StartupError as e:
        logger.error("Startup failed", variant=variant, error=str(e), exception_type=type(e).__name__)
        sys.exit(1)

    logger.info("Tracing initialized", variant=variant, endpoint=config.endpoint)

    emit_demo_spans(trace.get_tracer(TRACER_NAME))

    try:
        asyncio.run(idle_forever(logger))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
