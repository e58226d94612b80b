import os
import re
from typing import NamedTuple, Optional
from urllib.parse import urlparse

from honeycomb_tracing.errors import InvalidEndpointError, MissingApiKeyError, MissingHostError

# Transport variants
CA_PINNED = "ca-pinned"
SYSTEM_TRUST = "system-trust"

DEFAULT_ENDPOINT = "https://api.honeycomb.io"
DEFAULT_CA_CERT = "/etc/ssl/certs/Starfield_Services_Root_Certificate_Authority_-_G2.pem"
DEFAULT_SERVICE_NAME = "honeycomb-tracing-demo"
DATASET = "my-api"

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


class TracingConfig(NamedTuple):
    variant: str
    api_key: str
    endpoint: str
    service_name: str = DEFAULT_SERVICE_NAME
    environment: str = "production"
    ca_cert_path: Optional[str] = None
    dataset: Optional[str] = None
    server_name: Optional[str] = None

    @property
    def headers(self):
        headers = {"x-honeycomb-team": self.api_key}
        if self.dataset:
            headers["x-honeycomb-dataset"] = self.dataset
        return headers


def parse_endpoint(endpoint):
    """Validate an endpoint URL and return its parsed form."""
    if not endpoint or any(c.isspace() for c in endpoint):
        raise InvalidEndpointError(endpoint)
    parsed = urlparse(endpoint)
    if not parsed.scheme or not _SCHEME.match(parsed.scheme):
        raise InvalidEndpointError(endpoint)
    try:
        parsed.port
    except ValueError:
        raise InvalidEndpointError(endpoint) from None
    return parsed


def load_config(variant, environ=None):
    """Read tracing configuration for the given transport variant from the environment."""
    env = os.environ if environ is None else environ

    api_key = env.get("HONEYCOMB_API_KEY")
    if not api_key:
        raise MissingApiKeyError()

    endpoint = env.get("OTEL_ENDPOINT", DEFAULT_ENDPOINT)
    parsed = parse_endpoint(endpoint)

    fields = dict(
        variant=variant,
        api_key=api_key,
        endpoint=endpoint,
        service_name=env.get("OTEL_SERVICE_NAME", DEFAULT_SERVICE_NAME),
        environment=env.get("DEPLOYMENT_ENVIRONMENT", "production"),
    )

    if variant == CA_PINNED:
        fields["ca_cert_path"] = env.get("HONEYCOMB_CA_CERT", DEFAULT_CA_CERT)
    elif variant == SYSTEM_TRUST:
        if not parsed.hostname:
            raise MissingHostError(endpoint)
        fields["server_name"] = parsed.hostname
        fields["dataset"] = DATASET
    else:
        raise ValueError(f"unknown transport variant: {variant}")

    return TracingConfig(**fields)
