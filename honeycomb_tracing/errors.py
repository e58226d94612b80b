"""Startup failures. Every one of them aborts the program."""


class StartupError(Exception):
    pass


class MissingApiKeyError(StartupError):
    def __init__(self, name="HONEYCOMB_API_KEY"):
        super().__init__(f"{name} must be set")


class InvalidEndpointError(StartupError):
    def __init__(self, endpoint):
        self.endpoint = endpoint
        super().__init__(f"OTEL_ENDPOINT is not a valid url: {endpoint!r}")


class MissingHostError(StartupError):
    def __init__(self, endpoint):
        self.endpoint = endpoint
        super().__init__(f"OTEL_ENDPOINT has no host to use as TLS server name: {endpoint!r}")


class CertificateError(StartupError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"could not read CA certificate {path}: {reason}")


class ExporterError(StartupError):
    pass


class AlreadyRegisteredError(StartupError):
    def __init__(self):
        super().__init__("failed to register tracer: a tracer provider is already installed")


class InvalidMetricsPortError(StartupError):
    def __init__(self, value):
        super().__init__(f"METRICS_PORT is not a valid port: {value!r}")
