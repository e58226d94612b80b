import unittest

from honeycomb_tracing.config import (
    CA_PINNED,
    DEFAULT_CA_CERT,
    DEFAULT_ENDPOINT,
    SYSTEM_TRUST,
    load_config,
    parse_endpoint,
)
from honeycomb_tracing.errors import InvalidEndpointError, MissingApiKeyError, MissingHostError


class LoadConfigTest(unittest.TestCase):
    def test_missing_api_key(self):
        with self.assertRaises(MissingApiKeyError) as cm:
            load_config(CA_PINNED, environ={})
        self.assertIn("HONEYCOMB_API_KEY", str(cm.exception))

    def test_empty_api_key_is_missing(self):
        with self.assertRaises(MissingApiKeyError):
            load_config(SYSTEM_TRUST, environ={"HONEYCOMB_API_KEY": ""})

    def test_defaults_for_ca_pinned(self):
        config = load_config(CA_PINNED, environ={"HONEYCOMB_API_KEY": "secret"})
        self.assertEqual(config.endpoint, DEFAULT_ENDPOINT)
        self.assertEqual(config.ca_cert_path, DEFAULT_CA_CERT)
        self.assertIsNone(config.dataset)
        self.assertEqual(config.headers, {"x-honeycomb-team": "secret"})

    def test_ca_path_override(self):
        config = load_config(CA_PINNED, environ={
            "HONEYCOMB_API_KEY": "secret",
            "HONEYCOMB_CA_CERT": "/tmp/root.pem",
        })
        self.assertEqual(config.ca_cert_path, "/tmp/root.pem")

    def test_system_trust_server_name_and_dataset(self):
        config = load_config(SYSTEM_TRUST, environ={
            "HONEYCOMB_API_KEY": "secret",
            "OTEL_ENDPOINT": "https://example.org:4317",
        })
        self.assertEqual(config.server_name, "example.org")
        self.assertEqual(config.headers, {
            "x-honeycomb-team": "secret",
            "x-honeycomb-dataset": "my-api",
        })

    def test_invalid_endpoint(self):
        with self.assertRaises(InvalidEndpointError) as cm:
            load_config(SYSTEM_TRUST, environ={
                "HONEYCOMB_API_KEY": "secret",
                "OTEL_ENDPOINT": "not a url",
            })
        self.assertIn("not a valid url", str(cm.exception))

    def test_endpoint_without_host(self):
        with self.assertRaises(MissingHostError):
            load_config(SYSTEM_TRUST, environ={
                "HONEYCOMB_API_KEY": "secret",
                "OTEL_ENDPOINT": "unix:/var/run/collector.sock",
            })

    def test_endpoint_without_host_is_fine_for_ca_pinned(self):
        config = load_config(CA_PINNED, environ={
            "HONEYCOMB_API_KEY": "secret",
            "OTEL_ENDPOINT": "unix:/var/run/collector.sock",
        })
        self.assertIsNone(config.server_name)

    def test_unknown_variant(self):
        with self.assertRaises(ValueError):
            load_config("plaintext", environ={"HONEYCOMB_API_KEY": "secret"})

    def test_resource_settings(self):
        config = load_config(CA_PINNED, environ={
            "HONEYCOMB_API_KEY": "secret",
            "OTEL_SERVICE_NAME": "checkout",
            "DEPLOYMENT_ENVIRONMENT": "staging",
        })
        self.assertEqual(config.service_name, "checkout")
        self.assertEqual(config.environment, "staging")


class ParseEndpointTest(unittest.TestCase):
    def test_accepts_urls(self):
        for endpoint in ("https://api.honeycomb.io", "http://localhost:4317", "https://[::1]:4317/"):
            self.assertTrue(parse_endpoint(endpoint).scheme)

    def test_rejects_garbage(self):
        for endpoint in ("", "not a url", "api.honeycomb.io:443/x y", "://missing-scheme", "https://example.org:99999"):
            with self.assertRaises(InvalidEndpointError):
                parse_endpoint(endpoint)


if __name__ == '__main__':
    unittest.main()
