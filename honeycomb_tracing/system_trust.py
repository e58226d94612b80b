"""Demo program using the system trust store with the endpoint host as TLS server name."""

from honeycomb_tracing.config import SYSTEM_TRUST
from honeycomb_tracing.demo import run


def main():
    run(SYSTEM_TRUST)


if __name__ == '__main__':
    main()
