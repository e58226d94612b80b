"""Demo program that trusts only the Honeycomb root CA certificate."""

from honeycomb_tracing.config import CA_PINNED
from honeycomb_tracing.demo import run


def main():
    run(CA_PINNED)


if __name__ == '__main__':
    main()
