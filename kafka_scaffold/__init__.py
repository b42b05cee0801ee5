"""
Kafka Scaffold

Bootstraps a Kafka messaging layer inside a host application: generates
producer and consumer boilerplate, manages a local broker container and keeps
a topic registry in sync with the broker.
"""

import logging

__version__ = "0.1.0"

# Log records stay silent until setup_logging() runs; the CLI reports errors itself
logging.getLogger(__name__).addHandler(logging.NullHandler())
