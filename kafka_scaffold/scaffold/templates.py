"""Source templates for the generated Kafka messaging layer."""

from string import Template

from kafka_scaffold.models.component import ComponentSpec


CONFIG_TEMPLATE = Template('''"""Kafka connection settings shared by producers and consumers."""

import os

from kafka import KafkaConsumer, KafkaProducer

BOOTSTRAP_SERVERS = os.getenv('KAFKA_BOOTSTRAP_SERVERS', $bootstrap_servers_literal).split(',')
CLIENT_ID = os.getenv('KAFKA_CLIENT_ID', $client_id_literal)


def create_producer(**overrides):
    """Create a producer connected to the configured brokers."""
    options = {
        'bootstrap_servers': BOOTSTRAP_SERVERS,
        'client_id': CLIENT_ID,
    }
    options.update(overrides)
    return KafkaProducer(**options)


def create_consumer(*topics, group_id, **overrides):
    """Create a consumer subscribed to topics within group_id."""
    options = {
        'bootstrap_servers': BOOTSTRAP_SERVERS,
        'client_id': CLIENT_ID,
        'group_id': group_id,
        'auto_offset_reset': 'earliest',
    }
    options.update(overrides)
    return KafkaConsumer(*topics, **options)
''')


CONSUMER_TEMPLATE = Template('''"""$class_name consumer."""

from $config_module import create_consumer

TOPIC = $topic_literal
GROUP_ID = $group_id_literal


def handle_message(message):
    """Process a single record from TOPIC."""
    # Do something with the message
    pass


def run_${module_name}_consumer():
    consumer = create_consumer(TOPIC, group_id=GROUP_ID)
    try:
        for message in consumer:
            handle_message(message)
    finally:
        consumer.close()
''')


PRODUCER_TEMPLATE = Template('''"""$class_name producer."""

import logging

from $config_module import create_producer

logger = logging.getLogger(__name__)

TOPIC = $topic_literal


def send_${module_name}(message: bytes):
    """Send message to TOPIC and wait for delivery."""
    producer = create_producer()
    try:
        producer.send(TOPIC, value=message)
        producer.flush()
    except Exception as e:
        logger.error(f"Error sending the message: {e}")
        raise
    finally:
        producer.close()
''')


class KafkaTemplates:
    """Renders the generated source files.
    
    User supplied values are substituted as Python literals so any quote or
    backslash in them still yields valid source.
    """
    
    @staticmethod
    def config(bootstrap_servers: str, client_id: str) -> str:
        return CONFIG_TEMPLATE.substitute(
            bootstrap_servers_literal=repr(bootstrap_servers),
            client_id_literal=repr(client_id)
        )
    
    @staticmethod
    def consumer(spec: ComponentSpec, config_module: str) -> str:
        return CONSUMER_TEMPLATE.substitute(
            class_name=spec.class_name,
            module_name=spec.module_name,
            topic_literal=repr(spec.topic),
            group_id_literal=repr(f'{spec.topic}-group'),
            config_module=config_module
        )
    
    @staticmethod
    def producer(spec: ComponentSpec, config_module: str) -> str:
        return PRODUCER_TEMPLATE.substitute(
            class_name=spec.class_name,
            module_name=spec.module_name,
            topic_literal=repr(spec.topic),
            config_module=config_module
        )
