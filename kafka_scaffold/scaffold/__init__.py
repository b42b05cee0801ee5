"""Source generation for producers, consumers and Kafka config."""

from .templates import KafkaTemplates
from .generator import ScaffoldGenerator, build_component

__all__ = ['KafkaTemplates', 'ScaffoldGenerator', 'build_component']
