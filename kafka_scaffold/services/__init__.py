"""Core services for container lifecycle, topic registry and migration."""

from .topic_registry import TopicRegistry, parse_topic_input
from .container_lifecycle import ContainerLifecycleManager
from .topic_migrator import TopicMigrator
from .token_issuer import TokenIssuer

__all__ = [
    'TopicRegistry',
    'parse_topic_input',
    'ContainerLifecycleManager',
    'TopicMigrator',
    'TokenIssuer'
]
