"""Data models for containers, topics and generated components."""

from .container import (
    ContainerState, ContainerSpec, ContainerDescriptor, LifecycleOutcome, LifecycleResult
)
from .topic import RegistryUpdate, MigrationStatus, MigrationResult
from .component import ComponentSpec

__all__ = [
    'ContainerState',
    'ContainerSpec',
    'ContainerDescriptor',
    'LifecycleOutcome',
    'LifecycleResult',
    'RegistryUpdate',
    'MigrationStatus',
    'MigrationResult',
    'ComponentSpec'
]
