"""Lifecycle management for the local broker container."""

import logging

from kafka_scaffold.config import ContainerConfig
from kafka_scaffold.exceptions import ContainerNotFoundError
from kafka_scaffold.logging_config import operation_logger
from kafka_scaffold.models.container import (
    ContainerSpec,
    ContainerDescriptor,
    ContainerState,
    LifecycleOutcome,
    LifecycleResult
)
from kafka_scaffold.providers.base import RuntimeProbe

logger = logging.getLogger(__name__)


class ContainerLifecycleManager:
    """Moves the broker container from absent to created to running.
    
    State is queried from the runtime before every transition, so running
    either command repeatedly has no effect after the first success. There is
    deliberately no stop or remove.
    """
    
    def __init__(self, probe: RuntimeProbe, settings: ContainerConfig):
        self.probe = probe
        self.settings = settings
    
    @property
    def container_name(self) -> str:
        return self.settings.name
    
    def describe(self) -> ContainerDescriptor:
        """Get the current state of the container from the runtime."""
        return self.probe.get_container(self.container_name)
    
    def build_spec(self) -> ContainerSpec:
        return ContainerSpec(
            name=self.settings.name,
            image=self.settings.image,
            ports=self.settings.ports,
            environment=self.settings.environment
        )
    
    def create(self) -> LifecycleResult:
        """Create the container unless one with the same name exists."""
        descriptor = self.describe()
        
        if descriptor.exists:
            logger.info(f"Container {self.container_name} already exists ({descriptor.state.value})")
            return LifecycleResult(
                container_name=self.container_name,
                outcome=LifecycleOutcome.ALREADY_EXISTS,
                previous_state=descriptor.state
            )
        
        spec = self.build_spec()
        logger.info(f"Creating container {spec.name}")
        self.probe.create_container(spec)
        
        operation_logger.log_container_operation(
            spec.name, 'create', {'image': spec.image, 'ports': spec.ports}
        )
        
        return LifecycleResult(
            container_name=self.container_name,
            outcome=LifecycleOutcome.CREATED,
            previous_state=ContainerState.ABSENT
        )
    
    def start(self) -> LifecycleResult:
        """Start the container; it must have been created first."""
        descriptor = self.describe()
        
        if not descriptor.exists:
            raise ContainerNotFoundError(self.container_name)
        
        if descriptor.running:
            logger.info(f"Container {self.container_name} is already running")
            return LifecycleResult(
                container_name=self.container_name,
                outcome=LifecycleOutcome.ALREADY_RUNNING,
                previous_state=ContainerState.RUNNING
            )
        
        logger.info(f"Starting container {self.container_name}")
        self.probe.start_container(self.container_name)
        
        operation_logger.log_container_operation(self.container_name, 'start')
        
        return LifecycleResult(
            container_name=self.container_name,
            outcome=LifecycleOutcome.STARTED,
            previous_state=ContainerState.STOPPED
        )
