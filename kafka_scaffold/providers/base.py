"""Abstract base class for container runtime probes."""

from abc import ABC, abstractmethod

from kafka_scaffold.models.container import ContainerSpec, ContainerDescriptor


class RuntimeProbe(ABC):
    """Queries and drives the external container runtime and broker.
    
    Every method blocks until the runtime has answered. Implementations raise
    ExternalQueryError for any transport or execution failure and never retry.
    """
    
    @abstractmethod
    def get_container(self, name: str) -> ContainerDescriptor:
        """Report whether a container with this exact name exists and runs."""
        pass
    
    @abstractmethod
    def create_container(self, spec: ContainerSpec) -> None:
        """Create the container described by spec and run it detached."""
        pass
    
    @abstractmethod
    def start_container(self, name: str) -> None:
        """Start an existing, stopped container."""
        pass
    
    @abstractmethod
    def create_topic(self, container_name: str, topic: str, bootstrap_server: str) -> None:
        """Create a topic using the broker tooling inside the container."""
        pass
