"""Docker runtime provider for the local Kafka broker."""

import docker
import logging
from typing import List, Optional

from kafka_scaffold.config import BrokerConfig
from kafka_scaffold.exceptions import (
    ErrorCode,
    ExternalQueryError,
    TopicCreationError,
    wrap_runtime_error
)
from kafka_scaffold.models.container import ContainerSpec, ContainerDescriptor
from kafka_scaffold.providers.base import RuntimeProbe

logger = logging.getLogger(__name__)


class DockerProvider(RuntimeProbe):
    """Docker-based runtime probe."""
    
    def __init__(self, broker_config: Optional[BrokerConfig] = None):
        """Initialize Docker provider."""
        self.broker_config = broker_config or BrokerConfig()
        try:
            self.client = docker.from_env()
            self.client.ping()
            logger.info("Docker client initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize Docker client: {e}")
            raise ExternalQueryError(
                "Docker daemon is not reachable",
                error_code=ErrorCode.RUNTIME_UNAVAILABLE,
                operation='connect',
                cause=e
            ) from e
    
    @wrap_runtime_error('inspect_container')
    def get_container(self, name: str) -> ContainerDescriptor:
        """Report existence and run state of the named container."""
        matches = self._find_containers(name)
        
        if not matches:
            logger.debug(f"Container {name} not found")
            return ContainerDescriptor(name=name, exists=False, running=False)
        
        container = matches[0]
        running = container.status == 'running'
        logger.debug(f"Container {name} found with status {container.status}")
        
        return ContainerDescriptor(name=name, exists=True, running=running)
    
    @wrap_runtime_error('create_container')
    def create_container(self, spec: ContainerSpec) -> None:
        """Create and start the container, pulling the image if needed."""
        ports = {
            f'{container_port}/tcp': host_port
            for host_port, container_port in spec.ports.items()
        }
        
        logger.info(f"Creating container {spec.name} from {spec.image}")
        self.client.containers.run(
            spec.image,
            name=spec.name,
            detach=True,
            ports=ports,
            environment=dict(spec.environment)
        )
        logger.info(f"Created container {spec.name}")
    
    @wrap_runtime_error('start_container')
    def start_container(self, name: str) -> None:
        """Start an existing container."""
        container = self.client.containers.get(name)
        container.start()
        logger.info(f"Started container {name}")
    
    @wrap_runtime_error('create_topic')
    def create_topic(self, container_name: str, topic: str, bootstrap_server: str) -> None:
        """Run kafka-topics.sh --create inside the broker container."""
        container = self.client.containers.get(container_name)
        
        cmd = [
            self.broker_config.topics_script,
            '--create',
            '--topic', topic,
            '--bootstrap-server', bootstrap_server
        ]
        
        result = container.exec_run(cmd)
        output = self._decode_output(result.output)
        
        if result.exit_code != 0:
            raise TopicCreationError(topic, output=output)
        
        logger.info(f"Created topic {topic} on {bootstrap_server}")
    
    def _find_containers(self, name: str) -> List:
        """Get containers in any state whose name is exactly name.
        
        The runtime's name filter matches substrings, so results are narrowed
        to exact matches here.
        """
        containers = self.client.containers.list(all=True, filters={'name': name})
        return [c for c in containers if c.name == name]
    
    @staticmethod
    def _decode_output(output) -> str:
        if output is None:
            return ''
        if isinstance(output, bytes):
            return output.decode('utf-8', errors='replace').strip()
        return str(output).strip()
