"""Create every registered topic on the running broker."""

import logging

from kafka_scaffold.exceptions import ExternalQueryError
from kafka_scaffold.logging_config import operation_logger
from kafka_scaffold.models.topic import MigrationResult, MigrationStatus
from kafka_scaffold.providers.base import RuntimeProbe
from kafka_scaffold.services.topic_registry import TopicRegistry

logger = logging.getLogger(__name__)


class TopicMigrator:
    """Walks the registry in order and creates each topic on the broker.
    
    Migration stops at the first failed topic; later topics are not
    attempted. Re-running re-creates every topic from the start, so it is
    only safe when the broker tolerates creating an existing topic.
    """
    
    def __init__(
        self,
        registry: TopicRegistry,
        probe: RuntimeProbe,
        container_name: str,
        bootstrap_server: str
    ):
        self.registry = registry
        self.probe = probe
        self.container_name = container_name
        self.bootstrap_server = bootstrap_server
    
    def migrate(self) -> MigrationResult:
        """Create all registered topics, halting on the first failure.
        
        Raises:
            RegistryNotFoundError: if the registry file has never been written.
        """
        topics = self.registry.load_required()
        result = MigrationResult(topics=topics)
        
        logger.info(f"Migrating {len(topics)} topics to {self.bootstrap_server}")
        
        for topic in topics:
            logger.info(f"Creating topic {topic}")
            try:
                self.probe.create_topic(self.container_name, topic, self.bootstrap_server)
            except ExternalQueryError as e:
                logger.error(f"Migration halted at topic {topic}: {e}")
                result.status = MigrationStatus.FAILED
                result.failed_topic = topic
                result.error_message = str(e)
                return result
            
            result.created.append(topic)
            operation_logger.log_topic_operation(
                topic, 'create', {'bootstrap_server': self.bootstrap_server}
            )
        
        logger.info(f"Migration completed, {len(result.created)} topics created")
        return result
