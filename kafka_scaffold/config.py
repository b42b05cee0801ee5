"""Configuration management for Kafka Scaffold."""

import os
from typing import Dict, Optional
from dataclasses import dataclass, field


@dataclass
class ContainerConfig:
    """Local broker container configuration."""
    name: str = "kafka-server"
    image: str = "apache/kafka:3.8.0"
    ports: Dict[int, int] = field(default_factory=lambda: {9092: 9092})
    environment: Dict[str, str] = field(
        default_factory=lambda: {'ALLOW_PLAINTEXT_LISTENER': 'yes'}
    )


@dataclass
class BrokerConfig:
    """Broker admin configuration."""
    bootstrap_server: str = "localhost:9092"
    topics_script: str = "/opt/kafka/bin/kafka-topics.sh"


@dataclass
class RegistryConfig:
    """Topic registry configuration."""
    path: str = "topics.txt"


@dataclass
class ScaffoldConfig:
    """Generated source layout."""
    config_path: str = "config/kafka_config.py"
    consumers_dir: str = "messaging/consumers"
    producers_dir: str = "messaging/producers"
    client_id: str = "app"


@dataclass
class TokenConfig:
    """Bearer token configuration."""
    length: int = 64
    env_path: str = ".env"
    env_key: str = "API_TOKEN_HASH"
    token_path: str = "token(deleteMe).txt"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class Config:
    """Main configuration class."""
    container: ContainerConfig = field(default_factory=ContainerConfig)
    broker: BrokerConfig = field(default_factory=BrokerConfig)
    registry: RegistryConfig = field(default_factory=RegistryConfig)
    scaffold: ScaffoldConfig = field(default_factory=ScaffoldConfig)
    token: TokenConfig = field(default_factory=TokenConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    
    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        config = cls()
        
        # Container config
        config.container.name = os.getenv('KAFKA_SCAFFOLD_CONTAINER_NAME', config.container.name)
        config.container.image = os.getenv('KAFKA_SCAFFOLD_IMAGE', config.container.image)
        
        # Broker config
        config.broker.bootstrap_server = os.getenv(
            'KAFKA_SCAFFOLD_BOOTSTRAP_SERVER', config.broker.bootstrap_server
        )
        
        # Registry config
        config.registry.path = os.getenv('KAFKA_SCAFFOLD_REGISTRY_PATH', config.registry.path)
        
        # Token config
        config.token.env_path = os.getenv('KAFKA_SCAFFOLD_ENV_PATH', config.token.env_path)
        
        # Logging config
        config.logging.level = os.getenv('LOG_LEVEL', config.logging.level)
        config.logging.file_path = os.getenv('LOG_FILE_PATH')
        
        return config


# Global configuration instance
config = Config.from_env()
