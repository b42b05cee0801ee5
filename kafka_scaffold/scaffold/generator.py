"""Writes generated producers, consumers and Kafka config to disk."""

import logging
from pathlib import Path
from typing import Union

import pydantic

from kafka_scaffold.config import ScaffoldConfig, BrokerConfig
from kafka_scaffold.exceptions import ScaffoldWriteError, ValidationError
from kafka_scaffold.models.component import ComponentSpec
from kafka_scaffold.scaffold.templates import KafkaTemplates

logger = logging.getLogger(__name__)


def build_component(name: str, topic: str) -> ComponentSpec:
    """Validate user input into a ComponentSpec."""
    try:
        return ComponentSpec(name=name, topic=topic)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = str(error['loc'][0]) if error.get('loc') else None
        raise ValidationError(error['msg'], field=field) from e


class ScaffoldGenerator:
    """Generates source files at paths derived from the component name."""
    
    def __init__(
        self,
        settings: ScaffoldConfig,
        broker: BrokerConfig,
        base_dir: Union[str, Path] = '.'
    ):
        self.settings = settings
        self.broker = broker
        self.base_dir = Path(base_dir)
    
    @property
    def config_module(self) -> str:
        """Dotted import path of the generated config module."""
        return '.'.join(Path(self.settings.config_path).with_suffix('').parts)
    
    def consumer_path(self, spec: ComponentSpec) -> Path:
        return self.base_dir / self.settings.consumers_dir / f'{spec.module_name}.py'
    
    def producer_path(self, spec: ComponentSpec) -> Path:
        return self.base_dir / self.settings.producers_dir / f'{spec.module_name}.py'
    
    def write_config(self) -> Path:
        content = KafkaTemplates.config(self.broker.bootstrap_server, self.settings.client_id)
        return self._write(self.base_dir / self.settings.config_path, content)
    
    def write_consumer(self, spec: ComponentSpec) -> Path:
        content = KafkaTemplates.consumer(spec, self.config_module)
        return self._write(self.consumer_path(spec), content)
    
    def write_producer(self, spec: ComponentSpec) -> Path:
        content = KafkaTemplates.producer(spec, self.config_module)
        return self._write(self.producer_path(spec), content)
    
    def _write(self, path: Path, content: str) -> Path:
        if path.exists():
            logger.warning(f"Overwriting existing file {path}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise ScaffoldWriteError(str(path), cause=e) from e
        
        logger.info(f"Generated {path}")
        return path
