"""Persisted, ordered, duplicate-free registry of topic names."""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Union

from kafka_scaffold.exceptions import RegistryNotFoundError, ValidationError
from kafka_scaffold.logging_config import operation_logger
from kafka_scaffold.models.topic import RegistryUpdate

logger = logging.getLogger(__name__)


def parse_topic_input(raw: str) -> List[str]:
    """Split a comma-separated string into trimmed, non-empty topic names."""
    return [name.strip() for name in raw.split(',') if name.strip()]


class TopicRegistry:
    """Topic names persisted one per line in a flat text file.
    
    Insertion order is significant and survives merges. The file is always
    replaced as a whole, never appended to.
    """
    
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
    
    def exists(self) -> bool:
        return self.path.is_file()
    
    def load(self) -> List[str]:
        """Read the registry; a missing file is an empty registry."""
        if not self.exists():
            logger.debug(f"Registry {self.path} does not exist yet")
            return []
        
        content = self.path.read_text(encoding='utf-8')
        return [line.strip() for line in content.splitlines() if line.strip()]
    
    def load_required(self) -> List[str]:
        """Read the registry, failing if it has never been written."""
        if not self.exists():
            raise RegistryNotFoundError(str(self.path))
        return self.load()
    
    @staticmethod
    def merge(existing: Iterable[str], incoming: Iterable[str]) -> List[str]:
        """Stable set union: existing entries first, then unseen incoming ones."""
        merged = []
        seen = set()
        
        for sources in (existing, incoming):
            for topic in sources:
                if topic and topic not in seen:
                    seen.add(topic)
                    merged.append(topic)
        
        return merged
    
    def save(self, topics: List[str]) -> None:
        """Replace the registry file with topics, one per line."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = '\n'.join(topics)
        
        # Rename over the target so readers never see a half-written file
        fd, tmp_name = tempfile.mkstemp(
            prefix=f'.{self.path.name}.', suffix='.tmp', dir=str(self.path.parent)
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        
        logger.info(f"Saved {len(topics)} topics to {self.path}")
    
    def _file_mode(self) -> int:
        """Mode for the saved file: keep the current one, else the umask default."""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
    
    def add(self, topics: Union[str, Iterable[str]]) -> RegistryUpdate:
        """Merge new topic names into the persisted registry."""
        if isinstance(topics, str):
            incoming = parse_topic_input(topics)
        else:
            incoming = [t.strip() for t in topics if t and t.strip()]
        
        if not incoming:
            raise ValidationError("No topic names provided", field='topics')
        
        existing = self.load()
        merged = self.merge(existing, incoming)
        known = set(existing)
        added = [t for t in merged if t not in known]
        
        self.save(merged)
        
        for topic in added:
            operation_logger.log_topic_operation(topic, 'register', {'registry': str(self.path)})
        
        return RegistryUpdate(topics=merged, added=added)
