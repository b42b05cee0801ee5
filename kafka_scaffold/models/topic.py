"""Topic registry and migration models."""

from typing import List, Optional
from dataclasses import dataclass, field
from enum import Enum


@dataclass
class RegistryUpdate:
    """Result of merging new topic names into the registry."""
    topics: List[str]
    added: List[str] = field(default_factory=list)


class MigrationStatus(str, Enum):
    """Status of a migration run."""
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class MigrationResult:
    """Result of migrating the registry to the broker."""
    topics: List[str]
    created: List[str] = field(default_factory=list)
    status: MigrationStatus = MigrationStatus.SUCCEEDED
    failed_topic: Optional[str] = None
    error_message: Optional[str] = None
    
    @property
    def pending(self) -> List[str]:
        """Topics that were never attempted because an earlier one failed."""
        if self.failed_topic is None:
            return []
        index = self.topics.index(self.failed_topic)
        return self.topics[index + 1:]
    
    @property
    def success(self) -> bool:
        return self.status == MigrationStatus.SUCCEEDED
