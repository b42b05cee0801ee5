"""Broker container models."""

from pydantic import BaseModel, Field
from typing import Dict
from dataclasses import dataclass
from enum import Enum


class ContainerState(str, Enum):
    """Observable container states."""
    ABSENT = "absent"
    STOPPED = "stopped"
    RUNNING = "running"


class ContainerSpec(BaseModel):
    """What to run when the broker container is created."""
    name: str = Field(..., description="Container name", min_length=1)
    image: str = Field(..., description="Image reference", min_length=1)
    ports: Dict[int, int] = Field(default_factory=dict, description="Host port to container port")
    environment: Dict[str, str] = Field(default_factory=dict, description="Environment variables")


class ContainerDescriptor(BaseModel):
    """Point-in-time view of a container as reported by the runtime.
    
    Never cached: callers query a fresh descriptor before every transition.
    """
    name: str = Field(..., description="Container name")
    exists: bool = Field(default=False, description="Container exists in any state")
    running: bool = Field(default=False, description="Container is currently running")
    
    @property
    def state(self) -> ContainerState:
        if not self.exists:
            return ContainerState.ABSENT
        if self.running:
            return ContainerState.RUNNING
        return ContainerState.STOPPED


class LifecycleOutcome(str, Enum):
    """What a lifecycle command ended up doing."""
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    STARTED = "started"
    ALREADY_RUNNING = "already_running"


@dataclass
class LifecycleResult:
    """Result of a lifecycle command."""
    container_name: str
    outcome: LifecycleOutcome
    previous_state: ContainerState
    
    @property
    def changed(self) -> bool:
        """Whether an action was dispatched to the runtime."""
        return self.outcome in (LifecycleOutcome.CREATED, LifecycleOutcome.STARTED)
