"""Container runtime providers."""

from .base import RuntimeProbe
from .docker_provider import DockerProvider

__all__ = [
    'RuntimeProbe',
    'DockerProvider'
]
