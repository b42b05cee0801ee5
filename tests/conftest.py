"""Pytest configuration and fixtures."""

import pytest
from unittest.mock import Mock

from kafka_scaffold.models.container import ContainerDescriptor
from kafka_scaffold.providers.base import RuntimeProbe
from kafka_scaffold.services.topic_registry import TopicRegistry


@pytest.fixture
def registry_path(tmp_path):
    """Path of a registry file that does not exist yet."""
    return tmp_path / 'topics.txt'


@pytest.fixture
def registry(registry_path):
    """Topic registry backed by a temporary file."""
    return TopicRegistry(registry_path)


@pytest.fixture
def mock_probe():
    """Mock runtime probe reporting an absent container."""
    probe = Mock(spec=RuntimeProbe)
    probe.get_container.return_value = ContainerDescriptor(name='kafka-server')
    return probe


@pytest.fixture
def mock_docker_client():
    """Mock Docker client for testing."""
    mock_client = Mock()
    mock_client.containers = Mock()
    return mock_client


@pytest.fixture
def make_container():
    """Factory for mock Docker containers as returned by containers.list."""
    def _make(name, status):
        container = Mock()
        container.name = name
        container.status = status
        return container
    return _make
