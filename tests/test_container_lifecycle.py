"""Tests for the container lifecycle manager."""

import pytest

from kafka_scaffold.config import ContainerConfig
from kafka_scaffold.exceptions import ContainerNotFoundError, ExternalQueryError, PreconditionError
from kafka_scaffold.models.container import ContainerDescriptor, ContainerState, LifecycleOutcome
from kafka_scaffold.services.container_lifecycle import ContainerLifecycleManager


@pytest.fixture
def manager(mock_probe):
    return ContainerLifecycleManager(mock_probe, ContainerConfig())


def _report(probe, exists, running):
    probe.get_container.return_value = ContainerDescriptor(
        name='kafka-server', exists=exists, running=running
    )


class TestCreate:
    """Test the create transition."""
    
    def test_create_when_absent(self, manager, mock_probe):
        result = manager.create()
        
        assert result.outcome == LifecycleOutcome.CREATED
        assert result.previous_state == ContainerState.ABSENT
        assert result.changed is True
        mock_probe.get_container.assert_called_once_with('kafka-server')
        mock_probe.create_container.assert_called_once()
        
        spec = mock_probe.create_container.call_args[0][0]
        assert spec.name == 'kafka-server'
        assert spec.image == 'apache/kafka:3.8.0'
        assert spec.ports == {9092: 9092}
        assert spec.environment == {'ALLOW_PLAINTEXT_LISTENER': 'yes'}
    
    @pytest.mark.parametrize('running,state', [
        (False, ContainerState.STOPPED),
        (True, ContainerState.RUNNING),
    ])
    def test_create_when_exists_is_noop(self, manager, mock_probe, running, state):
        _report(mock_probe, exists=True, running=running)
        
        result = manager.create()
        
        assert result.outcome == LifecycleOutcome.ALREADY_EXISTS
        assert result.previous_state == state
        assert result.changed is False
        mock_probe.create_container.assert_not_called()
        mock_probe.start_container.assert_not_called()
    
    def test_create_uses_configured_container(self, mock_probe):
        settings = ContainerConfig(name='broker', image='apache/kafka:3.9.0')
        mock_probe.get_container.return_value = ContainerDescriptor(name='broker')
        
        ContainerLifecycleManager(mock_probe, settings).create()
        
        mock_probe.get_container.assert_called_once_with('broker')
        spec = mock_probe.create_container.call_args[0][0]
        assert spec.name == 'broker'
        assert spec.image == 'apache/kafka:3.9.0'
    
    def test_create_requeries_state_every_time(self, manager, mock_probe):
        manager.create()
        _report(mock_probe, exists=True, running=True)
        
        result = manager.create()
        
        assert result.outcome == LifecycleOutcome.ALREADY_EXISTS
        assert mock_probe.get_container.call_count == 2
        assert mock_probe.create_container.call_count == 1
    
    def test_create_propagates_runtime_failure(self, manager, mock_probe):
        mock_probe.create_container.side_effect = ExternalQueryError("port is already allocated")
        
        with pytest.raises(ExternalQueryError, match='port is already allocated'):
            manager.create()


class TestStart:
    """Test the start transition."""
    
    def test_start_when_absent_is_rejected(self, manager, mock_probe):
        with pytest.raises(ContainerNotFoundError) as exc_info:
            manager.start()
        
        assert isinstance(exc_info.value, PreconditionError)
        assert 'does not exist' in str(exc_info.value)
        mock_probe.start_container.assert_not_called()
        mock_probe.create_container.assert_not_called()
    
    def test_start_when_running_is_noop(self, manager, mock_probe):
        _report(mock_probe, exists=True, running=True)
        
        result = manager.start()
        
        assert result.outcome == LifecycleOutcome.ALREADY_RUNNING
        assert result.changed is False
        mock_probe.start_container.assert_not_called()
    
    def test_start_when_stopped(self, manager, mock_probe):
        _report(mock_probe, exists=True, running=False)
        
        result = manager.start()
        
        assert result.outcome == LifecycleOutcome.STARTED
        assert result.previous_state == ContainerState.STOPPED
        mock_probe.start_container.assert_called_once_with('kafka-server')
    
    def test_start_propagates_probe_failure(self, manager, mock_probe):
        mock_probe.get_container.side_effect = ExternalQueryError("daemon unreachable")
        
        with pytest.raises(ExternalQueryError):
            manager.start()
        
        mock_probe.start_container.assert_not_called()


class TestDescribe:
    
    def test_describe_returns_fresh_descriptor(self, manager, mock_probe):
        _report(mock_probe, exists=True, running=False)
        
        assert manager.describe().state == ContainerState.STOPPED
