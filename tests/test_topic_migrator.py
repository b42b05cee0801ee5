"""Tests for the topic migrator."""

import logging
import pytest
from unittest.mock import call

from kafka_scaffold.exceptions import (
    ExternalQueryError,
    PreconditionError,
    RegistryNotFoundError,
    TopicCreationError
)
from kafka_scaffold.models.topic import MigrationStatus
from kafka_scaffold.services.topic_migrator import TopicMigrator


@pytest.fixture
def migrator(registry, mock_probe):
    return TopicMigrator(registry, mock_probe, 'kafka-server', 'localhost:9092')


class TestTopicMigrator:
    """Test cases for TopicMigrator."""
    
    def test_migrate_without_registry(self, migrator, mock_probe):
        """Test that a missing registry fails before any broker action."""
        with pytest.raises(RegistryNotFoundError) as exc_info:
            migrator.migrate()
        
        assert isinstance(exc_info.value, PreconditionError)
        mock_probe.create_topic.assert_not_called()
    
    def test_migrate_creates_topics_in_order(self, migrator, registry, mock_probe):
        registry.save(['orders', 'payments', 'refunds'])
        
        result = migrator.migrate()
        
        assert result.status == MigrationStatus.SUCCEEDED
        assert result.success is True
        assert result.created == ['orders', 'payments', 'refunds']
        assert result.pending == []
        assert mock_probe.create_topic.call_args_list == [
            call('kafka-server', 'orders', 'localhost:9092'),
            call('kafka-server', 'payments', 'localhost:9092'),
            call('kafka-server', 'refunds', 'localhost:9092'),
        ]
    
    def test_migrate_halts_at_first_failure(self, migrator, registry, mock_probe):
        registry.save(['orders', 'payments'])
        mock_probe.create_topic.side_effect = TopicCreationError('orders', output='broker not available')
        
        result = migrator.migrate()
        
        mock_probe.create_topic.assert_called_once_with('kafka-server', 'orders', 'localhost:9092')
        assert result.status == MigrationStatus.FAILED
        assert result.failed_topic == 'orders'
        assert result.created == []
        assert result.pending == ['payments']
        assert 'broker not available' in result.error_message
    
    def test_migrate_failure_midway(self, migrator, registry, mock_probe):
        registry.save(['orders', 'payments', 'refunds'])
        mock_probe.create_topic.side_effect = [
            None,
            ExternalQueryError("exec failed"),
            None
        ]
        
        result = migrator.migrate()
        
        assert mock_probe.create_topic.call_count == 2
        assert result.created == ['orders']
        assert result.failed_topic == 'payments'
        assert result.pending == ['refunds']
    
    def test_migrate_failure_is_logged_once(self, migrator, registry, mock_probe, caplog):
        registry.save(['orders', 'payments'])
        mock_probe.create_topic.side_effect = TopicCreationError('orders')
        
        with caplog.at_level(logging.ERROR, logger='kafka_scaffold.services.topic_migrator'):
            migrator.migrate()
        
        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert 'orders' in errors[0].getMessage()
    
    def test_migrate_empty_registry(self, migrator, registry, mock_probe):
        registry.save([])
        
        result = migrator.migrate()
        
        assert result.success is True
        assert result.topics == []
        mock_probe.create_topic.assert_not_called()
    
    def test_rerun_attempts_every_topic_again(self, migrator, registry, mock_probe):
        registry.save(['orders', 'payments'])
        mock_probe.create_topic.side_effect = [None, ExternalQueryError("timeout")]
        migrator.migrate()
        
        mock_probe.create_topic.side_effect = None
        mock_probe.create_topic.reset_mock()
        result = migrator.migrate()
        
        assert result.created == ['orders', 'payments']
        assert mock_probe.create_topic.call_count == 2
    
    def test_migrate_does_not_modify_registry(self, migrator, registry, registry_path, mock_probe):
        registry.save(['orders', 'payments'])
        mock_probe.create_topic.side_effect = TopicCreationError('orders')
        
        migrator.migrate()
        
        assert registry_path.read_text(encoding='utf-8') == 'orders\npayments'
