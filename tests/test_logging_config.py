"""Tests for logging setup."""

import json
import logging

from kafka_scaffold.config import LoggingConfig
from kafka_scaffold.logging_config import JSONFormatter, OperationLogger, setup_logging


class TestJSONFormatter:
    
    def test_format_includes_extras(self):
        record = logging.LogRecord(
            'kafka_scaffold.operations', logging.INFO, __file__, 10,
            'Topic operation: create on topic orders', None, None
        )
        record.topic = 'orders'
        record.operation = 'topic_create'
        
        entry = json.loads(JSONFormatter().format(record))
        
        assert entry['level'] == 'INFO'
        assert entry['logger'] == 'kafka_scaffold.operations'
        assert entry['message'] == 'Topic operation: create on topic orders'
        assert entry['topic'] == 'orders'
        assert entry['operation'] == 'topic_create'
        assert 'container' not in entry


class TestOperationLogger:
    
    def test_log_container_operation(self, caplog):
        with caplog.at_level(logging.INFO, logger='kafka_scaffold.operations'):
            OperationLogger().log_container_operation('kafka-server', 'start', {'image': 'x'})
        
        record = caplog.records[-1]
        assert record.container == 'kafka-server'
        assert record.operation == 'container_start'
        assert 'Details: {"image": "x"}' in record.getMessage()


class TestSetupLogging:
    
    def test_setup_logging_with_file(self, tmp_path):
        root = logging.getLogger()
        saved_handlers = root.handlers[:]
        saved_level = root.level
        log_file = tmp_path / 'scaffold.log'
        
        try:
            setup_logging(LoggingConfig(level='WARNING', file_path=str(log_file)))
            
            assert root.level == logging.WARNING
            assert len(root.handlers) == 2
            assert all(isinstance(h.formatter, JSONFormatter) for h in root.handlers)
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
                handler.close()
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
