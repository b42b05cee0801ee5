"""Logging configuration and setup."""

import logging
import logging.handlers
import json
from typing import Dict, Any, Optional
from datetime import datetime, timezone
from kafka_scaffold.config import config, LoggingConfig


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }
        
        # Add extra fields if present
        if hasattr(record, 'container'):
            log_entry['container'] = record.container
        if hasattr(record, 'topic'):
            log_entry['topic'] = record.topic
        if hasattr(record, 'operation'):
            log_entry['operation'] = record.operation
            
        return json.dumps(log_entry)


class OperationLogger:
    """Records every state-changing operation against the runtime or registry."""
    
    def __init__(self):
        self.logger = logging.getLogger('kafka_scaffold.operations')
        
    def log_container_operation(self, container_name: str, operation: str,
                                details: Optional[Dict[str, Any]] = None):
        """Log container lifecycle operations."""
        extra = {
            'container': container_name,
            'operation': f"container_{operation}"
        }
        
        message = f"Container operation: {operation} on {container_name}"
        if details:
            message += f" - Details: {json.dumps(details)}"
            
        self.logger.info(message, extra=extra)
    
    def log_topic_operation(self, topic_name: str, operation: str,
                            details: Optional[Dict[str, Any]] = None):
        """Log topic registry and migration operations."""
        extra = {
            'topic': topic_name,
            'operation': f"topic_{operation}"
        }
        
        message = f"Topic operation: {operation} on topic {topic_name}"
        if details:
            message += f" - Details: {json.dumps(details)}"
            
        self.logger.info(message, extra=extra)


def setup_logging(settings: Optional[LoggingConfig] = None):
    """Set up logging configuration."""
    settings = settings or config.logging
    
    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.level.upper(), logging.INFO))
    
    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)
    
    # File handler if configured
    if settings.file_path:
        file_handler = logging.handlers.RotatingFileHandler(
            settings.file_path,
            maxBytes=settings.max_file_size,
            backupCount=settings.backup_count
        )
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)
    
    # Set specific logger levels
    logging.getLogger('kafka_scaffold').setLevel(logging.DEBUG)
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('docker').setLevel(logging.WARNING)


# Initialize operation logger
operation_logger = OperationLogger()
