"""Custom exception classes for Kafka Scaffold."""

import functools
from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for different types of failures."""
    
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    
    # Container runtime errors
    RUNTIME_UNAVAILABLE = "RUNTIME_UNAVAILABLE"
    RUNTIME_COMMAND_FAILED = "RUNTIME_COMMAND_FAILED"
    CONTAINER_NOT_FOUND = "CONTAINER_NOT_FOUND"
    
    # Topic registry and migration errors
    REGISTRY_NOT_FOUND = "REGISTRY_NOT_FOUND"
    TOPIC_CREATION_FAILED = "TOPIC_CREATION_FAILED"
    
    # Scaffolding errors
    SCAFFOLD_WRITE_FAILED = "SCAFFOLD_WRITE_FAILED"


class KafkaScaffoldError(Exception):
    """Base exception class for Kafka Scaffold."""
    
    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize the exception.
        
        Args:
            message: Human-readable error message
            error_code: Specific error code for the failure
            details: Additional context about the error
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }
        
        if self.cause:
            result['cause'] = str(self.cause)
        
        return result
    
    def __str__(self) -> str:
        """String representation of the exception."""
        base_str = f"{self.error_code.value}: {self.message}"
        
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base_str += f" ({details_str})"
        
        if self.cause:
            base_str += f" [caused by: {self.cause}]"
        
        return base_str


class ValidationError(KafkaScaffoldError):
    """Exception for invalid user input."""
    
    def __init__(self, message: str, field: Optional[str] = None, value: Optional[Any] = None):
        details = {}
        if field:
            details['field'] = field
        if value is not None:
            details['value'] = str(value)
        
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            details=details
        )


class ConfigurationError(KafkaScaffoldError):
    """Exception for configuration-related errors."""
    
    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {}
        if config_key:
            details['config_key'] = config_key
        
        super().__init__(
            message=message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details=details
        )


class ExternalQueryError(KafkaScaffoldError):
    """The container runtime or broker could not be queried or driven."""
    
    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.RUNTIME_COMMAND_FAILED,
        operation: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        details = {}
        if operation:
            details['operation'] = operation
        
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            cause=cause
        )


class TopicCreationError(ExternalQueryError):
    """The broker rejected or failed a topic creation request."""
    
    def __init__(self, topic_name: str, output: Optional[str] = None, cause: Optional[Exception] = None):
        message = f"Failed to create topic '{topic_name}'"
        if output:
            message += f": {output}"
        
        super().__init__(
            message=message,
            error_code=ErrorCode.TOPIC_CREATION_FAILED,
            operation='create_topic',
            cause=cause
        )
        self.topic_name = topic_name
        self.details['topic'] = topic_name


class PreconditionError(KafkaScaffoldError):
    """An operation was requested from a state that does not allow it."""


class ContainerNotFoundError(PreconditionError):
    """Exception when the broker container does not exist."""
    
    def __init__(self, container_name: str):
        super().__init__(
            message=f"Container '{container_name}' does not exist",
            error_code=ErrorCode.CONTAINER_NOT_FOUND,
            details={'container': container_name}
        )
        self.container_name = container_name


class RegistryNotFoundError(PreconditionError):
    """Exception when the topic registry file has not been written yet."""
    
    def __init__(self, registry_path: str):
        super().__init__(
            message=f"Topic registry '{registry_path}' does not exist, run kafka:topics first",
            error_code=ErrorCode.REGISTRY_NOT_FOUND,
            details={'path': registry_path}
        )


class ScaffoldWriteError(KafkaScaffoldError):
    """Exception when a generated source file cannot be written."""
    
    def __init__(self, path: str, cause: Optional[Exception] = None):
        super().__init__(
            message=f"Failed to write {path}",
            error_code=ErrorCode.SCAFFOLD_WRITE_FAILED,
            details={'path': path},
            cause=cause
        )


# Utility functions for error handling

def wrap_runtime_error(operation: str):
    """Decorator to wrap container runtime errors into ExternalQueryError."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except KafkaScaffoldError:
                raise
            except Exception as e:
                raise ExternalQueryError(
                    f"Container runtime operation '{operation}' failed",
                    operation=operation,
                    cause=e
                ) from e
        return wrapper
    return decorator
