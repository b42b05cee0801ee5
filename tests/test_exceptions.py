"""Tests for the exception hierarchy."""

import pytest

from kafka_scaffold.exceptions import (
    ContainerNotFoundError,
    ErrorCode,
    ExternalQueryError,
    KafkaScaffoldError,
    PreconditionError,
    RegistryNotFoundError,
    TopicCreationError,
    wrap_runtime_error
)


class TestExceptions:
    
    def test_str_includes_code_details_and_cause(self):
        error = ExternalQueryError("exec failed", operation='create_topic', cause=RuntimeError("boom"))
        
        assert str(error) == (
            "RUNTIME_COMMAND_FAILED: exec failed (operation=create_topic) [caused by: boom]"
        )
    
    def test_to_dict(self):
        error = ContainerNotFoundError('kafka-server')
        
        assert error.to_dict() == {
            'error': 'CONTAINER_NOT_FOUND',
            'message': "Container 'kafka-server' does not exist",
            'details': {'container': 'kafka-server'}
        }
    
    def test_precondition_hierarchy(self):
        assert issubclass(ContainerNotFoundError, PreconditionError)
        assert issubclass(RegistryNotFoundError, PreconditionError)
        assert not issubclass(PreconditionError, ExternalQueryError)
    
    def test_topic_creation_error(self):
        error = TopicCreationError('orders', output='already exists')
        
        assert isinstance(error, ExternalQueryError)
        assert error.error_code == ErrorCode.TOPIC_CREATION_FAILED
        assert error.details == {'operation': 'create_topic', 'topic': 'orders'}
        assert error.message == "Failed to create topic 'orders': already exists"


class TestWrapRuntimeError:
    
    def test_wraps_foreign_exceptions(self):
        @wrap_runtime_error('inspect_container')
        def failing():
            raise ConnectionError("refused")
        
        with pytest.raises(ExternalQueryError) as exc_info:
            failing()
        
        assert isinstance(exc_info.value.cause, ConnectionError)
        assert exc_info.value.details['operation'] == 'inspect_container'
    
    def test_passes_own_exceptions_through(self):
        @wrap_runtime_error('create_topic')
        def failing():
            raise TopicCreationError('orders')
        
        with pytest.raises(TopicCreationError):
            failing()
    
    def test_returns_value(self):
        @wrap_runtime_error('noop')
        def ok():
            return 42
        
        assert ok() == 42
    
    def test_base_default_code(self):
        assert KafkaScaffoldError("x").error_code == ErrorCode.INTERNAL_ERROR
