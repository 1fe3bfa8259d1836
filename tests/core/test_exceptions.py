"""
Tests for custom exceptions.
"""

from waypoint.core.exceptions import (
    GraphOperationError,
    InvalidOperationError,
    InvalidVertexError,
    ResourceNotFoundError,
    SearchStateError,
    UnreachableVertexError,
    ValidationError,
    VertexNotFoundError,
)


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_invalid_vertex_is_value_error():
    error = InvalidVertexError("sentinel")
    assert isinstance(error, ValidationError)
    assert isinstance(error, ValueError)
    assert str(error) == "Validation Error: sentinel"


def test_hierarchy():
    assert issubclass(UnreachableVertexError, GraphOperationError)
    assert issubclass(SearchStateError, InvalidOperationError)
    assert issubclass(VertexNotFoundError, ResourceNotFoundError)
