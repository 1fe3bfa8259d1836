"""
Custom exceptions for the path search engine.

This module defines the hierarchy of custom exceptions used throughout the package
to handle the error conditions of building graphs, running searches and querying
their results. Each exception type corresponds to a specific category of errors
that may occur while a search instance is used.
"""


class ValidationError(Exception):
    """
    Raised when input validation fails.

    This exception is raised when a caller supplies data that cannot be used
    by the graph or the search engine.

    Examples:
        * Malformed graph documents
        * Non-numeric edge weights
        * Sentinel vertex used as a real vertex
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidVertexError(ValidationError, ValueError):
    """
    Raised when a vertex identifier is not acceptable for an operation.

    The sentinel identifier ``NO_VERTEX`` means "no vertex" and can never be
    the target of a path or an endpoint of an edge.

    Examples:
        * Requesting a path to the sentinel vertex
        * Adding an edge that starts or ends at the sentinel vertex
    """


class NegativeWeightError(ValidationError):
    """Raised when a negative or NaN edge weight is given to a graph."""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the graph or on search results
    encounter errors, such as missing paths or corrupted predecessor chains.

    Examples:
        * Path reconstruction to an unreached vertex
        * Predecessor cycles in a re-used store
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class UnreachableVertexError(GraphOperationError):
    """
    Raised when a path is requested to a vertex the search never reached.

    Unreached vertices keep an infinite distance and the sentinel predecessor,
    so there is no chain of predecessors to walk back to the source.
    """


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Invalid state transitions
        * Unsupported operations
    """


class SearchStateError(InvalidOperationError):
    """
    Raised when a search instance is used in the wrong state.

    Examples:
        * Querying distances before ``set_paths`` has run
        * Running ``set_paths`` twice on the same instance
        * Requesting a path to a vertex other than the fixed destination
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Vertex not found
        * Graph document not found
    """


class VertexNotFoundError(ResourceNotFoundError):
    """Raised when a requested vertex is not part of the graph."""


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Negative memory limits
        * Non-positive comparison tolerances
        * Unknown configuration keys
    """
