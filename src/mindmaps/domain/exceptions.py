"""Domain exceptions."""


class MindMapError(Exception):
    """Base exception for mindmaps."""

    pass


class Unauthenticated(MindMapError):
    """No authenticated user is available for the operation."""

    pass


class NotFound(MindMapError):
    """Requested mind map was not found."""

    pass


class StorageFailure(MindMapError):
    """Reading or writing the backing storage failed."""

    pass


class ValidationError(MindMapError):
    """Validation failed for input data."""

    pass


class ConfigurationError(MindMapError):
    """Required configuration is missing or invalid."""

    pass
