"""Unit tests for domain exceptions."""

import pytest

from mindmaps.domain.exceptions import (
    ConfigurationError,
    MindMapError,
    NotFound,
    StorageFailure,
    Unauthenticated,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc_type",
    [Unauthenticated, NotFound, StorageFailure, ValidationError, ConfigurationError],
)
def test_exceptions_inherit_mindmap_error(exc_type: type) -> None:
    """Every domain exception is a MindMapError."""
    assert issubclass(exc_type, MindMapError)


def test_not_found_catchable_as_mindmap_error() -> None:
    """NotFound can be caught as MindMapError."""
    with pytest.raises(MindMapError):
        raise NotFound("MindMap", "Trip Plan")


def test_storage_failure_is_not_not_found() -> None:
    """Storage failures and absence are distinct kinds."""
    assert not issubclass(StorageFailure, NotFound)
    assert not issubclass(Unauthenticated, NotFound)


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    with pytest.raises(Unauthenticated, match="User not logged in"):
        raise Unauthenticated("User not logged in")
