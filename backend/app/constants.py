"""Application constants to avoid magic strings."""

from enum import Enum


class AssignmentStatus(str, Enum):
    """Lifecycle state of an asset.

    AVAILABLE and RECOVERED both allow assign and delete; only ASSIGNED
    allows recover. RECOVERED never goes back to AVAILABLE.
    """

    AVAILABLE = "AVAILABLE"
    ASSIGNED = "ASSIGNED"
    RECOVERED = "RECOVERED"


class ErrorKind(str, Enum):
    """Failure categories returned by the service layer."""

    INVALID_INPUT = "InvalidInput"  # Precondition failed before any lookup
    NOT_FOUND = "NotFound"  # Referenced asset, category or employee is missing
    INVALID_STATE = "InvalidState"  # Transition not allowed from current state
    DUPLICATE = "Duplicate"  # Unique constraint rejected by the store
