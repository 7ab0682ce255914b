"""Result type returned by every service operation.

Services report domain failures (missing references, disallowed
transitions) as values instead of raising, so each caller has to look at
the outcome before using it:

    result = service.assign(asset_id, employee_id)
    if not result.success:
        ...  # result.error.kind / result.error.message
    asset = result.unwrap()
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from app.constants import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceError:
    """Why an operation failed."""

    kind: ErrorKind
    message: str


class ServiceResultError(Exception):
    """Raised by ServiceResult.unwrap() when called on a failed result."""

    def __init__(self, error: ServiceError):
        self.error = error
        super().__init__(f"{error.kind.value}: {error.message}")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Outcome of a service call: either a value or a ServiceError."""

    value: T | None = None
    error: ServiceError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "ServiceResult[T]":
        return cls(error=ServiceError(kind=kind, message=message))

    def unwrap(self) -> T:
        """Return the value, or raise ServiceResultError if the call failed."""
        if self.error is not None:
            raise ServiceResultError(self.error)
        return self.value
