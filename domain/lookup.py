"""Explicit result type for lookups whose "not found" outcome is expected."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from domain.errors import ServerError

T = TypeVar("T")


class LookupStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Outcome of fetching a single entity: found, not found, or failed for another reason."""

    status: LookupStatus
    value: T | None = None
    error: ServerError | None = None

    @classmethod
    def found(cls, value: T) -> "Lookup[T]":
        return cls(status=LookupStatus.FOUND, value=value)

    @classmethod
    def from_error(cls, error: ServerError) -> "Lookup[T]":
        status = LookupStatus.NOT_FOUND if error.is_not_found else LookupStatus.FAILED
        return cls(status=status, error=error)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def is_missing(self) -> bool:
        return self.status is LookupStatus.NOT_FOUND

    def unwrap(self) -> T:
        """Return the value, or re-raise the server error that prevented the lookup."""
        if self.status is LookupStatus.FOUND:
            return self.value  # type: ignore[return-value]
        if self.error is None:
            raise RuntimeError(f"Lookup in state {self.status.value} carries no error")
        raise self.error
