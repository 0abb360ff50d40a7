"""Result — success value or classified error, never both."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from dirjson.domain.errors import CodingError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a resolve or decode operation.

    Attributes:
        value: The produced value when the operation succeeded.
        error: The classified failure when it did not.
    """

    value: T | None = None
    error: CodingError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: CodingError) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or_none(self) -> T | None:
        """Project to the value, discarding any error."""
        if self.error is not None:
            return None
        return self.value
