"""Result type returned by the public conversion functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from imperial_dating._errors import ConversionError

T = TypeVar("T")


@dataclass(frozen=True)
class ConversionResult(Generic[T]):
    """Either a converted value or the error that prevented conversion.

    A failed result is falsy, so ``if result:`` distinguishes failure from
    any legitimate value (including a zero timestamp).
    """

    value: T | None = None
    error: ConversionError | None = None

    @classmethod
    def success(cls, value: T) -> ConversionResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ConversionError) -> ConversionResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
