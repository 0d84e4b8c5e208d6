from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success value or failure message, used at the move-command boundary.

    Build instances with ``Result.success`` / ``Result.failure``.
    """
    is_success: bool
    _value: T | None = None
    error: str = ""

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(True, value, "")

    @classmethod
    def unit(cls) -> Result[None]:
        return cls(True, None, "")

    @classmethod
    def failure(cls, message: str) -> Result[T]:
        if not message:
            raise ValueError("Failure results need a message")
        return cls(False, None, message)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        if not self.is_success:
            raise RuntimeError(f"Cannot access value of failed result: {self.error}")
        return self._value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return self._value if self.is_success else default  # type: ignore[return-value]

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        if not self.is_success:
            return Result(False, None, self.error)
        return Result(True, fn(self._value), "")  # type: ignore[arg-type]

    def bind(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        if not self.is_success:
            return Result(False, None, self.error)
        return fn(self._value)  # type: ignore[arg-type]

    def on_success(self, fn: Callable[[T], None]) -> Result[T]:
        if self.is_success:
            fn(self._value)  # type: ignore[arg-type]
        return self

    def on_failure(self, fn: Callable[[str], None]) -> Result[T]:
        if not self.is_success:
            fn(self.error)
        return self

    def __str__(self) -> str:
        return f"Success({self._value})" if self.is_success else f"Failure({self.error})"
