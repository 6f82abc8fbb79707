"""Result type for expected failures (not found, validation, hierarchy checks)."""
from dataclasses import dataclass
from typing import Generic, TypeVar, Optional, Callable, Any

from .exceptions import DomainException

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=DomainException)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Container for a success value or a domain error.

    Unexpected faults (storage down, integrity errors) are never wrapped;
    they propagate as ordinary exceptions.
    """

    _value: Optional[T] = None
    _error: Optional[E] = None

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        """Return the value, re-raising the carried error on failure."""
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]

    @property
    def error(self) -> Optional[E]:
        return self._error

    @classmethod
    def success(cls, value: T) -> "Result[T, E]":
        return cls(_value=value)

    @classmethod
    def failure(cls, error: E) -> "Result[T, E]":
        return cls(_error=error)

    def value_or(self, default: Any) -> Any:
        return default if self.is_failure else self._value

    def map(self, func: Callable[[T], U]) -> "Result[U, E]":
        if self.is_success:
            return Result.success(func(self._value))  # type: ignore[arg-type]
        return Result.failure(self._error)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        if self.is_failure:
            return f"Result.failure({self._error!r})"
        return f"Result.success({self._value!r})"
