"""
Result — a value on the success track or a FailureDescription on the failure track.

Stages return a Result instead of raising. `flat_map` joins stages: the first
Failure skips every later stage and comes out unchanged at the end.

    fetch ──Success──▶ parse ──Success──▶ reduce ──▶ Result[list[Team]]
      │                  │                  │
      └──── Failure ─────┴──── Failure ─────┴──────▶ (first Failure)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from railway.failure import ErrorCode, FailureDescription

T = TypeVar("T")
U = TypeVar("U")


class Result(Generic[T]):
    """
    Base of Success and Failure. Construct through the static factories:

        >>> Result.success([1, 2]).map(len).value()
        2
        >>> Result.failure(ErrorCode.VALIDATION_ERROR, "empty").map(len).is_failure()
        True
    """

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value(self) -> T:
        """The success value. Raises ValueError on a Failure."""
        if isinstance(self, Success):
            return self._value
        raise ValueError(f"Cannot get value from a Failure: {self.error().message}")

    def error(self) -> FailureDescription:
        """The failure description. Raises ValueError on a Success."""
        if isinstance(self, Failure):
            return self._error
        raise ValueError(f"Cannot get error from a Success: {self.value()!r}")

    # Transformations

    def map(self, mapper: Callable[[T], U]) -> Result[U]:
        """Apply `mapper` to a success value; a Failure passes through."""
        match self:
            case Success(v):
                return Success(mapper(v))
        return self  # type: ignore[return-value]

    def map_failure(
        self, mapper: Callable[[FailureDescription], FailureDescription]
    ) -> Result[T]:
        """Replace the description of a Failure; a Success passes through."""
        match self:
            case Failure(err):
                return Failure(mapper(err))
        return self

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """Continue with the next Result-returning stage, or keep the Failure."""
        match self:
            case Success(v):
                return mapper(v)
        return self  # type: ignore[return-value]

    # Side effects

    def peek(self, action: Callable[[T], Any]) -> Result[T]:
        """Run `action` on a success value (e.g. logging) and return self."""
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[FailureDescription], Any]) -> Result[T]:
        match self:
            case Failure(err):
                action(err)
        return self

    # Factories

    @staticmethod
    def success(value: T) -> Result[T]:
        return Success(value)

    @staticmethod
    def failure(
        code: ErrorCode,
        message: str,
        exception: Optional[BaseException] = None,
    ) -> Result[T]:
        return Failure(FailureDescription(code=code, message=message, exception=exception))

    @staticmethod
    def from_computation(
        computation: Callable[[], T],
        error_code: ErrorCode,
        error_message: str,
    ) -> Result[T]:
        """
        Run a computation that may raise; an Exception becomes a Failure
        carrying it as `exception`.

            Result.from_computation(lambda: int(text), ErrorCode.VALIDATION_ERROR, "not a number")
        """
        try:
            return Success(computation())
        except Exception as e:
            return Result.failure(error_code, error_message, e)

    @staticmethod
    def all_of(results: Iterable[Result[T]]) -> Result[list[T]]:
        """
        Collect the values of every Result, or return the first Failure.

        Iteration stops at that Failure, so with a generator the remaining
        Results are never computed:

            Result.all_of(Team.from_certificate(c) for c in certs)
        """
        values: list[T] = []
        for result in results:
            if isinstance(result, Failure):
                return Failure(result.error())
            values.append(result.value())
        return Success(values)


@dataclass(frozen=True, slots=True)
class Success(Result[T]):
    _value: T

    def __post_init__(self) -> None:
        if self._value is None:
            raise TypeError("Success value must not be None")

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


@dataclass(frozen=True, slots=True, eq=False)
class Failure(Result[T]):
    _error: FailureDescription

    def __post_init__(self) -> None:
        if self._error is None:
            raise TypeError("Failure error must not be None")

    def __repr__(self) -> str:
        return f"Failure({self._error.code.value}: {self._error.message!r})"

    # Two failures are equal when code and message match; timestamps differ.
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return (self._error.code, self._error.message) == (
                other._error.code,
                other._error.message,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._error.code, self._error.message))
