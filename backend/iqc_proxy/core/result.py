"""Result — explicit success/failure value for checks that must not raise.

Invariants:
    - A Result is either ok (has value) or err (has error), never both
    - Reading the wrong side raises ValueError instead of returning None

Design Decisions:
    - Frozen dataclass over a third-party monad: two constructors and two
      accessors are all the relay needs
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Result(Generic[T, E]):
    _value: Any = None
    _error: Any = None
    _is_ok: bool = True

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(_value=value, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(_error=error, _is_ok=False)

    @property
    def is_ok(self) -> bool:
        return self._is_ok

    @property
    def is_err(self) -> bool:
        return not self._is_ok

    @property
    def value(self) -> T:
        if not self._is_ok:
            raise ValueError("Called value on Result.err")
        return self._value

    @property
    def error(self) -> E:
        if self._is_ok:
            raise ValueError("Called error on Result.ok")
        return self._error
