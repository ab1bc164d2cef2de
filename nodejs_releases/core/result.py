"""Result type for explicit error handling.

Every fallible operation in this package returns ``Result[T, E]``: either
``Ok(value)`` or ``Err(error)``. Callers branch on the variant instead of
wrapping calls in try/except.

Usage:
    result = cache.get("4.9.1")
    if is_ok(result):
        print(result.value.v8)
    else:
        print(f"error: {result.error}")

    # Or with pattern matching
    match cache.list():
        case Ok(versions):
            print(versions[-1])
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeGuard, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")

__all__ = ["Ok", "Err", "Result", "is_ok", "is_err"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the contained value (``default`` is ignored)."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Apply ``f`` to the contained value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        """Return self; there is no error to transform."""
        return self

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain another fallible step on the contained value.

        Args:
            f: Function taking the value and returning a Result.

        Returns:
            Whatever ``f`` returns.
        """
        return f(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error payload (usually a frozen error dataclass).
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raise, since there is no value.

        Raises:
            ValueError: Always, carrying the error text.
        """
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        """Return ``default``."""
        return default

    def map(self, f: Callable[[T], U]) -> Err[E]:
        """Return self; there is no value to transform."""
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Apply ``f`` to the contained error.

        Used to wrap a low-level error (e.g. an ``HttpError``) into the
        error type of the calling layer while keeping it as the cause.
        """
        return Err(f(self.error))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Err[E]:
        """Return self; the chain stops at the first error."""
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard that narrows a Result to Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard that narrows a Result to Err."""
    return isinstance(result, Err)
