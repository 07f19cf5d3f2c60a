"""
appcontext.option

Purpose:
    Two-variant result type (Some(value) | NOTHING) returned by every context read.
    Absence is a first-class outcome; callers pick a fallback explicitly.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

from appcontext.errors import UnwrapError

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """
    Base for Some / Nothing. Use Option.of() to lift a possibly-None value.
    """

    __slots__ = ()

    @staticmethod
    def of(value: T | None) -> "Option[T]":
        if value is None:
            return NOTHING
        return Some(value)

    def is_some(self) -> bool:
        raise NotImplementedError

    def is_none(self) -> bool:
        return not self.is_some()

    def unwrap(self) -> T:
        raise NotImplementedError

    def unwrap_or(self, default: T) -> T:
        raise NotImplementedError

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        raise NotImplementedError

    def map(self, fn: Callable[[T], U]) -> "Option[U]":
        raise NotImplementedError

    def __bool__(self) -> bool:
        return self.is_some()


class Some(Option[T]):
    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def is_some(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:
        return self._value

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return self._value

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        return Option.of(fn(self._value))

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Some) and other._value == self._value

    def __hash__(self) -> int:
        return hash(("Some", self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class _Nothing(Option[Any]):
    __slots__ = ()

    def is_some(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise UnwrapError("called unwrap() on NOTHING")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return fn()

    def map(self, fn: Callable[[Any], U]) -> Option[U]:
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, _Nothing)

    def __hash__(self) -> int:
        return hash("NOTHING")

    def __repr__(self) -> str:
        return "NOTHING"


# Singleton; compare with `is NOTHING` or `.is_none()`.
NOTHING: Option[Any] = _Nothing()
