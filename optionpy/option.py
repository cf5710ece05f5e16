from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar

from .logger import ConsoleLogger, default_logger

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


class OptionError(Exception):
    pass


class EmptyValueError(OptionError):
    def __init__(self, message: str = "Option.unwrap(): Unwrap of none value."):
        super().__init__(message); self.message = message


class NonEmptyValueError(OptionError):
    def __init__(self, message: str = "Option.unwrap_none(): Expected none."):
        super().__init__(message); self.message = message


class ExpectationError(OptionError):
    """Raised by ``expect``/``expect_none``; carries the caller's message verbatim."""
    def __init__(self, message: str):
        super().__init__(message); self.message = message


_SOME = "some"
_NONE = "none"


@dataclass(frozen=True, repr=False)
class Option(Generic[T]):
    """A value that may or may not be present.

    Exactly one of two variants, fixed at construction: ``Some(value)`` or
    ``NONE``. Presence is decided by the tag, never by the payload, so
    ``Some(0)``, ``Some("")`` and ``Some(None)`` are all present.
    """
    _kind: str
    _value: Any = None

    def __post_init__(self) -> None:
        if self._kind not in (_SOME, _NONE):
            raise ValueError(f"Option: unknown variant {self._kind!r}")
        if self._kind == _NONE and self._value is not None:
            raise ValueError(f"Option: none variant cannot carry a payload: {self._value!r}")

    @staticmethod
    def some(value: T) -> "Option[T]":
        return Option(_SOME, value)

    @staticmethod
    def none() -> "Option[Any]":
        return NONE

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._kind == _SOME else "NONE"

    def __iter__(self) -> Iterator[T]:
        if self._kind == _SOME:
            yield self._value

    # inspection

    def is_some(self) -> bool: return self._kind == _SOME
    def is_none(self) -> bool: return not self.is_some()

    def contains(self, x: Any) -> bool:
        return self.is_some() and self._value == x

    # unwrapping

    def unwrap(self) -> T:
        if self.is_some():
            return self._value
        raise EmptyValueError()

    def unwrap_none(self) -> None:
        if self.is_some():
            raise NonEmptyValueError()

    def unwrap_or(self, default: T) -> T:
        return self._value if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self._value if self.is_some() else f()

    def expect(self, msg: str) -> T:
        if self.is_some():
            return self._value
        raise ExpectationError(msg)

    def expect_none(self, msg: str) -> None:
        if self.is_some():
            raise ExpectationError(msg)

    def to_nullable(self) -> Optional[T]:
        return self._value if self.is_some() else None

    # combinators

    def or_(self, other: "Option[T]") -> "Option[T]":
        return self if self.is_some() else other

    def or_else(self, f: Callable[[], "Option[T]"]) -> "Option[T]":
        return self if self.is_some() else f()

    def and_(self, other: "Option[U]") -> "Option[U]":
        # result follows other's element type; own payload is dropped
        return other if self.is_some() else NONE

    def and_then(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self._value)
        return NONE

    def xor(self, other: "Option[T]") -> "Option[T]":
        if self.is_some() and other.is_none():
            return self
        if self.is_none() and other.is_some():
            return other
        return NONE

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self._value))
        return NONE

    def map_or(self, f: Callable[[T], U], default: U) -> U:
        return f(self._value) if self.is_some() else default

    def map_or_else(self, f: Callable[[T], U], default: Callable[[], U]) -> U:
        return f(self._value) if self.is_some() else default()

    def filter(self, p: Callable[[T], bool]) -> "Option[T]":
        if self.is_some() and p(self._value):
            return self
        return NONE

    def zip(self, other: "Option[U]") -> "Option[Tuple[T, U]]":
        if self.is_some() and other.is_some():
            return Some((self._value, other._value))
        return NONE

    def zip_with(self, other: "Option[U]", f: Callable[[T, U], V]) -> "Option[V]":
        if self.is_some() and other.is_some():
            return Some(f(self._value, other._value))
        return NONE

    def flatten(self) -> "Option[Any]":
        if self.is_none():
            return NONE
        if not isinstance(self._value, Option):
            raise TypeError(f"Option.flatten(): payload is not an Option: {self._value!r}")
        return self._value

    def trace(self, label: str, logger: Optional[ConsoleLogger] = None) -> "Option[T]":
        """Log this option at DEBUG under ``label`` and return it unchanged."""
        log = logger if logger is not None else default_logger()
        if self.is_some():
            log.debug(label, variant=_SOME, value=repr(self._value))
        else:
            log.debug(label, variant=_NONE)
        return self

    # aliases
    flat_map = and_then
    get_or_else = unwrap_or

    def __or__(self, other: Any) -> "Option[Any]":
        if not isinstance(other, Option):
            return NotImplemented
        return self.or_(other)

    def __and__(self, other: Any) -> "Option[Any]":
        if not isinstance(other, Option):
            return NotImplemented
        return self.and_(other)

    def __xor__(self, other: Any) -> "Option[Any]":
        if not isinstance(other, Option):
            return NotImplemented
        return self.xor(other)


def Some(value: T) -> Option[T]:
    return Option.some(value)


NONE: Option[Any] = Option(_NONE)


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE
