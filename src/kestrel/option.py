"""Option type: Some[T] | Nothing for values that may be absent.

A Some never wraps None. Use some() or from_nullable() to build an Option
from a value that may be None; both normalize None to Nothing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

if TYPE_CHECKING:
    from kestrel.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_nullable', 'some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a non-None value of type T.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(42).map(lambda _: None)
        NothingType()
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            msg = 'Some cannot wrap None; use from_nullable() instead'
            raise TypeError(msg)

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def map[U](self, f: Callable[[T], U | None]) -> Some[U] | NothingType:
        """Apply f to the contained value.

        Returns:
            Nothing if f returns None, otherwise Some of its result.
        """
        return from_nullable(f(self.value))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply an Option-returning function to the contained value."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value only when predicate(value) is true."""
        if predicate(self.value):
            return self
        return Nothing

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[], T]) -> T:
        """Return the contained value without calling the fallback."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def ok_or(self, _err: Any) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from kestrel.result import Ok

        return Ok(self.value)

    def ok_or_else(self, _f: Callable[[], Any]) -> Ok[T]:
        """Convert to Result without calling the error factory."""
        from kestrel.result import Ok

        return Ok(self.value)

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Pair two Some values; Nothing if other is Nothing."""
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing an absent value.

    Use the `Nothing` singleton rather than instantiating this class.
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing; f is never called."""
        return self

    def and_then(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing; f is never called."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to test."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the Option produced by f."""
        return f()

    def unwrap(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Call the fallback thunk and return its result."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(msg)

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from kestrel.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error lazily."""
        from kestrel.result import Err

        return Err(f())

    def zip(self, _other: Any) -> NothingType:
        """Return Nothing."""
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def from_nullable[T](value: T | None) -> Option[T]:
    """Build an Option from a value that may be None.

    Examples:
        >>> from_nullable(3)
        Some(value=3)
        >>> from_nullable(None)
        NothingType()
    """
    if value is None:
        return Nothing
    return Some(value)


some = from_nullable
