"""Result type: Ok[T] | Err[E] for explicit error handling.

Example:
    ```python
    from kestrel.result import Err, Ok

    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Err(f'not a number: {raw!r}')
        return Ok(int(raw))

    parse_port('8080').map(lambda p: p + 1)  # Ok(value=8081)
    parse_port('http').map(lambda p: p + 1)  # Err(error="not a number: 'http'")
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

if TYPE_CHECKING:
    from kestrel.option import Option

__all__ = [
    'Err',
    'Ok',
    'Result',
    'and_then',
    'collect',
    'is_err',
    'is_ok',
    'map_err',
    'map_ok',
    'partition',
]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).map(lambda x: x * 2)
        Ok(value=84)
        >>> Ok(42).unwrap()
        42
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply f to the contained value and wrap the outcome in Ok."""
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a Result-returning function to the contained value.

        Also known as chain, flatMap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the value for its side effects and return self."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok holds no error.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[Any], T]) -> T:
        """Return the contained value without calling the fallback."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value) unless the value is None."""
        from kestrel.option import from_nullable

        return from_nullable(self.value)

    def err(self) -> Option[Any]:
        """Convert to Option, returning Nothing since this is Ok."""
        from kestrel.option import Nothing

        return Nothing


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an error of type E.

    Examples:
        >>> Err('boom').map(lambda x: x * 2)
        Err(error='boom')
        >>> Err('boom').unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply f to the contained error and wrap the outcome in Err."""
        return Err(f(self.error))

    def and_then(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err; f is never called."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Recover from the error with a Result-returning function."""
        return f(self.error)

    def inspect(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error for its side effects and return self."""
        f(self.error)
        return self

    def unwrap(self) -> NoReturn:
        """Raise since Err holds no value.

        Raises:
            RuntimeError: Always, mentioning the contained error.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback from the error."""
        return f(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            RuntimeError: Always, with the message and the contained error.
        """
        raise RuntimeError(f'{msg}: {self.error!r}')

    def ok(self) -> Option[Any]:
        """Convert to Option, returning Nothing since this is Err."""
        from kestrel.option import Nothing

        return Nothing

    def err(self) -> Option[E]:
        """Convert to Option, returning Some(error) unless the error is None."""
        from kestrel.option import from_nullable

        return from_nullable(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]


def is_ok[T, E](r: Result[T, E]) -> TypeIs[Ok[T]]:
    """Return True if r is Ok."""
    return isinstance(r, Ok)


def is_err[T, E](r: Result[T, E]) -> TypeIs[Err[E]]:
    """Return True if r is Err."""
    return isinstance(r, Err)


def map_ok[T, U, E](r: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Function form of Result.map."""
    return r.map(f)


def map_err[T, E, F](r: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Function form of Result.map_err."""
    return r.map_err(f)


def and_then[T, U, E](r: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Function form of Result.and_then."""
    return r.and_then(f)


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def partition[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split Results into their Ok values and Err errors, keeping order.

    Unlike collect, every element is inspected.

    Examples:
        >>> partition([Ok(1), Err('a'), Ok(2), Err('b')])
        ([1, 2], ['a', 'b'])
    """
    oks: list[T] = []
    errs: list[E] = []
    for result in results:
        if isinstance(result, Ok):
            oks.append(result.value)
        else:
            errs.append(result.error)
    return oks, errs
