"""Derived schemas: transform() maps decoded values, refine() constrains them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from kestrel.decorators.safe import safe
from kestrel.result import Err, Ok
from kestrel.schema.base import Schema, Validation, fail
from kestrel.schema.errors import EncodeError, ErrorCode

__all__ = ['Refine', 'Transform', 'refine', 'transform']


@dataclass(frozen=True, slots=True)
class Transform[I, A, B](Schema[I, B]):
    """Schema that decodes with base and then converts with forward.

    Encoding runs backward and then the base encoder.
    """

    base: Schema[I, A]
    forward: Callable[[A], B]
    backward: Callable[[B], A]

    def decode(self, data: object) -> Validation[B]:
        result = self.base.decode(data)
        if isinstance(result, Err):
            return result

        match safe(self.forward)(result.value):
            case Ok(converted):
                return Ok(converted)
            case Err(exc):
                return fail(ErrorCode.TRANSFORM_ERROR, f'Transformation error: {exc}', result.value)

    def encode(self, value: B) -> I:
        try:
            return self.base.encode(self.backward(value))
        except Exception as e:
            msg = f'Encoding error: {e}'
            raise EncodeError(msg) from e


def transform[I, A, B](
    base: Schema[I, A],
    forward: Callable[[A], B],
    backward: Callable[[B], A],
) -> Transform[I, A, B]:
    """Build a schema converting base's decoded values in both directions.

    Args:
        base: Schema validating the raw shape.
        forward: Converts a decoded A into B. Exceptions become a single
            transform_error whose input is the pre-conversion value.
        backward: Converts B back to A before base encodes it.

    Example:
        ```python
        from datetime import date

        Day = transform(String, date.fromisoformat, date.isoformat)
        Day.decode('2024-02-29')  # Ok(value=datetime.date(2024, 2, 29))
        Day.encode(date(2024, 2, 29))  # '2024-02-29'
        ```
    """
    return Transform(base, forward, backward)


@dataclass(frozen=True, slots=True)
class Refine[I, O](Schema[I, O]):
    """Schema that decodes with base and then checks predicate."""

    base: Schema[I, O]
    predicate: Callable[[O], bool]
    message: str

    def decode(self, data: object) -> Validation[O]:
        result = self.base.decode(data)
        if isinstance(result, Err):
            return result

        match safe(self.predicate)(result.value):
            case Ok(passed) if passed:
                return result
            case Ok(_):
                return fail(ErrorCode.REFINEMENT_FAILED, self.message, result.value)
            case Err(exc):
                return fail(ErrorCode.REFINEMENT_FAILED, f'{self.message} ({exc})', result.value)

    def encode(self, value: O) -> I:
        return self.base.encode(value)


def refine[I, O](base: Schema[I, O], predicate: Callable[[O], bool], message: str) -> Refine[I, O]:
    """Narrow base to the values satisfying predicate.

    Example:
        ```python
        Port = refine(Integer, lambda p: 0 < p < 65536, 'Port out of range')
        Port.decode(70000)  # Err((ValidationError(code='refinement_failed', ...),))
        ```
    """
    return Refine(base, predicate, message)
