"""Leaf schemas: Primitive, Literal and the ready-made primitive instances."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from kestrel.result import Ok
from kestrel.schema.base import Schema, Validation, fail, runtime_type
from kestrel.schema.errors import EncodeError, ErrorCode

__all__ = [
    'Boolean',
    'False_',
    'Integer',
    'Literal',
    'Null',
    'Number',
    'Primitive',
    'String',
    'True_',
]


@dataclass(frozen=True, slots=True)
class Primitive[T](Schema[T, T]):
    """Schema accepting any value for which guard returns True.

    Attributes:
        guard: Predicate deciding whether a raw value has the right type.
        type_name: Name used in "Expected <type_name>" messages.
        encoder: Optional encode function; identity when None.
    """

    guard: Callable[[object], bool]
    type_name: str
    encoder: Callable[[T], T] | None = None

    def decode(self, data: object) -> Validation[T]:
        if self.guard(data):
            return Ok(data)  # type: ignore[arg-type]
        return fail(
            ErrorCode.INVALID_TYPE,
            f'Expected {self.type_name}, received {runtime_type(data)}',
            data,
        )

    def encode(self, value: T) -> T:
        if self.encoder is None:
            return value
        return self.encoder(value)


def _same_literal(data: object, literal: object) -> bool:
    return type(data) is type(literal) and data == literal


@dataclass(frozen=True, slots=True)
class Literal[T](Schema[T, T]):
    """Schema accepting exactly one value.

    Equality is strict: the type must match too, so Literal(1) rejects
    1.0 and True.
    """

    value: T

    def decode(self, data: object) -> Validation[T]:
        if _same_literal(data, self.value):
            return Ok(self.value)
        return fail(
            ErrorCode.INVALID_LITERAL,
            f'Expected {self.value!r}, received {data!r}',
            data,
        )

    def encode(self, value: T) -> T:
        if not _same_literal(value, self.value):
            msg = f'Cannot encode: Expected {self.value!r}, received {value!r}'
            raise EncodeError(msg)
        return value


def _is_number(a: Any) -> bool:
    return isinstance(a, int | float) and not isinstance(a, bool)


String: Primitive[str] = Primitive(lambda a: isinstance(a, str), 'str')
Number: Primitive[int | float] = Primitive(_is_number, 'number')
Integer: Primitive[int] = Primitive(lambda a: isinstance(a, int) and not isinstance(a, bool), 'int')
Boolean: Primitive[bool] = Primitive(lambda a: isinstance(a, bool), 'bool')
True_: Primitive[bool] = Primitive(lambda a: a is True, 'True')
False_: Primitive[bool] = Primitive(lambda a: a is False, 'False')
Null: Primitive[None] = Primitive(lambda a: a is None, 'None')
