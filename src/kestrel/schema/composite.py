"""Container schemas: Struct and List.

Both accumulate errors: every field or element is decoded even after a
failure, and nested error paths are prefixed with the enclosing key or
index so they read root-to-leaf.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from kestrel.result import Err, Ok
from kestrel.schema.base import Schema, Validation, fail, runtime_type
from kestrel.schema.errors import ErrorCode, ValidationError

__all__ = ['List', 'Struct']


@dataclass(frozen=True, slots=True)
class Struct(Schema[dict[str, Any], dict[str, Any]]):
    """Schema for a mapping with a fixed set of required fields.

    Keys in the input that are not declared are ignored and dropped from the
    decoded dict.

    Example:
        ```python
        User = Struct({'id': String, 'roles': List(Literal('admin'))})
        User.decode({'id': 'u1', 'roles': ['admin'], 'extra': 1})
        # Ok(value={'id': 'u1', 'roles': ['admin']})
        ```
    """

    fields: Mapping[str, Schema[Any, Any]]

    def __post_init__(self) -> None:
        # Snapshot so later changes to the caller's dict cannot alter the schema.
        object.__setattr__(self, 'fields', MappingProxyType(dict(self.fields)))

    def decode(self, data: object) -> Validation[dict[str, Any]]:
        if not isinstance(data, Mapping):
            return fail(ErrorCode.INVALID_TYPE, f'Expected mapping, received {runtime_type(data)}', data)

        decoded: dict[str, Any] = {}
        errors: list[ValidationError] = []

        for key, schema in self.fields.items():
            if key not in data:
                errors.append(
                    ValidationError(
                        code=ErrorCode.REQUIRED.value,
                        message=f'Required field {key} is missing',
                        input=None,
                        path=(key,),
                    )
                )
                continue

            match schema.decode(data[key]):
                case Ok(value):
                    decoded[key] = value
                case Err(nested):
                    errors.extend(err.prefixed(key) for err in nested)

        if errors:
            return Err(tuple(errors))
        return Ok(decoded)

    def encode(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return {key: schema.encode(value[key]) for key, schema in self.fields.items() if key in value}


@dataclass(frozen=True, slots=True)
class List[I, O](Schema[list[I], list[O]]):
    """Schema for a list or tuple whose elements all match item."""

    item: Schema[I, O]

    def decode(self, data: object) -> Validation[list[O]]:
        if not isinstance(data, list | tuple):
            return fail(ErrorCode.INVALID_TYPE, f'Expected list, received {runtime_type(data)}', data)

        decoded: list[O] = []
        errors: list[ValidationError] = []

        for index, element in enumerate(data):
            match self.item.decode(element):
                case Ok(value):
                    decoded.append(value)
                case Err(nested):
                    errors.extend(err.prefixed(str(index)) for err in nested)

        if errors:
            return Err(tuple(errors))
        return Ok(decoded)

    def encode(self, value: Iterable[O]) -> list[I]:
        return [self.item.encode(element) for element in value]
