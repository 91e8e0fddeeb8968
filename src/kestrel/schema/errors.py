"""Schema error types: ValidationError struct plus the exceptions raised by make/encode."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Any

import msgspec

__all__ = [
    'EncodeError',
    'ErrorCode',
    'SchemaError',
    'ValidationError',
    'format_errors',
]


class ErrorCode(StrEnum):
    """Kinds of decode failure."""

    INVALID_TYPE = 'invalid_type'
    INVALID_LITERAL = 'invalid_literal'
    REQUIRED = 'required'
    TRANSFORM_ERROR = 'transform_error'
    REFINEMENT_FAILED = 'refinement_failed'
    INVALID_JSON = 'invalid_json'


class ValidationError(msgspec.Struct, frozen=True):
    """One decode failure - struct variant carried by Err.

    Attributes:
        code: Failure kind, one of the ErrorCode values.
        message: Human-readable description.
        input: The offending raw value.
        path: Keys and list indices from the root to the failure, outermost first.
    """

    code: str
    message: str
    input: Any = None
    path: tuple[str, ...] = ()

    def prefixed(self, segment: str) -> ValidationError:
        """Return a copy with segment prepended to the path."""
        return msgspec.structs.replace(self, path=(segment, *self.path))

    def describe(self) -> str:
        """Render as "a.b: message", or just the message for an empty path."""
        if self.path:
            return f'{".".join(self.path)}: {self.message}'
        return self.message

    def to_exception(self) -> SchemaError:
        """Convert to exception for raise-based code."""
        return SchemaError((self,))


def format_errors(errors: Iterable[ValidationError]) -> str:
    """Join errors into the comma-separated form used by Schema.make."""
    return ', '.join(err.describe() for err in errors)


class SchemaError(ValueError):
    """Decoding failed - exception variant raised by Schema.make.

    Attributes:
        errors: Every ValidationError found, in traversal order.
    """

    def __init__(self, errors: tuple[ValidationError, ...]) -> None:
        self.errors = errors
        super().__init__(f'Validation failed: {format_errors(errors)}')

    def to_structs(self) -> tuple[ValidationError, ...]:
        """Convert back to structs for Result-based code."""
        return self.errors


class EncodeError(ValueError):
    """A value could not be encoded back to its wire shape."""
