"""Schema base class shared by every schema constructor."""

from __future__ import annotations

from typing import Any

import msgspec

from kestrel._logging import get_logger
from kestrel.result import Err, Result
from kestrel.schema.errors import ErrorCode, SchemaError, ValidationError

__all__ = ['Schema', 'Validation', 'runtime_type']

_logger = get_logger(__name__)

type Validation[A] = Result[A, tuple[ValidationError, ...]]


def runtime_type(value: object) -> str:
    """Runtime type name used in error messages."""
    if value is None:
        return 'None'
    return type(value).__name__


class Schema[I, O]:
    """Bidirectional description of a data shape.

    I is the encoded (wire) type and O the decoded (in-memory) type.
    Subclasses implement decode and encode; make, decode_json and
    encode_json are derived from them. Schemas are immutable and hold no
    state between calls, so one instance can be shared freely.
    """

    __slots__ = ()

    def decode(self, data: object) -> Validation[O]:
        """Validate untyped data, returning Ok(decoded) or Err(errors).

        Never raises for bad input; every failure found is reported.
        """
        raise NotImplementedError

    def encode(self, value: O) -> I:
        """Convert a decoded value back to its encoded shape.

        Raises:
            EncodeError: If the value does not fit the schema.
        """
        raise NotImplementedError

    def make(self, data: object) -> O:
        """Decode, raising instead of returning Err.

        Raises:
            SchemaError: Message is "Validation failed: " followed by every
                error as "path: message", comma-separated.
        """
        result = self.decode(data)
        if isinstance(result, Err):
            _logger.debug('schema_make_failed', schema=type(self).__name__, error_count=len(result.error))
            raise SchemaError(result.error)
        return result.value

    def decode_json(self, data: bytes | str) -> Validation[O]:
        """Parse a JSON document with msgspec, then decode it."""
        try:
            parsed = msgspec.json.decode(data)
        except msgspec.DecodeError as e:
            return Err((ValidationError(code=ErrorCode.INVALID_JSON.value, message=f'Invalid JSON: {e}', input=data),))
        return self.decode(parsed)

    def encode_json(self, value: O) -> bytes:
        """Encode value, then serialize the result to JSON bytes."""
        return msgspec.json.encode(self.encode(value))


def fail(code: ErrorCode, message: str, data: Any, path: tuple[str, ...] = ()) -> Validation[Any]:
    """Err holding a single ValidationError."""
    return Err((ValidationError(code=code.value, message=message, input=data, path=path),))
