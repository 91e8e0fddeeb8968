"""Schema engine: composable, bidirectional decoders/encoders.

Example:
    ```python
    from kestrel.schema import List, Literal, String, Struct

    User = Struct({
        'id': String,
        'permissions': Struct({'roles': List(Literal('admin'))}),
    })

    User.decode({'id': 'u1', 'permissions': {'roles': ['admin', 'user']}})
    # Err((ValidationError(code='invalid_literal', path=('permissions', 'roles', '1'), ...),))

    User.make({'id': 'u1'})
    # SchemaError: Validation failed: permissions: Required field permissions is missing
    ```
"""

from kestrel.schema.base import Schema, Validation
from kestrel.schema.composite import List, Struct
from kestrel.schema.errors import EncodeError, ErrorCode, SchemaError, ValidationError, format_errors
from kestrel.schema.primitives import (
    Boolean,
    False_,
    Integer,
    Literal,
    Null,
    Number,
    Primitive,
    String,
    True_,
)
from kestrel.schema.transforms import Refine, Transform, refine, transform

__all__ = [
    'Boolean',
    'EncodeError',
    'ErrorCode',
    'False_',
    'Integer',
    'List',
    'Literal',
    'Null',
    'Number',
    'Primitive',
    'Refine',
    'Schema',
    'SchemaError',
    'String',
    'Struct',
    'Transform',
    'True_',
    'Validation',
    'ValidationError',
    'format_errors',
    'refine',
    'transform',
]
