"""kestrel: Result, Option, Effect and a schema codec for Python 3.13+.

Flat imports (preferred):
    from kestrel import Result, Ok, Err, Option, Some, Nothing, Effect
    from kestrel import safe, safe_async, pipe, flow

Submodule imports (for organization):
    from kestrel.result import Ok, Err, Result
    from kestrel.option import Some, Nothing, Option
    from kestrel.schema import Struct, List, String, transform
"""

from kestrel._config import Settings, get_settings, init

# Composition
from kestrel.compose import flow, pipe

# Decorators
from kestrel.decorators import safe, safe_async

# Effects
from kestrel.effect import Effect
from kestrel.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    from_nullable,
    some,
)
from kestrel.result import (
    Err,
    Ok,
    Result,
    and_then,
    collect,
    is_err,
    is_ok,
    map_err,
    map_ok,
    partition,
)

__all__ = [
    'Effect',
    # Result types
    'Err',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    # Settings
    'Settings',
    'Some',
    'and_then',
    'collect',
    'flow',
    'from_nullable',
    'get_settings',
    'init',
    'is_err',
    'is_ok',
    'map_err',
    'map_ok',
    'partition',
    'pipe',
    'safe',
    'safe_async',
    'some',
]
