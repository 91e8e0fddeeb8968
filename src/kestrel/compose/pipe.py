"""pipe() and flow() for threading values through Result/Option steps."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kestrel.option import NothingType, Some, from_nullable
from kestrel.result import Err, Ok

__all__ = ['flow', 'pipe']


def _is_container(value: object) -> bool:
    return isinstance(value, Ok | Err | Some | NothingType)


def _step(current: Any, fn: Callable[[Any], Any]) -> Any:
    """Apply one step, re-wrapping plain returns in the input's container."""
    if isinstance(current, Some):
        out = fn(current.value)
        return out if _is_container(out) else from_nullable(out)

    out = fn(current.value)
    return out if _is_container(out) else Ok(out)


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread a value through functions, left to right.

    A plain initial value is lifted into Ok. Each function receives the
    unwrapped value of the previous step. Err and Nothing short-circuit.
    A function returning a Result or Option is used as-is; any other return
    is wrapped in the container of the step's input (Ok, or Some with None
    collapsing to Nothing).

    Example:
        ```python
        pipe(5, lambda x: x + 1, lambda x: x * 2)
        # Ok(value=12)

        pipe(Some(' Ada '), str.strip, str.upper)
        # Some(value='ADA')

        pipe(5, lambda x: Err('fail'), lambda x: x + 1)
        # Err(error='fail')
        ```
    """
    current = value if _is_container(value) else Ok(value)
    for fn in fns:
        if isinstance(current, Err | NothingType):
            return current
        current = _step(current, fn)
    return current


def flow(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions into one that pipes its argument through them.

    Example:
        ```python
        normalize = flow(str.strip, str.lower)
        normalize('  Ada ')  # Ok(value='ada')
        ```
    """

    def composed(value: Any) -> Any:
        return pipe(value, *fns)

    return composed
