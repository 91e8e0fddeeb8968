"""Composition utilities: pipe() and flow()."""

from kestrel.compose.pipe import flow, pipe

__all__ = [
    'flow',
    'pipe',
]
