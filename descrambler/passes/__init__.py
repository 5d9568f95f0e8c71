"""Pass modules orchestrated by :mod:`descrambler.pipeline`."""

from __future__ import annotations

from . import (
    entry_point,
    function_body,
    statements,
    classify,
    sequence,
)

__all__ = [
    "entry_point",
    "function_body",
    "statements",
    "classify",
    "sequence",
]
