"""Interpreter applying operation programs to signatures."""

from __future__ import annotations

from .handlers import OPERATION_HANDLERS
from .interpreter import Interpreter, decipher
from .state import SignatureState

__all__ = ["Interpreter", "OPERATION_HANDLERS", "SignatureState", "decipher"]
