"""Interpreter running an operation program over one signature at a time."""

from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import ApplyError
from ..player_source import PlayerSource
from .handlers import OPERATION_HANDLERS
from .state import SignatureState


class Interpreter:
    """Apply the operation program of a :class:`PlayerSource` to signatures.

    The program itself is read-only; every call to :meth:`run` starts from a
    fresh :class:`SignatureState`, so one source can back any number of
    interpreters running side by side.
    """

    def __init__(self, source: PlayerSource, signature: str = "") -> None:
        self.source = source
        self.state = SignatureState.from_signature(signature)
        self.logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    def reset(self, signature: str) -> None:
        self.state = SignatureState.from_signature(signature)

    # ------------------------------------------------------------------
    def step(self) -> Optional[str]:
        """Execute the next operation and return the intermediate signature.

        ``None`` is returned once the program is exhausted.
        """
        state = self.state
        operations = self.source.operations
        if state.pc >= len(operations):
            return None

        op = operations[state.pc]
        handler = OPERATION_HANDLERS.get(op.kind)
        if handler is None:
            raise ApplyError(f"Unknown operation: {op!r}")

        handler(state, op)
        state.pc += 1
        text = state.text()
        self.logger.debug("applied %s -> %s", op, text)
        return text

    # ------------------------------------------------------------------
    def run(self, signature: str) -> str:
        """Decipher ``signature`` and return the result."""
        self.reset(signature)
        while self.step() is not None:
            pass
        return self.state.text()


def decipher(source: PlayerSource, signature: str) -> str:
    """Apply the program held by ``source`` to ``signature``."""

    return Interpreter(source).run(signature)


__all__ = ["Interpreter", "decipher"]
