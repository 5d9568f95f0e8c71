"""Mutable state of a single descrambling run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class SignatureState:
    """Runtime state for :class:`~descrambler.vm.interpreter.Interpreter`.

    ``chars`` holds the signature being transformed and ``pc`` the index of
    the next operation to execute.
    """

    chars: List[str] = field(default_factory=list)
    pc: int = 0

    @classmethod
    def from_signature(cls, signature: str) -> "SignatureState":
        return cls(chars=list(signature))

    def text(self) -> str:
        return "".join(self.chars)


__all__ = ["SignatureState"]
