"""Immutable container for a parsed descrambling program."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from .operations import Operation


@dataclass(frozen=True)
class PlayerSource:
    """Ordered operation program extracted from one player script version.

    Instances never change once built.  A new script version is handled by
    parsing again and replacing the old value, so a single instance may be
    shared across threads without locking.
    """

    operations: Tuple[Operation, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.operations, tuple):
            object.__setattr__(self, "operations", tuple(self.operations))

    @classmethod
    def from_operations(cls, operations: Iterable[Operation]) -> "PlayerSource":
        return cls(tuple(operations))

    def __iter__(self) -> Iterator[Operation]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)

    def decipher(self, signature: str) -> str:
        """Apply the program to ``signature``; see :func:`descrambler.vm.decipher`."""

        from .vm.interpreter import decipher

        return decipher(self, signature)

    def to_json(self) -> List[Dict[str, Any]]:
        return [op.as_dict() for op in self.operations]

    def __str__(self) -> str:
        return "[" + ", ".join(str(op) for op in self.operations) + "]"


__all__ = ["PlayerSource"]
