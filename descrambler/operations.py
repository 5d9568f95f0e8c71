"""Operation types making up a descrambling program."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Union


class OperationKind(str, Enum):
    """Kinds of string transformation recognised in player scripts."""

    REVERSE = "reverse"
    SLICE = "slice"
    SWAP = "swap"


@dataclass(frozen=True)
class Reverse:
    """Reverse the whole signature."""

    kind: ClassVar[OperationKind] = OperationKind.REVERSE

    def as_dict(self) -> Dict[str, Any]:
        return {"op": self.kind.value}

    def __str__(self) -> str:
        return "Reverse"


@dataclass(frozen=True)
class Slice:
    """Drop the first ``count`` characters."""

    count: int
    kind: ClassVar[OperationKind] = OperationKind.SLICE

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Slice count must be non-negative, got {self.count}")

    def as_dict(self) -> Dict[str, Any]:
        return {"op": self.kind.value, "count": self.count}

    def __str__(self) -> str:
        return f"Slice({self.count})"


@dataclass(frozen=True)
class Swap:
    """Exchange the first character with the one at ``index``."""

    index: int
    kind: ClassVar[OperationKind] = OperationKind.SWAP

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Swap index must be non-negative, got {self.index}")

    def as_dict(self) -> Dict[str, Any]:
        return {"op": self.kind.value, "index": self.index}

    def __str__(self) -> str:
        return f"Swap({self.index})"


Operation = Union[Reverse, Slice, Swap]


def make_operation(kind: OperationKind, operand: int = 0) -> Operation:
    """Build the operation of ``kind``; ``operand`` is ignored for reverse."""

    if kind is OperationKind.REVERSE:
        return Reverse()
    if kind is OperationKind.SLICE:
        return Slice(operand)
    if kind is OperationKind.SWAP:
        return Swap(operand)
    raise ValueError(f"Unsupported operation kind: {kind!r}")


__all__ = [
    "Operation",
    "OperationKind",
    "Reverse",
    "Slice",
    "Swap",
    "make_operation",
]
