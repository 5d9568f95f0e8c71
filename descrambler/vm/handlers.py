"""Per-operation handlers applied to a :class:`SignatureState`."""

from __future__ import annotations

from typing import Callable, Dict, cast

from ..exceptions import SwapIndexOutOfRange
from ..operations import Operation, OperationKind, Slice, Swap
from .state import SignatureState

OperationHandler = Callable[[SignatureState, Operation], None]


def handle_reverse(state: SignatureState, op: Operation) -> None:
    state.chars.reverse()


def handle_slice(state: SignatureState, op: Operation) -> None:
    del state.chars[: cast(Slice, op).count]


def handle_swap(state: SignatureState, op: Operation) -> None:
    index = cast(Swap, op).index
    chars = state.chars
    if index >= len(chars):
        raise SwapIndexOutOfRange(index, len(chars))
    chars[0], chars[index] = chars[index], chars[0]


OPERATION_HANDLERS: Dict[OperationKind, OperationHandler] = {
    OperationKind.REVERSE: handle_reverse,
    OperationKind.SLICE: handle_slice,
    OperationKind.SWAP: handle_swap,
}


__all__ = [
    "OPERATION_HANDLERS",
    "OperationHandler",
    "handle_reverse",
    "handle_slice",
    "handle_swap",
]
