from __future__ import annotations

import pytest

from descrambler.exceptions import SwapIndexOutOfRange
from descrambler.operations import Reverse, Slice, Swap
from descrambler.player_source import PlayerSource
from descrambler.vm import Interpreter, SignatureState, decipher
from descrambler.vm.handlers import handle_swap

SAMPLES = ["", "A", "AB", "ABCDEFGHIJ", "0123456789abcdefXYZ"]


def _apply(signature: str, *operations) -> str:
    return decipher(PlayerSource(operations), signature)


def test_three_step_program_intermediate_values() -> None:
    source = PlayerSource([Swap(3), Slice(2), Reverse()])
    interpreter = Interpreter(source, "ABCDEFGHIJ")

    assert interpreter.step() == "DBCAEFGHIJ"
    assert interpreter.step() == "CAEFGHIJ"
    assert interpreter.step() == "JIHGFEAC"
    assert interpreter.step() is None
    assert interpreter.run("ABCDEFGHIJ") == "JIHGFEAC"


@pytest.mark.parametrize("signature", SAMPLES)
def test_reverse_is_self_inverse(signature: str) -> None:
    assert _apply(signature, Reverse(), Reverse()) == signature
    assert _apply(signature, Reverse()) == signature[::-1]


@pytest.mark.parametrize("signature", SAMPLES)
def test_slice_zero_is_identity(signature: str) -> None:
    assert _apply(signature, Slice(0)) == signature


@pytest.mark.parametrize("count", [0, 1, 3, 10, 25])
def test_slice_keeps_trailing_characters(count: int) -> None:
    signature = "ABCDEFGHIJ"
    result = _apply(signature, Slice(count))
    assert len(result) == max(0, len(signature) - count)
    assert result == signature[count:]


@pytest.mark.parametrize("index", [0, 1, 5, 9])
def test_swap_is_self_inverse(index: int) -> None:
    signature = "ABCDEFGHIJ"
    once = _apply(signature, Swap(index))
    assert once[0] == signature[index]
    assert once[index] == signature[0]
    assert _apply(signature, Swap(index), Swap(index)) == signature


def test_swap_index_out_of_range_does_not_wrap() -> None:
    with pytest.raises(SwapIndexOutOfRange) as excinfo:
        _apply("ABC", Swap(3))
    assert excinfo.value.index == 3
    assert excinfo.value.length == 3


def test_swap_checks_length_after_previous_operations() -> None:
    assert _apply("ABCDEFGHIJ", Swap(7)) == "HBCDEFGAIJ"
    with pytest.raises(SwapIndexOutOfRange):
        _apply("ABCDEFGHIJ", Slice(5), Swap(7))


def test_swap_on_empty_signature_fails() -> None:
    state = SignatureState.from_signature("")
    with pytest.raises(SwapIndexOutOfRange):
        handle_swap(state, Swap(0))


def test_empty_program_returns_input() -> None:
    assert decipher(PlayerSource(), "ABC") == "ABC"


def test_interpreter_does_not_touch_source() -> None:
    source = PlayerSource([Reverse(), Slice(1)])
    interpreter = Interpreter(source)
    assert interpreter.run("ABCD") == "CBA"
    assert interpreter.run("WXYZ") == "YXW"
    assert source.operations == (Reverse(), Slice(1))


def test_shared_source_across_threads() -> None:
    from concurrent.futures import ThreadPoolExecutor

    source = PlayerSource([Swap(3), Slice(2), Reverse()])
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(source.decipher, ["ABCDEFGHIJ"] * 64))
    assert set(results) == {"JIHGFEAC"}
