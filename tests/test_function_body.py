from __future__ import annotations

import pytest

from descrambler.exceptions import FunctionBodyNotFound
from descrambler.passes.function_body import (
    BalancedBraceExtractor,
    BodyExtractor,
    FirstBraceExtractor,
    extract_function_body,
    get_extractor,
)


def test_extract_function_body_defaults_to_first_brace(player_script: str) -> None:
    body = extract_function_body(player_script, "yB")
    assert body == '{a=a.split("");zB.kT(a,3);zB.VR(a,2);zB.AJ(a,46);return a.join("")}'


def test_extract_function_body_ignores_member_assignments(long_player_script: str) -> None:
    # only ``g.ms=function`` exists, which is a property assignment
    with pytest.raises(FunctionBodyNotFound):
        extract_function_body(long_player_script, "ms")
    assert extract_function_body(long_player_script, "Rz").startswith('{a=a.split("")')


def test_member_assignment_is_not_a_definition() -> None:
    with pytest.raises(FunctionBodyNotFound):
        extract_function_body("g.Ab=function(a){return a};", "Ab")


def test_missing_definition_raises() -> None:
    with pytest.raises(FunctionBodyNotFound):
        extract_function_body("Zz=function(a,b){return a};", "Zz")


def test_unterminated_body_raises() -> None:
    with pytest.raises(FunctionBodyNotFound):
        extract_function_body("Zz=function(a){a=a.split(", "Zz")
    with pytest.raises(FunctionBodyNotFound):
        extract_function_body("Zz=function(a){if(a){a=1}", "Zz", BalancedBraceExtractor())


def test_first_brace_stops_at_nested_block() -> None:
    script = "f=function(a){if(a){b()}return a};"
    assert extract_function_body(script, "f") == "{if(a){b()}"


def test_balanced_extraction_follows_depth() -> None:
    script = "f=function(a){if(a){b()}return a};"
    assert extract_function_body(script, "f", BalancedBraceExtractor()) == "{if(a){b()}return a}"


def test_balanced_extraction_skips_braces_in_strings() -> None:
    script = 'f=function(a){a.push("}");a.push(\'{\\\'}\');return a};g=1'
    body = extract_function_body(script, "f", BalancedBraceExtractor())
    assert body.endswith("return a}")


def test_extractors_satisfy_protocol() -> None:
    assert isinstance(FirstBraceExtractor(), BodyExtractor)
    assert isinstance(get_extractor("balanced"), BalancedBraceExtractor)
    with pytest.raises(ValueError):
        get_extractor("greedy")
