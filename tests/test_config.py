from __future__ import annotations

import json
from pathlib import Path

import pytest

from descrambler.config import DEFAULT_CONFIG, load_config
from descrambler.exceptions import ConfigError
from descrambler.operations import OperationKind
from descrambler.passes.function_body import BalancedBraceExtractor, FirstBraceExtractor
from descrambler.passes.sequence import UnknownCallPolicy


def test_default_config() -> None:
    assert DEFAULT_CONFIG.signature_key == "signature"
    assert DEFAULT_CONFIG.unknown_policy is UnknownCallPolicy.IGNORE
    assert isinstance(DEFAULT_CONFIG.extractor(), FirstBraceExtractor)
    assert [rule.kind for rule in DEFAULT_CONFIG.shapes] == [
        OperationKind.REVERSE,
        OperationKind.SLICE,
        OperationKind.SWAP,
    ]


def test_overrides_win_and_none_is_ignored() -> None:
    config = load_config(extraction="balanced", unknown_policy=UnknownCallPolicy.FAIL_FAST, signature_key=None)
    assert isinstance(config.extractor(), BalancedBraceExtractor)
    assert config.unknown_policy is UnknownCallPolicy.FAIL_FAST
    assert config.signature_key == "signature"


def test_load_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "descrambler.yaml"
    path.write_text("signature_key: sig\nunknown_policy: fail-fast\n", encoding="utf-8")

    config = load_config(path)

    assert config.signature_key == "sig"
    assert config.unknown_policy is UnknownCallPolicy.FAIL_FAST
    assert config.shapes == DEFAULT_CONFIG.shapes


def test_load_json_file_with_custom_shapes(tmp_path: Path) -> None:
    path = tmp_path / "descrambler.json"
    shapes = [{"kind": "reverse", "pattern": "<name>=function\\(\\w+\\)"}]
    path.write_text(json.dumps({"shapes": shapes}), encoding="utf-8")

    config = load_config(path)

    assert len(config.shapes) == 1
    assert config.shapes[0].kind is OperationKind.REVERSE


@pytest.mark.parametrize(
    "overrides",
    [
        {"extraction": "greedy"},
        {"unknown_policy": "maybe"},
        {"signature_key": ""},
        {"shapes": []},
        {"shapes": [{"kind": "swap", "pattern": "<name>("}]},
        {"shapes": [{"kind": "swap"}]},
        {"colour": "blue"},
    ],
)
def test_invalid_config_raises(overrides) -> None:
    with pytest.raises(ConfigError):
        load_config(**overrides)


def test_unreadable_or_malformed_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json")
    bad = tmp_path / "bad.yml"
    bad.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(bad)
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(broken)


def test_replace_returns_validated_copy() -> None:
    config = DEFAULT_CONFIG.replace(extraction="balanced")
    assert config.extraction == "balanced"
    assert DEFAULT_CONFIG.extraction == "first-brace"
    with pytest.raises(ConfigError):
        DEFAULT_CONFIG.replace(extraction="nope")
