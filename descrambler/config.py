"""Descrambler configuration loaded from ``config.json`` and user overrides."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .exceptions import ConfigError
from .passes.classify import ShapeRule, load_shapes
from .passes.function_body import EXTRACTORS, BodyExtractor, get_extractor
from .passes.sequence import UnknownCallPolicy

_CONFIG_PATH = Path(__file__).with_name("config.json")
_DATA: Dict[str, Any] = json.loads(_CONFIG_PATH.read_text(encoding="utf-8"))

_KNOWN_KEYS = {"signature_key", "extraction", "unknown_policy", "shapes"}


@dataclass(frozen=True)
class DescramblerConfig:
    """Settings shared by all parse passes."""

    signature_key: str = "signature"
    extraction: str = "first-brace"
    unknown_policy: UnknownCallPolicy = UnknownCallPolicy.IGNORE
    shapes: Tuple[ShapeRule, ...] = field(default_factory=tuple)

    def extractor(self) -> BodyExtractor:
        return get_extractor(self.extraction)

    def replace(self, **changes: Any) -> "DescramblerConfig":
        """Return a copy with ``changes`` applied, validated like :func:`load_config`."""

        data = self.as_dict()
        data.update({key: value for key, value in changes.items() if value is not None})
        return _build(data)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "signature_key": self.signature_key,
            "extraction": self.extraction,
            "unknown_policy": self.unknown_policy.value,
            "shapes": [
                {"kind": rule.kind.value, "pattern": rule.pattern, "description": rule.description}
                for rule in self.shapes
            ],
        }


def _read_file(path: Path) -> Mapping[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read config {path}: {exc}") from exc
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Malformed config {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"Expected mapping at root of config: {path}")
    return data


def _build(data: Mapping[str, Any]) -> DescramblerConfig:
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    signature_key = data.get("signature_key")
    if not isinstance(signature_key, str) or not signature_key:
        raise ConfigError("signature_key must be a non-empty string")

    extraction = data.get("extraction")
    if extraction not in EXTRACTORS:
        raise ConfigError(
            f"extraction must be one of {sorted(EXTRACTORS)}, got {extraction!r}"
        )

    try:
        policy = UnknownCallPolicy(data.get("unknown_policy"))
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    entries = data.get("shapes")
    if not isinstance(entries, (list, tuple)) or not entries:
        raise ConfigError("shapes must be a non-empty list")
    if all(isinstance(entry, ShapeRule) for entry in entries):
        shapes = tuple(entries)
    else:
        try:
            shapes = tuple(load_shapes(entries))
        except (KeyError, TypeError, ValueError, re.error) as exc:
            raise ConfigError(f"Invalid shape rule: {exc}") from exc

    return DescramblerConfig(
        signature_key=signature_key,
        extraction=str(extraction),
        unknown_policy=policy,
        shapes=shapes,
    )


def load_config(path: Optional[Path | str] = None, **overrides: Any) -> DescramblerConfig:
    """Build a configuration from the shipped defaults.

    ``path`` may point to a JSON or YAML file whose keys replace the defaults;
    keyword ``overrides`` win over both.  ``None`` overrides are ignored so CLI
    options can be passed straight through.
    """

    data: Dict[str, Any] = dict(_DATA)
    if path is not None:
        data.update(_read_file(Path(path)))
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, UnknownCallPolicy):
            value = value.value
        data[key] = value
    return _build(data)


DEFAULT_CONFIG = load_config()


__all__ = ["DEFAULT_CONFIG", "DescramblerConfig", "load_config"]
