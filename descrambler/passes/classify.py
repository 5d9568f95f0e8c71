"""Structural classification of helper functions used by the descrambler.

Helpers have no stable names, so they are recognised by the shape of their
definition.  The shapes live in an ordered table of :class:`ShapeRule`
entries (shipped in ``config.json``); for each helper the first matching rule
decides its operation kind.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, TYPE_CHECKING

from ..operations import OperationKind

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..pipeline import Context

LOG = logging.getLogger(__name__)

NAME_PLACEHOLDER = "<name>"

_CALL_RE = re.compile(r"[\w$]+\.([\w$]+)\(")

ClassificationMap = Dict[str, OperationKind]


@dataclass(frozen=True)
class ShapeRule:
    """Regex template recognising helper definitions of one operation kind."""

    kind: OperationKind
    pattern: str
    description: str = ""

    def compile(self, name: str) -> re.Pattern[str]:
        return re.compile(self.pattern.replace(NAME_PLACEHOLDER, re.escape(name)))

    def matches(self, script: str, name: str) -> bool:
        return self.compile(name).search(script) is not None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ShapeRule":
        kind = OperationKind(str(data["kind"]).lower())
        pattern = str(data["pattern"])
        if NAME_PLACEHOLDER not in pattern:
            raise ValueError(f"Shape pattern for {kind.value} lacks {NAME_PLACEHOLDER}")
        rule = cls(kind=kind, pattern=pattern, description=str(data.get("description", "")))
        rule.compile("probe")
        return rule


def load_shapes(entries: Iterable[Mapping[str, Any]]) -> List[ShapeRule]:
    return [ShapeRule.from_mapping(entry) for entry in entries]


def extract_call_identifier(statement: str) -> Optional[str]:
    """Return ``fn`` for a statement shaped like ``obj.fn(...)``."""

    match = _CALL_RE.search(statement)
    return match.group(1) if match else None


def classify_identifier(
    script: str, name: str, shapes: Sequence[ShapeRule]
) -> Optional[OperationKind]:
    for rule in shapes:
        if rule.matches(script, name):
            return rule.kind
    return None


def _default_shapes() -> Sequence[ShapeRule]:
    from ..config import DEFAULT_CONFIG

    return DEFAULT_CONFIG.shapes


def classify_operations(
    script: str,
    statements: Sequence[str],
    shapes: Sequence[ShapeRule] | None = None,
) -> ClassificationMap:
    """Map helper identifiers called in ``statements`` to operation kinds.

    Definitions are searched in the whole ``script``.  Each kind is bound to
    at most one identifier; a later call of the same shape takes the binding
    over.  The scan ends as soon as every kind in ``shapes`` is bound.
    """

    rules = list(shapes) if shapes is not None else list(_default_shapes())
    wanted = {rule.kind for rule in rules}
    bound: Dict[OperationKind, str] = {}
    kinds: Dict[str, Optional[OperationKind]] = {}

    for statement in statements:
        if wanted and wanted.issubset(bound):
            break
        name = extract_call_identifier(statement)
        if name is None:
            continue
        if name in kinds:
            kind = kinds[name]
        else:
            kind = kinds[name] = classify_identifier(script, name, rules)
            if kind is None:
                LOG.debug("helper %s matches no known shape", name)
            else:
                LOG.debug("helper %s classified as %s", name, kind.value)
        if kind is None:
            continue
        previous = bound.get(kind)
        if previous is not None and previous != name:
            LOG.warning(
                "helper %s has %s shape; it replaces %s, which is left unclassified",
                name,
                kind.value,
                previous,
            )
        bound[kind] = name

    return {name: kind for kind, name in bound.items()}


def run(ctx: "Context") -> Dict[str, Any]:
    ctx.classification = classify_operations(ctx.script, ctx.statements, ctx.config.shapes)
    return {
        "classified": {name: kind.value for name, kind in ctx.classification.items()},
    }


__all__ = [
    "ClassificationMap",
    "NAME_PLACEHOLDER",
    "ShapeRule",
    "classify_identifier",
    "classify_operations",
    "extract_call_identifier",
    "load_shapes",
    "run",
]
