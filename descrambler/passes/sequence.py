"""Turn classified helper calls into an ordered operation program."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence, TYPE_CHECKING

from ..exceptions import UnknownOperation
from ..operations import Operation, OperationKind, make_operation
from .classify import extract_call_identifier

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..pipeline import Context

LOG = logging.getLogger(__name__)

_OPERAND_RE = re.compile(r"\(\s*[\w$]+\s*,\s*(\d+)\s*\)")


class UnknownCallPolicy(str, Enum):
    """What to do with helper calls that match no known shape."""

    IGNORE = "ignore"
    FAIL_FAST = "fail-fast"


@dataclass
class SequenceResult:
    operations: List[Operation] = field(default_factory=list)
    unresolved: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _operand(statement: str) -> int | None:
    match = _OPERAND_RE.search(statement)
    return int(match.group(1)) if match else None


def sequence_statements(
    statements: Sequence[str],
    classification: Mapping[str, OperationKind],
    policy: UnknownCallPolicy = UnknownCallPolicy.IGNORE,
) -> SequenceResult:
    result = SequenceResult()
    for statement in statements:
        name = extract_call_identifier(statement)
        kind = classification.get(name) if name is not None else None
        if kind is None:
            if policy is UnknownCallPolicy.FAIL_FAST:
                raise UnknownOperation(name or "", statement)
            LOG.debug("skipping unclassified statement %r", statement)
            result.unresolved.append(statement)
            continue

        operand = 0
        if kind is not OperationKind.REVERSE:
            parsed = _operand(statement)
            if parsed is None:
                message = f"no numeric operand in {statement!r}; using 0"
                LOG.warning("%s", message)
                result.warnings.append(message)
            else:
                operand = parsed
        result.operations.append(make_operation(kind, operand))
    return result


def sequence_operations(
    statements: Sequence[str],
    classification: Mapping[str, OperationKind],
    policy: UnknownCallPolicy = UnknownCallPolicy.IGNORE,
) -> List[Operation]:
    """Return the operations emitted by ``statements`` in their original order."""

    return sequence_statements(statements, classification, policy).operations


def run(ctx: "Context") -> Dict[str, Any]:
    result = sequence_statements(ctx.statements, ctx.classification, ctx.config.unknown_policy)
    ctx.operations = result.operations
    return {
        "operations": len(result.operations),
        "unresolved": result.unresolved,
        "warnings": result.warnings,
    }


__all__ = [
    "SequenceResult",
    "UnknownCallPolicy",
    "sequence_operations",
    "sequence_statements",
    "run",
]
