"""Split the entry function body into candidate helper calls."""

from __future__ import annotations

from typing import Any, Dict, List, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..pipeline import Context


def split_statements(body: str) -> List[str]:
    """Return the statements between the split and return statements.

    The first statement turns the parameter into an array and the last one
    joins and returns it; neither is a helper call, so both are dropped.  A
    closing brace left alone after a trailing semicolon is not a statement.  The
    order of the remaining statements is the order the operations apply in.
    """

    pieces = body.split(";")
    if pieces and pieces[-1].strip() == "}":
        pieces.pop()
    if len(pieces) < 3:
        return []
    return [piece.strip() for piece in pieces[1:-1] if piece.strip()]


def run(ctx: "Context") -> Dict[str, Any]:
    ctx.statements = split_statements(ctx.body)
    return {"candidates": len(ctx.statements)}


__all__ = ["split_statements", "run"]
