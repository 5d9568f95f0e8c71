"""Extraction of the entry function body from the player script.

Two strategies are available.  :class:`FirstBraceExtractor` stops at the first
closing brace after the opening one, which is how the known player scripts are
shaped (the descrambler body holds no nested blocks).  :class:`BalancedBraceExtractor`
tracks brace depth instead and can be swapped in when a script breaks that
assumption.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional, Protocol, TYPE_CHECKING, runtime_checkable

from ..exceptions import FunctionBodyNotFound

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..pipeline import Context

LOG = logging.getLogger(__name__)


def _definition_pattern(name: str) -> re.Pattern[str]:
    return re.compile(
        rf"(?<![\w$.]){re.escape(name)}\s*=\s*function\s*\(\s*[\w$]+\s*\)\s*\{{"
    )


@runtime_checkable
class BodyExtractor(Protocol):
    """Return the ``{...}`` body of ``name`` found in ``script``."""

    name: str

    def extract(self, script: str, name: str) -> str: ...


class _DefinitionExtractor:
    name = "abstract"

    def extract(self, script: str, name: str) -> str:
        match = _definition_pattern(name).search(script)
        if not match:
            raise FunctionBodyNotFound(
                f"Could not get the body of signature decipherer function {name!r}"
            )
        start = match.end() - 1
        end = self._find_end(script, start)
        if end is None:
            raise FunctionBodyNotFound(f"Body of function {name!r} is not terminated")
        body = script[start : end + 1]
        LOG.debug("extracted %d chars of %s using %s", len(body), name, self.name)
        return body

    def _find_end(self, script: str, start: int) -> Optional[int]:
        raise NotImplementedError


class FirstBraceExtractor(_DefinitionExtractor):
    """Take everything up to the first ``}`` after the opening brace."""

    name = "first-brace"

    def _find_end(self, script: str, start: int) -> Optional[int]:
        end = script.find("}", start + 1)
        return end if end >= 0 else None


class BalancedBraceExtractor(_DefinitionExtractor):
    """Take everything up to the brace closing the opening one."""

    name = "balanced"

    def _find_end(self, script: str, start: int) -> Optional[int]:
        depth = 0
        quote: str | None = None
        idx = start
        length = len(script)
        while idx < length:
            ch = script[idx]
            if quote is not None:
                if ch == "\\":
                    idx += 2
                    continue
                if ch == quote:
                    quote = None
            elif ch in {'"', "'", "`"}:
                quote = ch
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return idx
            idx += 1
        return None


EXTRACTORS: Dict[str, type[_DefinitionExtractor]] = {
    FirstBraceExtractor.name: FirstBraceExtractor,
    BalancedBraceExtractor.name: BalancedBraceExtractor,
}


def get_extractor(name: str) -> BodyExtractor:
    try:
        return EXTRACTORS[name]()
    except KeyError:
        raise ValueError(f"Unknown extraction strategy: {name!r}") from None


def extract_function_body(
    script: str, name: str, strategy: BodyExtractor | None = None
) -> str:
    """Return the body of function ``name`` including its outer braces."""

    extractor = strategy if strategy is not None else FirstBraceExtractor()
    return extractor.extract(script, name)


def run(ctx: "Context") -> Dict[str, Any]:
    assert ctx.entry_function is not None
    extractor = ctx.config.extractor()
    ctx.body = extract_function_body(ctx.script, ctx.entry_function, extractor)
    return {"strategy": extractor.name, "body_length": len(ctx.body)}


__all__ = [
    "BodyExtractor",
    "FirstBraceExtractor",
    "BalancedBraceExtractor",
    "EXTRACTORS",
    "extract_function_body",
    "get_extractor",
    "run",
]
