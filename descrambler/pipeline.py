"""Pass-based orchestration for parsing player scripts."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from .config import DEFAULT_CONFIG, DescramblerConfig
from .operations import Operation
from .passes.classify import ClassificationMap
from .passes.classify import run as classify_run
from .passes.entry_point import run as entry_point_run
from .passes.function_body import run as function_body_run
from .passes.sequence import run as sequence_run
from .passes.statements import run as statements_run
from .player_source import PlayerSource
from .report import ParseReport

LOG = logging.getLogger(__name__)

PassFn = Callable[["Context"], None]


@dataclass
class Context:
    """Shared state threaded through individual pipeline passes.

    A context lives for one parse only; the :class:`PlayerSource` built at the
    end is the sole value that outlives it.
    """

    script: str
    config: DescramblerConfig = DEFAULT_CONFIG
    entry_function: str | None = None
    body: str = ""
    statements: List[str] = field(default_factory=list)
    classification: ClassificationMap = field(default_factory=dict)
    operations: List[Operation] = field(default_factory=list)
    pass_metadata: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    report: ParseReport = field(default_factory=ParseReport)

    def record_metadata(self, name: str, metadata: Dict[str, Any]) -> None:
        self.pass_metadata[name] = dict(metadata)

    def player_source(self) -> PlayerSource:
        return PlayerSource.from_operations(self.operations)


class PassRegistry:
    def __init__(self) -> None:
        self._passes: Dict[str, Tuple[int, PassFn]] = {}

    def register_pass(self, name: str, fn: PassFn, order: int) -> None:
        self._passes[name] = (order, fn)

    def names(self) -> List[str]:
        return [name for _, name in sorted((order, name) for name, (order, _) in self._passes.items())]

    def run_passes(self, ctx: Context) -> List[Tuple[str, float]]:
        selected = sorted(
            ((order, name, fn) for name, (order, fn) in self._passes.items()),
            key=lambda item: (item[0], item[1]),
        )

        timings: List[Tuple[str, float]] = []
        for _, name, fn in selected:
            start = time.perf_counter()
            fn(ctx)
            duration = time.perf_counter() - start
            timings.append((name, duration))
            ctx.report.timings[name] = duration
            metadata = ctx.pass_metadata.get(name)
            summary_parts: List[str] = []
            if isinstance(metadata, dict):
                for key in ("entry_function", "strategy", "candidates", "operations"):
                    value = metadata.get(key)
                    if value is not None and not isinstance(value, list):
                        summary_parts.append(f"{key}={value}")
                classified = metadata.get("classified")
                if isinstance(classified, dict):
                    summary_parts.append(f"classified={len(classified)}")
                unresolved = metadata.get("unresolved")
                if unresolved:
                    summary_parts.append(f"unresolved={len(unresolved)}")
            suffix = f" ({', '.join(summary_parts)})" if summary_parts else ""
            LOG.info("pass %s completed in %.4fs%s", name, duration, suffix)
        return timings


PIPELINE = PassRegistry()


# ---------------------------------------------------------------------------
# Pass implementations


def _pass_entry_point(ctx: Context) -> None:
    metadata = entry_point_run(ctx)
    ctx.report.entry_function = ctx.entry_function
    ctx.record_metadata("entry_point", metadata)


def _pass_function_body(ctx: Context) -> None:
    metadata = function_body_run(ctx)
    ctx.report.extraction = metadata.get("strategy")
    ctx.report.body_length = len(ctx.body)
    ctx.record_metadata("function_body", metadata)


def _pass_statements(ctx: Context) -> None:
    metadata = statements_run(ctx)
    ctx.report.candidate_statements = len(ctx.statements)
    if not ctx.statements:
        ctx.report.warnings.append("entry function body holds no helper calls")
    ctx.record_metadata("statements", metadata)


def _pass_classify(ctx: Context) -> None:
    metadata = classify_run(ctx)
    ctx.report.classification = {name: kind.value for name, kind in ctx.classification.items()}
    ctx.record_metadata("classify", metadata)


def _pass_sequence(ctx: Context) -> None:
    metadata = sequence_run(ctx)
    report = ctx.report
    report.operation_count = len(ctx.operations)
    report.program = [str(op) for op in ctx.operations]
    unresolved = metadata.get("unresolved")
    if isinstance(unresolved, list):
        report.unresolved_calls.extend(str(item) for item in unresolved)
    warnings = metadata.get("warnings")
    if isinstance(warnings, list):
        report.warnings.extend(str(item) for item in warnings if item)
    ctx.record_metadata("sequence", metadata)


PIPELINE.register_pass("entry_point", _pass_entry_point, 10)
PIPELINE.register_pass("function_body", _pass_function_body, 20)
PIPELINE.register_pass("statements", _pass_statements, 30)
PIPELINE.register_pass("classify", _pass_classify, 40)
PIPELINE.register_pass("sequence", _pass_sequence, 50)


def run_pipeline(script: str, *, config: DescramblerConfig | None = None) -> Context:
    """Run every parse pass over ``script`` and return the populated context."""

    if not script or not script.strip():
        raise ValueError("player script is empty")
    ctx = Context(script=script, config=config or DEFAULT_CONFIG)
    PIPELINE.run_passes(ctx)
    return ctx


def parse_player_source(script: str, *, config: DescramblerConfig | None = None) -> PlayerSource:
    """Parse ``script`` into an immutable :class:`PlayerSource`."""

    return run_pipeline(script, config=config).player_source()


__all__ = ["Context", "PassRegistry", "PIPELINE", "parse_player_source", "run_pipeline"]
