"""Structured parse report helpers."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List


@dataclass
class ParseReport:
    """Summarises a single player script parse for maintainers."""

    entry_function: str | None = None
    extraction: str | None = None
    body_length: int = 0
    candidate_statements: int = 0
    classification: Dict[str, str] = field(default_factory=dict)
    unresolved_calls: List[str] = field(default_factory=list)
    operation_count: int = 0
    program: List[str] = field(default_factory=list)
    timings: Dict[str, float] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def to_text(self) -> str:
        """Format the report as a human-readable summary."""

        lines: List[str] = []
        lines.append(f"Entry function: {self.entry_function}")
        if self.extraction:
            lines.append(f"Body extraction: {self.extraction} ({self.body_length} chars)")
        lines.append(f"Candidate statements: {self.candidate_statements}")
        lines.append("Classified helpers:")
        if self.classification:
            for name, kind in self.classification.items():
                lines.append(f"  {name}: {kind}")
        else:
            lines.append("  none")
        if self.unresolved_calls:
            lines.append("Unresolved calls:")
            lines.extend(f"  - {call}" for call in self.unresolved_calls)
        lines.append(f"Operations: {self.operation_count}")
        if self.program:
            lines.append("Program: " + ", ".join(self.program))
        if self.timings:
            lines.append("Pass timings:")
            for name, duration in self.timings.items():
                lines.append(f"  {name}: {duration:.4f}s")
        if self.warnings:
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in self.warnings)
        return "\n".join(lines)

    def to_json(self) -> Dict[str, object]:
        """Return a JSON-serialisable representation."""

        data = asdict(self)
        data["timings"] = {name: round(value, 6) for name, value in self.timings.items()}
        return data


__all__ = ["ParseReport"]
