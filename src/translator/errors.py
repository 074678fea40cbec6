from __future__ import annotations

from dataclasses import dataclass

from .diagnostics import Diagnostic
from .spans import Span


@dataclass(slots=True)
class ParseError(Exception):
    """Raised by strict parsing when the diagnostic bag is not empty."""

    diagnostics: list[Diagnostic]
    report: str = ""

    def __str__(self) -> str:
        count = len(self.diagnostics)
        base = f"{count} diagnostic{'s' if count != 1 else ''} reported"
        if self.report:
            return f"{base}\n{self.report}"
        return base


@dataclass(slots=True)
class EvaluationError(Exception):
    span: Span | None
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = self.message
        if self.span is not None:
            base = f"{self.span.format()}: {base}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


@dataclass(slots=True)
class UnsupportedNodeError(EvaluationError):
    """The evaluator met a node kind it has no semantics for."""
