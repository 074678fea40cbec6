"""Diagnostic records and the bag every stage reports into.

The lexer and the parser share one :class:`DiagnosticBag`. Neither owns it;
whoever drives the pipeline creates the bag, hands it to both, and reads it
once both are done.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from .spans import Span
from .tokens import Token, TokenKind


class DiagnosticKind(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    message: str
    span: Span
    kind: DiagnosticKind = DiagnosticKind.ERROR

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message} at {self.span.format()}"


@dataclass(slots=True)
class DiagnosticBag:
    """Append-only, ordered collection of diagnostics."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, message: str, span: Span, kind: DiagnosticKind = DiagnosticKind.ERROR) -> Diagnostic:
        diagnostic = Diagnostic(message=message, span=span, kind=kind)
        self.diagnostics.append(diagnostic)
        return diagnostic

    def report_error(self, message: str, span: Span) -> Diagnostic:
        return self.report(message, span, DiagnosticKind.ERROR)

    def report_warning(self, message: str, span: Span) -> Diagnostic:
        return self.report(message, span, DiagnosticKind.WARNING)

    def report_unexpected_token(self, expected: TokenKind, actual: Token) -> Diagnostic:
        return self.report_error(
            f"expected <{expected.value}>, found <{actual.kind.value}>",
            actual.span,
        )

    def report_expected_expression(self, actual: Token) -> Diagnostic:
        return self.report_error(f"expected expression, found <{actual.kind.value}>", actual.span)

    def report_unknown_token(self, span: Span) -> Diagnostic:
        return self.report_error(f"unknown token <{span.literal}>", span)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __bool__(self) -> bool:
        return bool(self.diagnostics)

    def has_errors(self) -> bool:
        return any(d.kind is DiagnosticKind.ERROR for d in self.diagnostics)

    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is DiagnosticKind.ERROR]

    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is DiagnosticKind.WARNING]

    def sorted(self) -> list[Diagnostic]:
        # Detection order is not span order once the parser recovers inside
        # nested expressions.
        return sorted(self.diagnostics, key=lambda d: (d.span.start, d.span.end))
