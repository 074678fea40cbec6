"""Render diagnostics against their source line.

Each diagnostic becomes a four-line block::

    x := 1 + ;
             ^
             |
             +-- expected expression, found <;>

The source line is cut to at most ``max_width`` characters on either side of
the span, and the pointer lines are indented by at most ``max_width``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Sequence

from .diagnostics import Diagnostic
from .text import SourceText


DEFAULT_MAX_WIDTH = 80

_RED = "\033[31m"
_RESET = "\033[0m"


@dataclass(slots=True)
class DiagnosticsPrinter:
    text: SourceText
    diagnostics: Sequence[Diagnostic]
    max_width: int = DEFAULT_MAX_WIDTH
    color: bool = False

    def stringify_diagnostic(self, diagnostic: Diagnostic) -> str:
        line_index = self.text.line_index(diagnostic.span.start)
        line = self.text.get_line(line_index)
        column = diagnostic.span.start - self.text.line_start(line_index)

        prefix, span, suffix = self._text_spans(line, column, len(diagnostic.span))
        if self.color:
            span = f"{_RED}{span}{_RESET}"

        indent = " " * min(self.max_width, column)
        arrows = indent + "^" * len(diagnostic.span)
        bar = indent + "|"
        message = f"{indent}+-- {diagnostic.message}"
        return "\n".join([prefix + span + suffix, arrows, bar, message])

    def render_all(self) -> str:
        return "\n".join(self.stringify_diagnostic(d) for d in self.diagnostics)

    def print(self, file: IO[str] | None = None) -> None:
        for diagnostic in self.diagnostics:
            print(self.stringify_diagnostic(diagnostic), file=file)

    def _text_spans(self, line: str, column: int, length: int) -> tuple[str, str, str]:
        prefix_end = min(column, len(line))
        prefix_start = max(0, prefix_end - self.max_width)
        suffix_start = min(column + length, len(line))
        suffix_end = min(suffix_start + self.max_width, len(line))
        return (
            line[prefix_start:prefix_end],
            line[prefix_end:suffix_start],
            line[suffix_start:suffix_end],
        )


def render(diagnostic: Diagnostic, text: SourceText | str, **kwargs: object) -> str:
    if isinstance(text, str):
        text = SourceText(text)
    return DiagnosticsPrinter(text, [diagnostic], **kwargs).stringify_diagnostic(diagnostic)


def render_all(diagnostics: Sequence[Diagnostic], text: SourceText | str, **kwargs: object) -> str:
    if isinstance(text, str):
        text = SourceText(text)
    return DiagnosticsPrinter(text, diagnostics, **kwargs).render_all()
