from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .ast import Ast
from .diagnostics import Diagnostic, DiagnosticBag
from .errors import ParseError
from .evaluator import evaluate
from .lexer import tokenize
from .parser import Parser
from .render import DEFAULT_MAX_WIDTH, DiagnosticsPrinter
from .text import SourceText
from .tokens import Token


log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseResult:
    text: SourceText
    tokens: tuple[Token, ...]
    ast: Ast
    diagnostics: tuple[Diagnostic, ...]

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def report(self, *, max_width: int = DEFAULT_MAX_WIDTH, color: bool = False) -> str:
        return DiagnosticsPrinter(self.text, self.diagnostics, max_width=max_width, color=color).render_all()


def parse_source(src: str, *, strict: bool = False) -> ParseResult:
    bag = DiagnosticBag()
    tokens = tokenize(src, bag)
    ast = Parser(tokens=tokens, bag=bag).parse_all()

    # Both stages are done writing; the bag is only read from here on.
    result = ParseResult(
        text=SourceText(src),
        tokens=tuple(tokens),
        ast=ast,
        diagnostics=tuple(bag),
    )
    log.debug("parsed %d statements with %d diagnostics", len(ast.statements), len(result.diagnostics))
    if strict and not result.ok:
        raise ParseError(diagnostics=list(result.diagnostics), report=result.report())
    return result


def parse_file(path: str | Path, *, strict: bool = False) -> ParseResult:
    p = Path(path).expanduser()
    src = p.read_text(encoding="utf-8")
    return parse_source(src, strict=strict)


def evaluate_source(src: str) -> list[int]:
    """Parse ``src`` strictly and evaluate every statement.

    A tree is only evaluated when parsing reported nothing; otherwise
    :class:`~translator.errors.ParseError` is raised.
    """
    return evaluate(parse_source(src, strict=True).ast)
