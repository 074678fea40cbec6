from __future__ import annotations

from .api import ParseResult, evaluate_source, parse_file, parse_source
from .ast import Ast
from .diagnostics import Diagnostic, DiagnosticBag, DiagnosticKind
from .errors import EvaluationError, ParseError, UnsupportedNodeError
from .evaluator import AstEvaluator, evaluate
from .format import AstPrinter, SourceFormatter, format_source, format_tree
from .lexer import tokenize
from .parser import Parser
from .render import DiagnosticsPrinter, render, render_all
from .spans import Span
from .text import SourceText
from .tokens import Token, TokenKind
from .visitor import AstVisitor

__all__ = [
    "Ast",
    "AstEvaluator",
    "AstPrinter",
    "AstVisitor",
    "Diagnostic",
    "DiagnosticBag",
    "DiagnosticKind",
    "DiagnosticsPrinter",
    "EvaluationError",
    "ParseError",
    "ParseResult",
    "Parser",
    "SourceFormatter",
    "SourceText",
    "Span",
    "Token",
    "TokenKind",
    "UnsupportedNodeError",
    "evaluate",
    "evaluate_source",
    "format_source",
    "format_tree",
    "parse_file",
    "parse_source",
    "render",
    "render_all",
    "tokenize",
]
