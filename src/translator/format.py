from __future__ import annotations

from dataclasses import dataclass, field

from . import ast as A
from .visitor import AstVisitor


LEVEL_INDENT = 2


@dataclass(slots=True)
class AstPrinter(AstVisitor):
    """Indented structural dump of a tree, one node per line."""

    indent: int = 0
    lines: list[str] = field(default_factory=list)

    def visit_statement(self, statement: A.Statement) -> None:
        self._emit("Statement:")
        self.indent += LEVEL_INDENT
        self.do_visit_statement(statement)
        self.indent -= LEVEL_INDENT

    def visit_expression(self, expression: A.Expression) -> None:
        self._emit("Expression:")
        self.indent += LEVEL_INDENT
        self.do_visit_expression(expression)
        self.indent -= LEVEL_INDENT

    def visit_assign_statement(self, statement: A.AssignStatement) -> None:
        self._emit("Assign Statement:")
        self.indent += LEVEL_INDENT
        self._emit(f"Identifier: {statement.name}")
        self.visit_expression(statement.initializer)
        self.indent -= LEVEL_INDENT

    def visit_number(self, number: A.NumberExpression) -> None:
        self._emit(f"Number: {number.number}")

    def visit_binary_expression(self, expression: A.BinaryExpression) -> None:
        self._emit("Binary Expression:")
        self.indent += LEVEL_INDENT
        self._emit(f"Operator: {expression.operator.kind.value}")
        self.visit_expression(expression.left)
        self.visit_expression(expression.right)
        self.indent -= LEVEL_INDENT

    def visit_parenthesized_expression(self, expression: A.ParenthesizedExpression) -> None:
        self._emit("Parenthesized Expression:")
        self.indent += LEVEL_INDENT
        self.visit_expression(expression.expression)
        self.indent -= LEVEL_INDENT

    def visit_variable_expression(self, expression: A.VariableExpression) -> None:
        self._emit(f"Variable: {expression.name}")

    def visit_error(self, expression: A.ErrorExpression) -> None:
        self._emit(f"Error: {expression.span.literal!r}")

    def _emit(self, text: str) -> None:
        self.lines.append(" " * self.indent + text)


@dataclass(slots=True)
class SourceFormatter(AstVisitor):
    """Print a tree back as canonical source, one statement per line.

    Expressions are written into ``parts`` as the walk reaches them, so the
    default textual traversal order is also the output order.
    """

    lines: list[str] = field(default_factory=list)
    parts: list[str] = field(default_factory=list)

    def visit_statement(self, statement: A.Statement) -> None:
        self.parts = []
        self.do_visit_statement(statement)
        self.lines.append("".join(self.parts))

    def visit_assign_statement(self, statement: A.AssignStatement) -> None:
        self.parts.append(f"{statement.name} := ")
        self.visit_expression(statement.initializer)
        self.parts.append(";")

    def visit_number(self, number: A.NumberExpression) -> None:
        self.parts.append(str(number.number))

    def visit_binary_expression(self, expression: A.BinaryExpression) -> None:
        self.visit_expression(expression.left)
        self.parts.append(f" {expression.operator.symbol} ")
        self.visit_expression(expression.right)

    def visit_parenthesized_expression(self, expression: A.ParenthesizedExpression) -> None:
        self.parts.append("(")
        self.visit_expression(expression.expression)
        self.parts.append(")")

    def visit_variable_expression(self, expression: A.VariableExpression) -> None:
        self.parts.append(expression.name)

    def visit_error(self, expression: A.ErrorExpression) -> None:
        # Keep whatever text was there; the result is not expected to parse.
        self.parts.append(expression.span.literal)


def format_tree(ast: A.Ast) -> str:
    printer = AstPrinter()
    ast.visit(printer)
    return "\n".join(printer.lines)


def format_source(ast: A.Ast) -> str:
    formatter = SourceFormatter()
    ast.visit(formatter)
    if not formatter.lines:
        return ""
    return "\n".join(formatter.lines) + "\n"
