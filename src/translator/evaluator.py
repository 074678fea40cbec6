"""Reference tree-walking evaluator for integer arithmetic.

There is no variable storage: assignments, variable reads and error nodes
raise :class:`~translator.errors.UnsupportedNodeError` instead of being
skipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from . import ast as A
from .errors import EvaluationError, UnsupportedNodeError
from .visitor import AstVisitor


def _divide(left: int, right: int) -> int:
    # Truncate toward zero, not floor.
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _remainder(left: int, right: int) -> int:
    return left - right * _divide(left, right)


@dataclass(slots=True)
class AstEvaluator(AstVisitor):
    last_value: int | None = None
    values: list[int] = field(default_factory=list)

    def visit_expression_statement(self, statement: A.ExpressionStatement) -> None:
        self.visit_expression(statement.expression)
        self.values.append(self._take())

    def visit_assign_statement(self, statement: A.AssignStatement) -> None:
        raise UnsupportedNodeError(
            span=statement.identifier.span,
            message=f"cannot evaluate assignment to {statement.name!r}",
            hint="the evaluator has no variable storage",
        )

    def visit_number(self, number: A.NumberExpression) -> None:
        self.last_value = number.number

    def visit_binary_expression(self, expression: A.BinaryExpression) -> None:
        self.visit_expression(expression.left)
        left = self._take()
        self.visit_expression(expression.right)
        right = self._take()

        kind = expression.operator.kind
        if kind in (A.BinaryOperatorKind.DIVIDE, A.BinaryOperatorKind.MOD) and right == 0:
            raise EvaluationError(span=expression.operator.token.span, message="division by zero")

        if kind is A.BinaryOperatorKind.PLUS:
            self.last_value = left + right
        elif kind is A.BinaryOperatorKind.MINUS:
            self.last_value = left - right
        elif kind is A.BinaryOperatorKind.MULTIPLY:
            self.last_value = left * right
        elif kind is A.BinaryOperatorKind.DIVIDE:
            self.last_value = _divide(left, right)
        else:
            self.last_value = _remainder(left, right)

    def visit_variable_expression(self, expression: A.VariableExpression) -> None:
        raise UnsupportedNodeError(
            span=expression.identifier.span,
            message=f"cannot evaluate variable {expression.name!r}",
            hint="the evaluator has no variable storage",
        )

    def visit_error(self, expression: A.ErrorExpression) -> None:
        raise UnsupportedNodeError(
            span=expression.span,
            message="cannot evaluate an expression that failed to parse",
            hint="check the diagnostics before evaluating",
        )

    def _take(self) -> int:
        value = self.last_value
        if value is None:
            raise EvaluationError(span=None, message="expression produced no value")
        return value


def evaluate(ast: A.Ast) -> list[int]:
    """Evaluate every statement of ``ast`` and return their values in order."""
    evaluator = AstEvaluator()
    ast.visit(evaluator)
    return evaluator.values
