from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

from .spans import Span
from .tokens import Token, TokenKind

if TYPE_CHECKING:
    from .visitor import AstVisitor


class BinaryOperatorKind(str, Enum):
    PLUS = "Plus"
    MINUS = "Minus"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"
    MOD = "Mod"


BINARY_OPERATORS: dict[TokenKind, BinaryOperatorKind] = {
    TokenKind.PLUS: BinaryOperatorKind.PLUS,
    TokenKind.MINUS: BinaryOperatorKind.MINUS,
    TokenKind.STAR: BinaryOperatorKind.MULTIPLY,
    TokenKind.SLASH: BinaryOperatorKind.DIVIDE,
    TokenKind.PERCENT: BinaryOperatorKind.MOD,
}

_PRECEDENCE: dict[BinaryOperatorKind, int] = {
    BinaryOperatorKind.PLUS: 3,
    BinaryOperatorKind.MINUS: 3,
    BinaryOperatorKind.MULTIPLY: 4,
    BinaryOperatorKind.DIVIDE: 4,
    BinaryOperatorKind.MOD: 4,
}


@dataclass(frozen=True, slots=True)
class BinaryOperator:
    kind: BinaryOperatorKind
    token: Token

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self.kind]

    @property
    def symbol(self) -> str:
        return self.token.lexeme


# Expressions


@dataclass(frozen=True, slots=True)
class NumberExpression:
    number: int


@dataclass(frozen=True, slots=True)
class BinaryExpression:
    left: Expression
    operator: BinaryOperator
    right: Expression


@dataclass(frozen=True, slots=True)
class ParenthesizedExpression:
    expression: Expression


@dataclass(frozen=True, slots=True)
class VariableExpression:
    identifier: Token

    @property
    def name(self) -> str:
        return self.identifier.lexeme


@dataclass(frozen=True, slots=True)
class ErrorExpression:
    """Placeholder for an expression that could not be parsed.

    Always paired with a diagnostic reported at the same span.
    """

    span: Span


Expression = Union[
    NumberExpression,
    BinaryExpression,
    ParenthesizedExpression,
    VariableExpression,
    ErrorExpression,
]


# Statements


@dataclass(frozen=True, slots=True)
class ExpressionStatement:
    expression: Expression


@dataclass(frozen=True, slots=True)
class AssignStatement:
    identifier: Token
    initializer: Expression

    @property
    def name(self) -> str:
        return self.identifier.lexeme


Statement = Union[ExpressionStatement, AssignStatement]


@dataclass(slots=True)
class Ast:
    statements: list[Statement] = field(default_factory=list)

    def add_statement(self, statement: Statement) -> None:
        self.statements.append(statement)

    def visit(self, visitor: AstVisitor) -> None:
        for statement in self.statements:
            visitor.visit_statement(statement)

    def visualize(self) -> str:
        from .format import format_tree

        return format_tree(self)
