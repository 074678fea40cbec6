from __future__ import annotations

import logging
from dataclasses import dataclass, field

from . import ast as A
from .diagnostics import DiagnosticBag
from .lexer import tokenize
from .tokens import Token, TokenKind


log = logging.getLogger(__name__)


@dataclass(slots=True)
class Parser:
    """Pull-based recursive descent parser.

    Statements are produced one at a time by :meth:`next_statement` (or by
    iterating the parser). The cursor only moves forward; reads past the end
    of ``tokens`` return the terminal EOF token.

    Malformed input never raises. A missing structural token is reported and
    the token actually found is consumed in its place; a missing expression
    becomes an :class:`~translator.ast.ErrorExpression`.
    """

    tokens: list[Token]
    bag: DiagnosticBag = field(default_factory=DiagnosticBag)
    current: int = 0

    def __post_init__(self) -> None:
        if not self.tokens or self.tokens[-1].kind is not TokenKind.EOF:
            raise ValueError("token sequence must end with an EOF token")

    @classmethod
    def from_input(cls, src: str, bag: DiagnosticBag | None = None) -> "Parser":
        bag = bag if bag is not None else DiagnosticBag()
        return cls(tokens=tokenize(src, bag), bag=bag)

    def __iter__(self) -> "Parser":
        return self

    def __next__(self) -> A.Statement:
        statement = self.next_statement()
        if statement is None:
            raise StopIteration
        return statement

    def next_statement(self) -> A.Statement | None:
        if self.at_end():
            return None
        return self.parse_statement()

    def parse_all(self) -> A.Ast:
        ast = A.Ast()
        for statement in self:
            ast.add_statement(statement)
        return ast

    def at_end(self) -> bool:
        return self.peek(0).kind is TokenKind.EOF

    # Statements

    def parse_statement(self) -> A.Statement:
        if self.peek(0).kind is TokenKind.IDENTIFIER:
            return self.parse_assign_statement()
        expression = self.parse_expression()
        # Trailing ';' is optional after a bare expression.
        if self.peek(0).kind is TokenKind.SEMI:
            self.consume()
        return A.ExpressionStatement(expression)

    def parse_assign_statement(self) -> A.AssignStatement:
        identifier = self.consume()
        self.expect(TokenKind.ASSIGN)
        initializer = self.parse_expression()
        self.expect(TokenKind.SEMI)
        return A.AssignStatement(identifier=identifier, initializer=initializer)

    # Expressions

    def parse_expression(self) -> A.Expression:
        return self.parse_binary_expression(0)

    def parse_binary_expression(self, precedence: int) -> A.Expression:
        left = self.parse_primary_expression()

        while True:
            operator = self.parse_binary_operator()
            if operator is None or operator.precedence < precedence:
                break
            self.consume()
            # Same precedence on the right: equal-precedence chains group
            # to the right, so 8 - 3 - 2 is 8 - (3 - 2).
            right = self.parse_binary_expression(operator.precedence)
            left = A.BinaryExpression(left=left, operator=operator, right=right)

        return left

    def parse_binary_operator(self) -> A.BinaryOperator | None:
        token = self.peek(0)
        kind = A.BINARY_OPERATORS.get(token.kind)
        if kind is None:
            return None
        return A.BinaryOperator(kind=kind, token=token)

    def parse_primary_expression(self) -> A.Expression:
        if self.peek(0).kind is TokenKind.SEMI:
            # Leave the terminator for the statement that owns it.
            token = self.peek(0)
            self.bag.report_expected_expression(token)
            return A.ErrorExpression(span=token.span)

        token = self.consume()

        if token.kind is TokenKind.LITERAL_INTEGER:
            return A.NumberExpression(number=token.value)

        if token.kind is TokenKind.LPAREN:
            expression = self.parse_expression()
            self.expect(TokenKind.RPAREN)
            return A.ParenthesizedExpression(expression=expression)

        # Identifiers parse as variable reads; evaluation rejects them.
        if token.kind is TokenKind.IDENTIFIER:
            return A.VariableExpression(identifier=token)

        self.bag.report_expected_expression(token)
        log.debug("expected expression at %s, found %s", token.span.format(), token.kind.value)
        return A.ErrorExpression(span=token.span)

    # Cursor

    def peek(self, offset: int) -> Token:
        index = min(self.current + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def consume(self) -> Token:
        token = self.peek(0)
        self.current += 1
        return token

    def expect(self, kind: TokenKind) -> Token:
        token = self.consume()
        if token.kind is not kind:
            self.bag.report_unexpected_token(kind, token)
            log.debug("expected %s at %s, found %s", kind.value, token.span.format(), token.kind.value)
        return token
