from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Span


class TokenKind(str, Enum):
    # Keywords
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    LOGICAL = "Logical"
    BEGIN = "Begin"
    END = "End"
    PRINT = "Print"
    TRUE = "True"
    FALSE = "False"

    # Identifiers and literals
    IDENTIFIER = "Identifier"
    LITERAL_INTEGER = "LiteralInteger"
    LITERAL_FLOAT = "LiteralFloat"
    LITERAL_STRING = "LiteralString"

    # Operators
    ASSIGN = ":="
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    PERCENT = "%"
    SLASH = "/"
    LOGICAL_AND = "&&"
    BITWISE_AND = "&"
    LOGICAL_OR = "||"
    BITWISE_OR = "|"
    BITWISE_XOR = "^"
    LOGICAL_NOT = "!"
    BITWISE_NOT = "~"
    EQUAL = "="

    # Punctuation
    LPAREN = "("
    RPAREN = ")"
    SEMI = ";"

    EOF = "EOF"


KEYWORDS: dict[str, TokenKind] = {
    k.value: k
    for k in (
        TokenKind.INT,
        TokenKind.FLOAT,
        TokenKind.STRING,
        TokenKind.LOGICAL,
        TokenKind.BEGIN,
        TokenKind.END,
        TokenKind.PRINT,
        TokenKind.TRUE,
        TokenKind.FALSE,
    )
}

# Longest first so that "&&" wins over "&" and ":=" is never split.
PUNCTUATION: tuple[tuple[str, TokenKind], ...] = (
    (":=", TokenKind.ASSIGN),
    ("&&", TokenKind.LOGICAL_AND),
    ("||", TokenKind.LOGICAL_OR),
    ("+", TokenKind.PLUS),
    ("-", TokenKind.MINUS),
    ("*", TokenKind.STAR),
    ("%", TokenKind.PERCENT),
    ("/", TokenKind.SLASH),
    ("&", TokenKind.BITWISE_AND),
    ("|", TokenKind.BITWISE_OR),
    ("^", TokenKind.BITWISE_XOR),
    ("!", TokenKind.LOGICAL_NOT),
    ("~", TokenKind.BITWISE_NOT),
    ("=", TokenKind.EQUAL),
    ("(", TokenKind.LPAREN),
    (")", TokenKind.RPAREN),
    (";", TokenKind.SEMI),
)


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    lexeme: str
    span: Span
    value: object = None  # parsed literal value, identifier name

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.lexeme!r}, {self.span.format()})"
