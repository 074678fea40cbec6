from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .diagnostics import DiagnosticBag
from .spans import Span
from .tokens import KEYWORDS, PUNCTUATION, Token, TokenKind


log = logging.getLogger(__name__)

_WHITESPACE = " \t\n\f\r"

_IDENT_RE = re.compile(r"[a-zA-Z$_][a-zA-Z0-9$_]*")
_STRING_RE = re.compile(r'"(?:[^"\\]|\\t|\\u|\\n|\\")*"')
_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"[0-9]*\.[0-9]+(?:[eE][+-]?[0-9]+)?|[0-9]+[eE][+-]?[0-9]+")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_ESCAPES = {"\\t": "\t", "\\n": "\n", '\\"': '"'}
_ESCAPE_RE = re.compile(r'\\[tn"]')


@dataclass(slots=True)
class _Cursor:
    src: str
    i: int = 0

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self) -> str:
        if self.eof():
            return ""
        return self.src[self.i]

    def advance(self, n: int = 1) -> None:
        self.i = min(self.i + n, len(self.src))


def _longest_match(src: str, i: int) -> tuple[TokenKind, int] | None:
    """Return the kind and length of the longest rule matching at ``i``.

    Keywords and punctuation are tried first and a later candidate only
    replaces the current best when it is strictly longer, so they win ties.
    """
    best: tuple[TokenKind, int] | None = None

    for text, kind in PUNCTUATION:
        if src.startswith(text, i):
            best = (kind, len(text))
            break

    m = _IDENT_RE.match(src, i)
    if m:
        kind = KEYWORDS.get(m.group(0), TokenKind.IDENTIFIER)
        if best is None or len(m.group(0)) > best[1]:
            best = (kind, len(m.group(0)))

    for rx, kind in (
        (_STRING_RE, TokenKind.LITERAL_STRING),
        (_INT_RE, TokenKind.LITERAL_INTEGER),
        (_FLOAT_RE, TokenKind.LITERAL_FLOAT),
    ):
        m = rx.match(src, i)
        if m and (best is None or len(m.group(0)) > best[1]):
            best = (kind, len(m.group(0)))

    return best


def _unescape(body: str) -> str:
    # \u carries no code point in this language and is kept as written.
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], body)


def _literal_value(kind: TokenKind, lexeme: str) -> object:
    if kind is TokenKind.LITERAL_INTEGER:
        n = int(lexeme)
        if not _INT_MIN <= n <= _INT_MAX:
            raise ValueError(f"integer literal {lexeme} out of range")
        return n
    if kind is TokenKind.LITERAL_FLOAT:
        return float(lexeme)
    if kind is TokenKind.LITERAL_STRING:
        return _unescape(lexeme[1:-1])
    if kind is TokenKind.IDENTIFIER:
        return lexeme
    return None


def tokenize(src: str, bag: DiagnosticBag) -> list[Token]:
    """Split ``src`` into tokens, reporting unrecognised text into ``bag``.

    Malformed text never stops the scan. Each maximal run of characters no
    rule accepts produces one "unknown token" diagnostic and no token. The
    result always ends with exactly one EOF token.
    """
    cur = _Cursor(src=src)
    tokens: list[Token] = []

    while not cur.eof():
        if cur.peek() in _WHITESPACE:
            cur.advance()
            continue

        start = cur.i
        match = _longest_match(src, start)

        if match is None:
            # Swallow the whole unrecognised region so it is reported once.
            cur.advance()
            while not cur.eof() and cur.peek() not in _WHITESPACE and _longest_match(src, cur.i) is None:
                cur.advance()
            bag.report_unknown_token(Span.of(src, start, cur.i))
            continue

        kind, length = match
        cur.advance(length)
        span = Span.of(src, start, cur.i)
        try:
            value = _literal_value(kind, span.literal)
        except ValueError:
            bag.report_unknown_token(span)
            continue
        tokens.append(Token(kind, span.literal, span, value))

    eof = len(src)
    tokens.append(Token(TokenKind.EOF, "", Span(start=eof, end=eof)))
    log.debug("tokenized %d characters into %d tokens (%d diagnostics)", len(src), len(tokens), len(bag))
    return tokens
