from __future__ import annotations

import argparse
import logging
import os
import sys

from .api import ParseResult, parse_file, parse_source
from .errors import EvaluationError
from .evaluator import evaluate
from .format import format_source, format_tree


_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _configure_logging(verbosity: int) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    root = logging.getLogger("translator")
    root.handlers[:] = [handler]
    root.setLevel(_LEVELS[min(verbosity, len(_LEVELS) - 1)])


def _positive_int(text: str) -> int:
    n = int(text)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {n}")
    return n


def _parse(path: str) -> ParseResult:
    if path == "-":
        return parse_source(sys.stdin.read())
    return parse_file(path)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="translator", description="Parse and evaluate translator programs")
    ap.add_argument("source", help="Source file, or - for stdin")
    ap.add_argument("-v", action="count", default=0, help="Increase log verbosity (repeatable)")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--tokens", action="store_true", help="Print the token stream")
    mode.add_argument("--tree", action="store_true", help="Print the syntax tree")
    mode.add_argument("--format", action="store_true", help="Print the program in canonical form")
    ap.add_argument("--no-color", action="store_true", help="Do not highlight spans in diagnostics")
    ap.add_argument("--max-width", type=_positive_int, default=80, help="Context characters around a span (default: 80)")
    args = ap.parse_args(argv)

    _configure_logging(args.v)

    try:
        res = _parse(args.source)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.source}: {e}", file=sys.stderr)
        return 1

    if not res.ok:
        color = not args.no_color and "NO_COLOR" not in os.environ and sys.stderr.isatty()
        print(res.report(max_width=args.max_width, color=color), file=sys.stderr)
        return 1

    if args.tokens:
        for tok in res.tokens:
            print(repr(tok))
        return 0
    if args.tree:
        print(format_tree(res.ast))
        return 0
    if args.format:
        sys.stdout.write(format_source(res.ast))
        return 0

    try:
        values = evaluate(res.ast)
    except EvaluationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    for value in values:
        print(value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
