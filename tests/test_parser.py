from __future__ import annotations

import pytest

from translator import (
    DiagnosticBag,
    ParseError,
    Parser,
    UnsupportedNodeError,
    evaluate_source,
    parse_file,
    parse_source,
    tokenize,
)
from translator import ast as A


def _single_expression(src: str) -> A.Expression:
    res = parse_source(src)
    assert len(res.ast.statements) == 1
    stmt = res.ast.statements[0]
    assert isinstance(stmt, A.ExpressionStatement)
    return stmt.expression


def test_assignment() -> None:
    res = parse_source("x := 5;")
    assert res.ok
    assert len(res.ast.statements) == 1
    stmt = res.ast.statements[0]
    assert isinstance(stmt, A.AssignStatement)
    assert stmt.identifier.lexeme == "x"
    assert stmt.initializer == A.NumberExpression(5)


@pytest.mark.parametrize(
    ("src", "value"),
    [
        ("1 + 2 * 3", 7),
        ("(1 + 2) * 3", 9),
        ("2 * 3 + 1", 7),
        ("8 - 3 - 2", 7),
        ("100 / 10 / 5", 50),
        ("7 % 4 * 2", 7),
        ("((4))", 4),
    ],
)
def test_precedence_and_grouping(src: str, value: int) -> None:
    assert evaluate_source(src) == [value]


def test_same_precedence_groups_to_the_right() -> None:
    expr = _single_expression("8 - 3 - 2")
    assert isinstance(expr, A.BinaryExpression)
    assert expr.left == A.NumberExpression(8)
    assert isinstance(expr.right, A.BinaryExpression)
    assert expr.right.left == A.NumberExpression(3)
    assert expr.right.right == A.NumberExpression(2)


def test_lower_precedence_after_higher_nests_left() -> None:
    expr = _single_expression("2 * 3 + 1")
    assert isinstance(expr, A.BinaryExpression)
    assert expr.operator.kind is A.BinaryOperatorKind.PLUS
    assert isinstance(expr.left, A.BinaryExpression)
    assert expr.left.operator.kind is A.BinaryOperatorKind.MULTIPLY


def test_operator_keeps_its_token() -> None:
    expr = _single_expression("4 % 3")
    assert isinstance(expr, A.BinaryExpression)
    assert expr.operator.kind is A.BinaryOperatorKind.MOD
    assert expr.operator.token.lexeme == "%"
    assert expr.operator.token.span.start == 2
    assert expr.operator.precedence == 4


def test_missing_right_operand_recovers_with_error_node() -> None:
    res = parse_source("1 + ;")
    assert len(res.diagnostics) == 1
    d = res.diagnostics[0]
    assert d.message == "expected expression, found <;>"
    expr = res.ast.statements[0].expression
    assert isinstance(expr, A.BinaryExpression)
    assert isinstance(expr.right, A.ErrorExpression)
    assert expr.right.span == d.span


def test_missing_operand_in_assignment_reports_once() -> None:
    res = parse_source("x := 1 + ;")
    assert [d.message for d in res.diagnostics] == ["expected expression, found <;>"]
    stmt = res.ast.statements[0]
    assert isinstance(stmt, A.AssignStatement)
    assert isinstance(stmt.initializer, A.BinaryExpression)
    assert stmt.initializer.right == A.ErrorExpression(res.diagnostics[0].span)


def test_semicolon_in_expression_position_ends_the_statement() -> None:
    res = parse_source("x := ; 2")
    assert [d.message for d in res.diagnostics] == ["expected expression, found <;>"]
    assert len(res.ast.statements) == 2
    assert res.ast.statements[1] == A.ExpressionStatement(A.NumberExpression(2))


def test_lone_semicolon_statement_terminates() -> None:
    res = parse_source(";;")
    assert len(res.diagnostics) == 2
    assert len(res.ast.statements) == 2


def test_missing_semicolon_after_assignment() -> None:
    res = parse_source("x := 5")
    assert [d.message for d in res.diagnostics] == ["expected <;>, found <EOF>"]
    assert (res.diagnostics[0].span.start, res.diagnostics[0].span.end) == (6, 6)
    assert isinstance(res.ast.statements[0], A.AssignStatement)


def test_missing_assign_operator_is_consumed_and_parsing_continues() -> None:
    res = parse_source("x = 5;")
    assert [d.message for d in res.diagnostics] == ["expected <:=>, found <=>"]
    assert len(res.ast.statements) == 1
    assert res.ast.statements[0].initializer == A.NumberExpression(5)


def test_unclosed_paren() -> None:
    res = parse_source("(1 + 2")
    assert [d.message for d in res.diagnostics] == ["expected <)>, found <EOF>"]
    expr = res.ast.statements[0].expression
    assert isinstance(expr, A.ParenthesizedExpression)


def test_mismatched_paren_token_is_consumed() -> None:
    res = parse_source("(1 2) 3")
    assert [d.message for d in res.diagnostics] == [
        "expected <)>, found <LiteralInteger>",
        "expected expression, found <)>",
    ]
    assert len(res.ast.statements) == 3


def test_expression_statement_semicolon_is_optional() -> None:
    res = parse_source("1 + 2; 3\n4;")
    assert res.ok
    assert evaluate_source("1 + 2; 3\n4;") == [3, 3, 4]


def test_variable_in_initializer() -> None:
    res = parse_source("x := y * 2;")
    assert res.ok
    init = res.ast.statements[0].initializer
    assert isinstance(init, A.BinaryExpression)
    assert isinstance(init.left, A.VariableExpression)
    assert init.left.name == "y"


def test_variable_reads_parse_but_do_not_evaluate() -> None:
    res = parse_source("1 + x")
    assert res.ok
    with pytest.raises(UnsupportedNodeError) as e:
        evaluate_source("1 + x")
    assert "variable 'x'" in str(e.value)


def test_non_expression_token_becomes_error_node() -> None:
    res = parse_source("Print")
    assert [d.message for d in res.diagnostics] == ["expected expression, found <Print>"]
    expr = res.ast.statements[0].expression
    assert isinstance(expr, A.ErrorExpression)
    assert expr.span.literal == "Print"


def test_lexer_and_parser_share_one_bag() -> None:
    bag = DiagnosticBag()
    parser = Parser.from_input("1 + @", bag)
    statements = list(parser)
    assert len(statements) == 1
    assert [d.message for d in bag] == ["unknown token <@>", "expected expression, found <EOF>"]


def test_next_statement_is_pull_based() -> None:
    parser = Parser.from_input("1 2 3")
    first = parser.next_statement()
    assert first == A.ExpressionStatement(A.NumberExpression(1))
    assert parser.current == 1
    rest = list(parser)
    assert len(rest) == 2
    assert parser.next_statement() is None
    assert parser.next_statement() is None


def test_empty_input_has_no_statements() -> None:
    res = parse_source("   \n")
    assert res.ok
    assert res.ast.statements == []


def test_parser_requires_terminal_eof() -> None:
    with pytest.raises(ValueError):
        Parser(tokens=[])
    toks = tokenize("1", DiagnosticBag())
    with pytest.raises(ValueError):
        Parser(tokens=toks[:-1])


def test_reading_past_the_end_clamps_to_eof() -> None:
    parser = Parser.from_input("x :=")
    list(parser)
    assert parser.current > len(parser.tokens) - 1
    assert parser.at_end()
    assert parser.peek(5) is parser.tokens[-1]


def test_parse_file_reads_utf8(tmp_path) -> None:
    p = tmp_path / "prog.txt"
    p.write_text("x := 1 + 2;\n", encoding="utf-8")
    res = parse_file(p)
    assert res.ok
    assert isinstance(res.ast.statements[0], A.AssignStatement)
    assert res.text.get_line(0) == "x := 1 + 2;"


def test_parse_file_strict_raises(tmp_path) -> None:
    p = tmp_path / "bad.txt"
    p.write_text("1 +", encoding="utf-8")
    with pytest.raises(ParseError):
        parse_file(p, strict=True)
