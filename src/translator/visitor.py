"""Double-dispatch traversal over the syntax tree.

``visit_statement`` / ``visit_expression`` are the entry points consumers
call and may override to wrap the walk (a printer indents around it, for
example). ``do_visit_statement`` / ``do_visit_expression`` pick the variant
method for a node. The variant methods recurse into children left to right;
a subclass overrides only the variants it cares about.
"""

from __future__ import annotations

from . import ast as A


class AstVisitor:
    def visit_statement(self, statement: A.Statement) -> None:
        self.do_visit_statement(statement)

    def do_visit_statement(self, statement: A.Statement) -> None:
        if isinstance(statement, A.ExpressionStatement):
            self.visit_expression_statement(statement)
        elif isinstance(statement, A.AssignStatement):
            self.visit_assign_statement(statement)
        else:
            raise TypeError(f"not a statement: {type(statement).__name__}")

    def visit_expression(self, expression: A.Expression) -> None:
        self.do_visit_expression(expression)

    def do_visit_expression(self, expression: A.Expression) -> None:
        if isinstance(expression, A.NumberExpression):
            self.visit_number(expression)
        elif isinstance(expression, A.BinaryExpression):
            self.visit_binary_expression(expression)
        elif isinstance(expression, A.ParenthesizedExpression):
            self.visit_parenthesized_expression(expression)
        elif isinstance(expression, A.VariableExpression):
            self.visit_variable_expression(expression)
        elif isinstance(expression, A.ErrorExpression):
            self.visit_error(expression)
        else:
            raise TypeError(f"not an expression: {type(expression).__name__}")

    def visit_expression_statement(self, statement: A.ExpressionStatement) -> None:
        self.visit_expression(statement.expression)

    def visit_assign_statement(self, statement: A.AssignStatement) -> None:
        self.visit_expression(statement.initializer)

    def visit_number(self, number: A.NumberExpression) -> None:
        pass

    def visit_binary_expression(self, expression: A.BinaryExpression) -> None:
        self.visit_expression(expression.left)
        self.visit_expression(expression.right)

    def visit_parenthesized_expression(self, expression: A.ParenthesizedExpression) -> None:
        self.visit_expression(expression.expression)

    def visit_variable_expression(self, expression: A.VariableExpression) -> None:
        pass

    def visit_error(self, expression: A.ErrorExpression) -> None:
        pass
