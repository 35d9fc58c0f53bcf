"""Visitor pattern for traversing and processing AST nodes.

Each concrete node calls exactly one ``visit_*`` method from its ``accept``.
A visitor only needs to override the hooks for the node kinds it handles;
everything else falls back through the node's category (statement,
table element, literal, expression) to ``visit_node``, which raises.
"""

from typing import TYPE_CHECKING, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from stream_sql_tree.tree.base import Expression, Node, Statement, TableElement
    from stream_sql_tree.tree.nodes import (
        BooleanLiteral,
        ColumnDefinition,
        CreateStream,
        DoubleLiteral,
        IntegerLiteral,
        Literal,
        NullLiteral,
        PrimaryKeyConstraint,
        StringLiteral,
    )

R = TypeVar("R")
C = TypeVar("C")


class UnsupportedNodeError(NotImplementedError):
    """Raised when a visitor has no handler for the node it was given."""

    def __init__(self, node: "Node", visitor: "AstVisitor") -> None:
        self.node = node
        self.visitor = visitor
        super().__init__(
            f"{type(visitor).__name__} does not support {type(node).__name__} nodes"
        )


class AstVisitor(Generic[R, C]):
    """Base class for AST visitors.

    ``R`` is the result type of the visit methods and ``C`` the type of the
    context value threaded through ``accept``.
    """

    def process(self, node: "Node", context: Optional[C] = None) -> R:
        """Visit ``node`` with this visitor."""
        return node.accept(self, context)

    def visit_node(self, node: "Node", context: Optional[C]) -> R:
        raise UnsupportedNodeError(node, self)

    # Categories

    def visit_statement(self, node: "Statement", context: Optional[C]) -> R:
        return self.visit_node(node, context)

    def visit_table_element(self, node: "TableElement", context: Optional[C]) -> R:
        return self.visit_node(node, context)

    def visit_expression(self, node: "Expression", context: Optional[C]) -> R:
        return self.visit_node(node, context)

    def visit_literal(self, node: "Literal", context: Optional[C]) -> R:
        return self.visit_expression(node, context)

    # Statements

    def visit_create_stream(self, node: "CreateStream", context: Optional[C]) -> R:
        return self.visit_statement(node, context)

    # Table elements

    def visit_column_definition(self, node: "ColumnDefinition", context: Optional[C]) -> R:
        return self.visit_table_element(node, context)

    def visit_primary_key_constraint(
        self, node: "PrimaryKeyConstraint", context: Optional[C]
    ) -> R:
        return self.visit_table_element(node, context)

    # Literals

    def visit_string_literal(self, node: "StringLiteral", context: Optional[C]) -> R:
        return self.visit_literal(node, context)

    def visit_integer_literal(self, node: "IntegerLiteral", context: Optional[C]) -> R:
        return self.visit_literal(node, context)

    def visit_double_literal(self, node: "DoubleLiteral", context: Optional[C]) -> R:
        return self.visit_literal(node, context)

    def visit_boolean_literal(self, node: "BooleanLiteral", context: Optional[C]) -> R:
        return self.visit_literal(node, context)

    def visit_null_literal(self, node: "NullLiteral", context: Optional[C]) -> R:
        return self.visit_literal(node, context)
