"""SQL abstract syntax tree: node contract, concrete nodes and visitors."""

from stream_sql_tree.tree.base import Expression, Node, Statement, TableElement
from stream_sql_tree.tree.builder import TreeBuilder, TreeDecodeError
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
from stream_sql_tree.tree.properties import GenericProperties
from stream_sql_tree.tree.visitor import AstVisitor, UnsupportedNodeError

__all__ = [
    "Node",
    "Statement",
    "Expression",
    "TableElement",
    "CreateStream",
    "ColumnDefinition",
    "PrimaryKeyConstraint",
    "Literal",
    "StringLiteral",
    "IntegerLiteral",
    "DoubleLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "GenericProperties",
    "AstVisitor",
    "UnsupportedNodeError",
    "TreeBuilder",
    "TreeDecodeError",
]
