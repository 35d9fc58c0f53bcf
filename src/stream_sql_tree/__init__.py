"""Stream SQL Tree - immutable AST nodes for CREATE STREAM statements."""

from stream_sql_tree.formatter.sql import SqlFormatter, format_sql
from stream_sql_tree.tree.base import Expression, Node, Statement, TableElement
from stream_sql_tree.tree.builder import TreeBuilder, TreeDecodeError, dumps, load_file, loads
from stream_sql_tree.tree.nodes import (
    BooleanLiteral,
    ColumnDefinition,
    CreateStream,
    DoubleLiteral,
    IntegerLiteral,
    NullLiteral,
    PrimaryKeyConstraint,
    StringLiteral,
)
from stream_sql_tree.tree.properties import GenericProperties
from stream_sql_tree.tree.visitor import AstVisitor, UnsupportedNodeError
from stream_sql_tree.validator.statement import (
    StatementValidator,
    ValidationIssue,
    validate_statement,
)

__version__ = "0.1.0"

__all__ = [
    "Node",
    "Statement",
    "Expression",
    "TableElement",
    "CreateStream",
    "ColumnDefinition",
    "PrimaryKeyConstraint",
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
    "dumps",
    "loads",
    "load_file",
    "SqlFormatter",
    "format_sql",
    "StatementValidator",
    "ValidationIssue",
    "validate_statement",
]
