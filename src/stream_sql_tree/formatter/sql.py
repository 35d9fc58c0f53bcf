"""SQL formatting using the AST visitor pattern.

This module turns statement nodes back into SQL text. The context value passed
through ``accept`` is the current indentation level.
"""

import logging
import math
import re
from typing import List, Optional

from stream_sql_tree.tree.base import Node
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
from stream_sql_tree.tree.visitor import AstVisitor

logger = logging.getLogger(__name__)

_SIMPLE_IDENTIFIER = re.compile(r"[a-z_][a-z0-9_]*")


def quote_identifier(name: str) -> str:
    """Quote an identifier unless it is a plain lower-case name.

    Args:
        name: The identifier (e.g., 'orders', 'Order Items')

    Returns:
        The identifier as written in SQL (e.g., 'orders', '"Order Items"')
    """
    if _SIMPLE_IDENTIFIER.fullmatch(name):
        return name
    return '"' + name.replace('"', '""') + '"'


def quote_string(value: str) -> str:
    """Quote a string literal, doubling embedded single quotes."""
    return "'" + value.replace("'", "''") + "'"


def format_property_key(key: str) -> str:
    """Format a property name such as 'kafka.topic'.

    Dotted names are written as a sequence of identifiers so that connector
    options keep their usual spelling.
    """
    return ".".join(quote_identifier(part) for part in key.split("."))


class SqlFormatter(AstVisitor[str, int]):
    """AST visitor that renders nodes as SQL text.

    Statements are rendered over multiple lines with nested parts indented by
    ``indent_width`` spaces per level. Table elements and expressions render
    to a single line.
    """

    def __init__(self, indent_width: int = 3):
        """Initialize the SQL formatter.

        Args:
            indent_width: Number of spaces per indentation level
        """
        self.indent_width = indent_width

    def visit_create_stream(self, node: CreateStream, context: Optional[int]) -> str:
        """Render a CREATE STREAM statement.

        Args:
            node: The CREATE STREAM node
            context: Indentation level of the statement

        Returns:
            The statement as SQL, without a trailing semicolon
        """
        level = context or 0
        lines: List[str] = []

        header = self._indent(level) + f"CREATE STREAM {quote_identifier(node.name)}"
        if node.table_elements:
            lines.append(header + " (")
            elements = [
                self._indent(level + 1) + element.accept(self, level + 1)
                for element in node.table_elements
            ]
            lines.append(",\n".join(elements))
            lines.append(self._indent(level) + ")")
        else:
            lines.append(header + " ()")

        if not node.properties.is_empty():
            lines.append(self._indent(level) + "WITH (")
            lines.append(self._format_properties(node.properties, level + 1))
            lines.append(self._indent(level) + ")")

        if node.row_format is not None:
            lines.append(self._indent(level) + f"ROW FORMAT {quote_string(node.row_format)}")

        return "\n".join(lines)

    def visit_column_definition(self, node: ColumnDefinition, context: Optional[int]) -> str:
        sql = f"{quote_identifier(node.name)} {node.data_type}"
        if not node.nullable:
            sql += " NOT NULL"
        return sql

    def visit_primary_key_constraint(
        self, node: PrimaryKeyConstraint, context: Optional[int]
    ) -> str:
        columns = ", ".join(quote_identifier(column) for column in node.columns)
        return f"PRIMARY KEY ({columns})"

    def visit_string_literal(self, node: StringLiteral, context: Optional[int]) -> str:
        return quote_string(node.value)

    def visit_integer_literal(self, node: IntegerLiteral, context: Optional[int]) -> str:
        return str(node.value)

    def visit_double_literal(self, node: DoubleLiteral, context: Optional[int]) -> str:
        if math.isnan(node.value) or math.isinf(node.value):
            # No SQL literal exists for these, so fall back to a cast
            return f"CAST({quote_string(str(node.value))} AS DOUBLE)"
        return repr(node.value)

    def visit_boolean_literal(self, node: BooleanLiteral, context: Optional[int]) -> str:
        return "TRUE" if node.value else "FALSE"

    def visit_null_literal(self, node: NullLiteral, context: Optional[int]) -> str:
        return "NULL"

    def _format_properties(self, properties: GenericProperties, level: int) -> str:
        entries = [
            f"{self._indent(level)}{format_property_key(key)} = {value.accept(self, level)}"
            for key, value in properties.items()
        ]
        return ",\n".join(entries)

    def _indent(self, level: int) -> str:
        return " " * (self.indent_width * level)


def format_sql(node: Node, indent: int = 3) -> str:
    """Convenience function to render a node as SQL.

    Args:
        node: The statement, table element or expression to render
        indent: Number of spaces per indentation level

    Returns:
        SQL text for the node
    """
    logger.debug(f"Formatting {type(node).__name__} with indent {indent}")
    return node.accept(SqlFormatter(indent_width=indent), 0)
