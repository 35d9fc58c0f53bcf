"""Concrete AST node definitions.

This module defines the statement, table element and literal nodes of the
tree. All of them are frozen pydantic models; see ``stream_sql_tree.tree.base``
for the contract they share.
"""

from typing import Any, Optional, Sequence, Tuple

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator

from stream_sql_tree.tree.base import C, Expression, Node, R, Statement, TableElement
from stream_sql_tree.tree.properties import GenericProperties, PropertySource
from stream_sql_tree.tree.visitor import AstVisitor


class CreateStream(Statement):
    """A ``CREATE STREAM`` statement.

    Example:
        CREATE STREAM orders_stream (id BIGINT, payload VARCHAR)
        WITH (format = 'json') ROW FORMAT 'json'

    The node only carries what the parser produced. Checks such as a non-empty
    name or unique column names belong to ``StatementValidator``.

    Attributes:
        name: The name of the stream being created
        table_elements: Column and constraint definitions, in declaration order
        properties: Options from the ``WITH (...)`` clause
        row_format: Row encoding of the stream, if one was given
    """

    name: str = Field(..., description="The stream name")
    table_elements: Tuple[Node, ...] = Field(
        ..., description="Column and constraint definitions in declaration order"
    )
    properties: GenericProperties = Field(..., description="Options from the WITH clause")
    row_format: Optional[str] = Field(default=None, description="Row encoding, e.g. 'json'")

    def __init__(
        self,
        name: str,
        table_elements: Sequence[Node],
        properties: PropertySource,
        row_format: Optional[str] = None,
    ) -> None:
        super().__init__(
            name=name,
            table_elements=table_elements,
            properties=properties,
            row_format=row_format,
        )

    @field_validator("properties", mode="before")
    @classmethod
    def _build_properties(cls, value: Any) -> Any:
        if value is None or isinstance(value, (GenericProperties, str)):
            # None and strings are left for the field validation to reject
            return value
        return GenericProperties.of(value)

    def accept(self, visitor: AstVisitor[R, C], context: Optional[C] = None) -> R:
        """Accept a visitor for CREATE STREAM statements."""
        return visitor.visit_create_stream(self, context)


class ColumnDefinition(TableElement):
    """A column of a relation, e.g. ``id BIGINT NOT NULL``.

    Attributes:
        name: The column name
        data_type: The SQL type name as written
        nullable: Whether the column accepts NULL values
    """

    name: str = Field(..., description="The column name")
    data_type: str = Field(..., description="The SQL type name")
    nullable: bool = Field(default=True, description="Whether this column accepts NULL values")

    def accept(self, visitor: AstVisitor[R, C], context: Optional[C] = None) -> R:
        """Accept a visitor for column definitions."""
        return visitor.visit_column_definition(self, context)


class PrimaryKeyConstraint(TableElement):
    """A ``PRIMARY KEY (col, ...)`` table constraint."""

    columns: Tuple[str, ...] = Field(..., description="Key columns in declaration order")

    def accept(self, visitor: AstVisitor[R, C], context: Optional[C] = None) -> R:
        """Accept a visitor for primary key constraints."""
        return visitor.visit_primary_key_constraint(self, context)


class Literal(Expression):
    """Base class for literal values."""


class StringLiteral(Literal):
    value: StrictStr

    def accept(self, visitor: AstVisitor[R, C], context: Optional[C] = None) -> R:
        return visitor.visit_string_literal(self, context)


class IntegerLiteral(Literal):
    value: StrictInt

    def accept(self, visitor: AstVisitor[R, C], context: Optional[C] = None) -> R:
        return visitor.visit_integer_literal(self, context)


class DoubleLiteral(Literal):
    value: StrictFloat

    def accept(self, visitor: AstVisitor[R, C], context: Optional[C] = None) -> R:
        return visitor.visit_double_literal(self, context)


class BooleanLiteral(Literal):
    value: StrictBool

    def accept(self, visitor: AstVisitor[R, C], context: Optional[C] = None) -> R:
        return visitor.visit_boolean_literal(self, context)


class NullLiteral(Literal):
    def accept(self, visitor: AstVisitor[R, C], context: Optional[C] = None) -> R:
        return visitor.visit_null_literal(self, context)
