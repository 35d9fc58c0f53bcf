#!/usr/bin/env python3
"""Example of building, comparing and visiting a CREATE STREAM statement.

Run it after installing the package:

    python examples/create_stream_example.py
"""

from stream_sql_tree import (
    AstVisitor,
    ColumnDefinition,
    CreateStream,
    IntegerLiteral,
    PrimaryKeyConstraint,
    StringLiteral,
    dumps,
    format_sql,
    validate_statement,
)


def create_example_stream(row_format="json"):
    """Build the statement a parser would produce for an orders topic."""
    return CreateStream(
        "orders_stream",
        [
            ColumnDefinition(name="order_id", data_type="BIGINT", nullable=False),
            ColumnDefinition(name="customer_id", data_type="BIGINT"),
            ColumnDefinition(name="amount", data_type="DECIMAL"),
            PrimaryKeyConstraint(columns=["order_id"]),
        ],
        {
            "connector": StringLiteral(value="kafka"),
            "kafka.topic": StringLiteral(value="orders"),
            "kafka.partitions": IntegerLiteral(value=8),
        },
        row_format,
    )


class ColumnCounter(AstVisitor):
    """Custom visitor that counts the columns of a statement."""

    def visit_create_stream(self, node, context):
        return sum(element.accept(self, context) for element in node.table_elements)

    def visit_column_definition(self, node, context):
        return 1

    def visit_primary_key_constraint(self, node, context):
        return 0


def main():
    stream = create_example_stream()

    print("=" * 80)
    print("SQL")
    print("=" * 80)
    print(format_sql(stream))
    print()

    print("=" * 80)
    print("Tree document")
    print("=" * 80)
    print(dumps(stream))
    print()

    print("Columns:", stream.accept(ColumnCounter()))
    print("Equal to a fresh copy:", stream == create_example_stream())
    print("Equal to the avro variant:", stream == create_example_stream("avro"))
    print("Validation issues:", validate_statement(stream, ["json", "avro"]))


if __name__ == "__main__":
    main()
