"""Unit tests for SQL formatting."""

import pytest

from stream_sql_tree.formatter.sql import (
    SqlFormatter,
    format_property_key,
    format_sql,
    quote_identifier,
    quote_string,
)
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


def test_format_create_stream(keyed_stream):
    """Test the full layout of a CREATE STREAM statement."""
    expected = (
        "CREATE STREAM orders_stream (\n"
        "   order_id BIGINT NOT NULL,\n"
        "   payload VARCHAR,\n"
        "   PRIMARY KEY (order_id)\n"
        ")\n"
        "WITH (\n"
        "   format = 'json',\n"
        "   kafka.topic = 'orders'\n"
        ")\n"
        "ROW FORMAT 'json'"
    )

    assert format_sql(keyed_stream) == expected


def test_format_with_custom_indent(orders_stream):
    sql = format_sql(orders_stream, indent=2)

    assert sql.splitlines()[1] == "  order_id BIGINT NOT NULL,"
    assert "  format = 'json'" in sql.splitlines()


def test_format_minimal_stream():
    """Test that empty parts are omitted."""
    assert format_sql(CreateStream("s", [], {}, None)) == "CREATE STREAM s ()"


def test_format_stream_without_row_format(col_a):
    sql = format_sql(CreateStream("s", [col_a], {"retries": IntegerLiteral(value=3)}, None))

    assert sql == (
        "CREATE STREAM s (\n"
        "   order_id BIGINT NOT NULL\n"
        ")\n"
        "WITH (\n"
        "   retries = 3\n"
        ")"
    )


def test_format_nested_level(orders_stream):
    """Test rendering with a non-zero starting indentation level."""
    sql = orders_stream.accept(SqlFormatter(indent_width=4), 1)

    lines = sql.splitlines()
    assert lines[0] == "    CREATE STREAM orders_stream ("
    assert lines[1] == "        order_id BIGINT NOT NULL,"
    assert lines[3] == "    )"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("orders", "orders"),
        ("_tmp1", "_tmp1"),
        ("Orders", '"Orders"'),
        ("order items", '"order items"'),
        ('say "hi"', '"say ""hi"""'),
        ("1st", '"1st"'),
        ("orders\n", '"orders\n"'),
        ("", '""'),
    ],
)
def test_quote_identifier(name, expected):
    assert quote_identifier(name) == expected


def test_quote_string():
    assert quote_string("it's") == "'it''s'"
    assert quote_string("") == "''"


def test_format_property_key():
    assert format_property_key("kafka.topic") == "kafka.topic"
    assert format_property_key("Kafka.Topic") == '"Kafka"."Topic"'


def test_quoted_stream_and_column_names():
    stream = CreateStream(
        "Order Events", [ColumnDefinition(name="Id", data_type="INT")], {}, "json"
    )

    assert format_sql(stream).splitlines() == [
        'CREATE STREAM "Order Events" (',
        '   "Id" INT',
        ")",
        "ROW FORMAT 'json'",
    ]


@pytest.mark.parametrize(
    "node, expected",
    [
        (StringLiteral(value="o'clock"), "'o''clock'"),
        (IntegerLiteral(value=-42), "-42"),
        (DoubleLiteral(value=1.5), "1.5"),
        (DoubleLiteral(value=float("inf")), "CAST('inf' AS DOUBLE)"),
        (BooleanLiteral(value=True), "TRUE"),
        (BooleanLiteral(value=False), "FALSE"),
        (NullLiteral(), "NULL"),
        (ColumnDefinition(name="ts", data_type="TIMESTAMP"), "ts TIMESTAMP"),
        (PrimaryKeyConstraint(columns=["a", "B"]), 'PRIMARY KEY (a, "B")'),
    ],
)
def test_format_single_nodes(node, expected):
    assert format_sql(node) == expected


def test_names_with_trailing_newline_are_quoted():
    """Test that a newline at the end of a name never reaches the SQL unquoted."""
    stream = CreateStream("orders\n", [ColumnDefinition(name="a\n", data_type="INT")], {}, None)

    assert format_sql(stream) == 'CREATE STREAM "orders\n" (\n   "a\n" INT\n)'
