"""Shared fixtures for stream-sql-tree tests."""

import pytest

from stream_sql_tree.tree.nodes import (
    ColumnDefinition,
    CreateStream,
    PrimaryKeyConstraint,
    StringLiteral,
)


@pytest.fixture
def col_a() -> ColumnDefinition:
    return ColumnDefinition(name="order_id", data_type="BIGINT", nullable=False)


@pytest.fixture
def col_b() -> ColumnDefinition:
    return ColumnDefinition(name="payload", data_type="VARCHAR")


@pytest.fixture
def lit_expr_json() -> StringLiteral:
    return StringLiteral(value="json")


@pytest.fixture
def orders_stream(col_a, col_b, lit_expr_json) -> CreateStream:
    """The stream used throughout the tests: two columns, one property, JSON rows."""
    return CreateStream("orders_stream", [col_a, col_b], {"format": lit_expr_json}, "json")


@pytest.fixture
def keyed_stream(col_a, col_b) -> CreateStream:
    return CreateStream(
        "orders_stream",
        [col_a, col_b, PrimaryKeyConstraint(columns=["order_id"])],
        {"format": StringLiteral(value="json"), "kafka.topic": StringLiteral(value="orders")},
        "json",
    )
