"""Unit tests for GenericProperties."""

import pytest

from stream_sql_tree.tree.nodes import BooleanLiteral, IntegerLiteral, StringLiteral
from stream_sql_tree.tree.properties import GenericProperties


def test_of_mapping_keeps_insertion_order():
    """Test that keys come back in the order they were given."""
    properties = GenericProperties.of(
        {"topic": StringLiteral(value="orders"), "partitions": IntegerLiteral(value=3)}
    )

    assert list(properties.keys()) == ["topic", "partitions"]
    assert list(properties.values()) == [StringLiteral(value="orders"), IntegerLiteral(value=3)]
    assert list(properties.items())[0] == ("topic", StringLiteral(value="orders"))


def test_of_pairs_and_mapping_are_equal():
    pairs = [("a", IntegerLiteral(value=1)), ("b", BooleanLiteral(value=True))]

    assert GenericProperties.of(pairs) == GenericProperties.of(dict(pairs))


def test_of_none_and_existing():
    """Test the empty and pass-through cases of GenericProperties.of."""
    empty = GenericProperties.of(None)
    properties = GenericProperties.of({"a": IntegerLiteral(value=1)})

    assert empty.is_empty()
    assert len(empty) == 0
    assert empty == GenericProperties()
    assert GenericProperties.of(properties) is properties


def test_equality_ignores_order():
    """Test mapping semantics of equality and hashing."""
    first = GenericProperties.of({"a": IntegerLiteral(value=1), "b": IntegerLiteral(value=2)})
    second = GenericProperties.of({"b": IntegerLiteral(value=2), "a": IntegerLiteral(value=1)})

    assert first == second
    assert hash(first) == hash(second)
    assert repr(first) != repr(second)


def test_equality_compares_values():
    first = GenericProperties.of({"a": IntegerLiteral(value=1)})

    assert first != GenericProperties.of({"a": IntegerLiteral(value=2)})
    assert first != GenericProperties.of({"a": StringLiteral(value="1")})
    assert first != GenericProperties.of({"b": IntegerLiteral(value=1)})
    assert first != {"a": IntegerLiteral(value=1)}


def test_lookup():
    """Test read access by key."""
    properties = GenericProperties.of({"format": StringLiteral(value="json")})

    assert properties["format"] == StringLiteral(value="json")
    assert properties.get("format") == StringLiteral(value="json")
    assert properties.get("missing") is None
    assert properties.get("missing", IntegerLiteral(value=0)) == IntegerLiteral(value=0)
    assert "format" in properties
    assert "missing" not in properties
    with pytest.raises(KeyError):
        properties["missing"]


def test_duplicate_keys_are_rejected():
    """Test that duplicate keys raise ValueError."""
    with pytest.raises(ValueError, match="Duplicate property: format"):
        GenericProperties.of(
            [("format", StringLiteral(value="json")), ("format", StringLiteral(value="avro"))]
        )


def test_as_dict_returns_a_copy():
    properties = GenericProperties.of({"a": IntegerLiteral(value=1)})

    copied = properties.as_dict()
    copied["b"] = IntegerLiteral(value=2)

    assert len(properties) == 1
    assert "b" not in properties


def test_repr():
    properties = GenericProperties.of(
        {"format": StringLiteral(value="json"), "strict": BooleanLiteral(value=False)}
    )

    assert repr(properties) == (
        "GenericProperties({'format': StringLiteral(value='json'), "
        "'strict': BooleanLiteral(value=False)})"
    )
