"""Conversion between AST nodes and JSON tree documents.

A tree document is a JSON object with a ``"type"`` key naming the node class
and one key per node field, for example::

    {
        "type": "CreateStream",
        "name": "orders_stream",
        "table_elements": [
            {"type": "ColumnDefinition", "name": "id", "data_type": "BIGINT", "nullable": false}
        ],
        "properties": {"format": {"type": "StringLiteral", "value": "json"}},
        "row_format": "json"
    }

Properties are written as a JSON object whose values are expression documents,
so property names never collide with the ``"type"`` tag.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Type, Union

from pydantic import ValidationError

from stream_sql_tree.tree.base import Node, node_kind
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

logger = logging.getLogger(__name__)

TYPE_KEY = "type"

NODE_TYPES: Dict[str, Type[Node]] = {
    cls.__name__: cls
    for cls in (
        CreateStream,
        ColumnDefinition,
        PrimaryKeyConstraint,
        StringLiteral,
        IntegerLiteral,
        DoubleLiteral,
        BooleanLiteral,
        NullLiteral,
    )
}


class TreeDecodeError(ValueError):
    """Raised when a tree document cannot be turned into nodes."""


class TreeBuilder:
    """Builds AST nodes from tree documents and tree documents from nodes."""

    @staticmethod
    def to_dict(node: Node) -> Dict[str, Any]:
        """Encode a node and its children as a JSON-compatible dict.

        Args:
            node: The node to encode

        Returns:
            A dict tagged with the node class under ``"type"``
        """
        data: Dict[str, Any] = {TYPE_KEY: node_kind(node)}
        for field_name in type(node).model_fields:
            data[field_name] = TreeBuilder._encode_value(getattr(node, field_name))
        return data

    @staticmethod
    def from_dict(data: Any) -> Node:
        """Decode a tree document into a node.

        Args:
            data: A dict produced by ``to_dict`` or parsed from JSON

        Returns:
            The decoded node

        Raises:
            TreeDecodeError: If the document is malformed or names an unknown node type
        """
        if not isinstance(data, dict):
            raise TreeDecodeError(f"Expected a node object, got {type(data).__name__}")

        type_name = data.get(TYPE_KEY)
        if not isinstance(type_name, str):
            raise TreeDecodeError(f"Node object needs a string '{TYPE_KEY}' key")

        node_class = NODE_TYPES.get(type_name)
        if node_class is None:
            raise TreeDecodeError(f"Unknown node type: {type_name}")

        model_fields = node_class.model_fields
        unknown = sorted(name for name in data if name != TYPE_KEY and name not in model_fields)
        if unknown:
            raise TreeDecodeError(f"Invalid {type_name} node: unknown fields {unknown}")
        missing = sorted(
            name for name, info in model_fields.items() if info.is_required() and name not in data
        )
        if missing:
            raise TreeDecodeError(f"Invalid {type_name} node: missing fields {missing}")

        fields: Dict[str, Any] = {}
        for field_name, raw_value in data.items():
            if field_name == TYPE_KEY:
                continue
            if model_fields[field_name].annotation is GenericProperties:
                fields[field_name] = TreeBuilder._decode_properties(raw_value)
            else:
                fields[field_name] = TreeBuilder._decode_value(raw_value)

        logger.debug(f"Decoding {type_name} with fields {sorted(fields)}")
        try:
            return node_class.model_validate(fields)
        except ValidationError as e:
            raise TreeDecodeError(f"Invalid {type_name} node: {e}") from e

    @staticmethod
    def _encode_value(value: Any) -> Any:
        if isinstance(value, Node):
            return TreeBuilder.to_dict(value)
        if isinstance(value, GenericProperties):
            return {key: TreeBuilder.to_dict(expression) for key, expression in value.items()}
        if isinstance(value, tuple):
            return [TreeBuilder._encode_value(item) for item in value]
        return value

    @staticmethod
    def _decode_value(value: Any) -> Any:
        if isinstance(value, dict):
            return TreeBuilder.from_dict(value)
        if isinstance(value, list):
            return [TreeBuilder._decode_value(item) for item in value]
        return value

    @staticmethod
    def _decode_properties(value: Any) -> Any:
        if not isinstance(value, dict):
            raise TreeDecodeError(
                f"Expected an object for properties, got {type(value).__name__}"
            )
        return {key: TreeBuilder.from_dict(expression) for key, expression in value.items()}


def dumps(node: Node, indent: int = 2) -> str:
    """Serialize a node to a JSON tree document."""
    return json.dumps(TreeBuilder.to_dict(node), indent=indent)


def loads(text: str) -> Node:
    """Parse a JSON tree document into a node.

    Raises:
        TreeDecodeError: If the text is not valid JSON or not a valid tree document
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeDecodeError(f"Invalid JSON: {e}") from e
    return TreeBuilder.from_dict(data)


def load_file(path: Union[str, Path]) -> Node:
    """Read a JSON tree document from ``path``."""
    path = Path(path)
    logger.debug(f"Loading tree document from {path}")
    return loads(path.read_text(encoding="utf-8"))
