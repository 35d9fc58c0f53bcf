"""Base classes for the SQL abstract syntax tree.

Every node in the tree is an immutable pydantic model. Freezing the model gives
each node the same contract:

* equality is field-wise and deep, and only nodes of the exact same class
  compare equal;
* the hash is computed from the field values in declared order, so equal nodes
  hash equally;
* ``render()`` (and ``repr()``) produce a deterministic ``Class(field=value)``
  string;
* ``accept()`` dispatches to the visitor method for the node's concrete class.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from stream_sql_tree.tree.visitor import AstVisitor

R = TypeVar("R")
C = TypeVar("C")


class Node(ABC, BaseModel):
    """Base class for all AST nodes.

    Nodes are constructed once, fully populated, and never change afterwards.
    Tree algorithms (formatting, validation, serialization) are written as
    visitors instead of methods on the nodes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @abstractmethod
    def accept(self, visitor: "AstVisitor[R, C]", context: Optional[C] = None) -> R:
        """Accept a visitor for the visitor pattern.

        Args:
            visitor: The visitor to accept
            context: Opaque value handed to the visitor unchanged

        Returns:
            Result of the visitor method for this node's class
        """
        pass

    def render(self) -> str:
        """Return a deterministic, human-readable representation of the node.

        The output lists every field in declared order and is meant for
        debugging and test diffs. It is not SQL; see ``format_sql`` for that.
        """
        return repr(self)


class Statement(Node):
    """Base class for top-level statements."""


class Expression(Node):
    """Base class for expressions."""


class TableElement(Node):
    """Base class for the column and constraint definitions of a relation."""


def node_kind(node: Any) -> str:
    """Name used for a node in messages and tree documents."""
    return type(node).__name__
