"""Semantic checks for statement nodes.

Nodes accept whatever the parser hands them. This module holds the checks a
binder runs before a statement is planned: names must be present, columns
unique, key columns declared, and so on.
"""

import logging
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from stream_sql_tree.tree.base import Node
from stream_sql_tree.tree.nodes import ColumnDefinition, CreateStream, PrimaryKeyConstraint
from stream_sql_tree.tree.visitor import AstVisitor

logger = logging.getLogger(__name__)


class ValidationIssue(BaseModel):
    """A single problem found in a statement.

    Attributes:
        code: Stable identifier of the kind of problem (e.g., 'duplicate-column')
        message: Human-readable description
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Identifier of the kind of problem")
    message: str = Field(..., description="Human-readable description")


class _TableElements:
    """Table elements of a statement, sorted by kind."""

    def __init__(self) -> None:
        self.columns: List[ColumnDefinition] = []
        self.primary_keys: List[PrimaryKeyConstraint] = []


class _TableElementCollector(AstVisitor[None, _TableElements]):
    def visit_column_definition(
        self, node: ColumnDefinition, context: Optional[_TableElements]
    ) -> None:
        context.columns.append(node)

    def visit_primary_key_constraint(
        self, node: PrimaryKeyConstraint, context: Optional[_TableElements]
    ) -> None:
        context.primary_keys.append(node)


class StatementValidator(AstVisitor[List[ValidationIssue], None]):
    """AST visitor that reports semantic problems in statements.

    Visiting a node the validator has no rules for raises
    ``UnsupportedNodeError``.
    """

    def __init__(self, known_row_formats: Optional[Iterable[str]] = None):
        """Initialize the statement validator.

        Args:
            known_row_formats: Accepted row formats (case-insensitive). When
                None, any row format is accepted.
        """
        self.known_row_formats = (
            None
            if known_row_formats is None
            else {row_format.lower() for row_format in known_row_formats}
        )

    def visit_create_stream(self, node: CreateStream, context: None) -> List[ValidationIssue]:
        """Check a CREATE STREAM statement.

        Args:
            node: The CREATE STREAM node

        Returns:
            The problems found, in the order they were detected
        """
        issues: List[ValidationIssue] = []

        if not node.name.strip():
            issues.append(ValidationIssue(code="empty-name", message="Stream name is empty"))

        elements = _TableElements()
        collector = _TableElementCollector()
        for element in node.table_elements:
            element.accept(collector, elements)

        issues.extend(self._check_columns(node.name, elements.columns))
        issues.extend(self._check_primary_keys(elements))

        for key in node.properties.keys():
            if not key.strip():
                issues.append(
                    ValidationIssue(code="empty-property-key", message="Property name is empty")
                )

        if (
            node.row_format is not None
            and self.known_row_formats is not None
            and node.row_format.lower() not in self.known_row_formats
        ):
            issues.append(
                ValidationIssue(
                    code="unknown-row-format",
                    message=(
                        f"Unknown row format '{node.row_format}'. "
                        f"Expected one of: {', '.join(sorted(self.known_row_formats))}"
                    ),
                )
            )

        logger.debug(f"Validated stream {node.name!r}: {len(issues)} issue(s)")
        return issues

    def _check_columns(
        self, stream_name: str, columns: List[ColumnDefinition]
    ) -> List[ValidationIssue]:
        if not columns:
            return [
                ValidationIssue(
                    code="no-columns", message=f"Stream '{stream_name}' defines no columns"
                )
            ]

        issues = []
        seen = set()
        for column in columns:
            folded = column.name.lower()
            if folded in seen:
                issues.append(
                    ValidationIssue(
                        code="duplicate-column",
                        message=f"Column '{column.name}' is defined more than once",
                    )
                )
            seen.add(folded)
        return issues

    def _check_primary_keys(self, elements: _TableElements) -> List[ValidationIssue]:
        issues = []
        if len(elements.primary_keys) > 1:
            issues.append(
                ValidationIssue(
                    code="multiple-primary-keys",
                    message="More than one PRIMARY KEY constraint is declared",
                )
            )

        column_names = {column.name.lower() for column in elements.columns}
        for constraint in elements.primary_keys:
            for key_column in constraint.columns:
                if key_column.lower() not in column_names:
                    issues.append(
                        ValidationIssue(
                            code="unknown-key-column",
                            message=f"Primary key column '{key_column}' is not defined",
                        )
                    )
        return issues


def validate_statement(
    node: Node, known_row_formats: Optional[Iterable[str]] = None
) -> List[ValidationIssue]:
    """Convenience function to validate a statement.

    Args:
        node: The statement to check
        known_row_formats: Accepted row formats, or None to accept any

    Returns:
        The problems found; an empty list means the statement is valid
    """
    return node.accept(StatementValidator(known_row_formats))
