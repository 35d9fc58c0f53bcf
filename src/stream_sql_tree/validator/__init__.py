"""Statement validation modules."""

from stream_sql_tree.validator.statement import (
    StatementValidator,
    ValidationIssue,
    validate_statement,
)

__all__ = ["StatementValidator", "ValidationIssue", "validate_statement"]
