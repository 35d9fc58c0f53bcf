"""SQL formatting modules."""

from stream_sql_tree.formatter.sql import SqlFormatter, format_sql, quote_identifier, quote_string

__all__ = ["SqlFormatter", "format_sql", "quote_identifier", "quote_string"]
