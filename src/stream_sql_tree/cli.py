"""Command-line interface for stream-sql-tree.

This module provides a CLI for formatting, inspecting and validating
statements stored as JSON tree documents.
"""

import logging
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable
from typing_extensions import Annotated

from stream_sql_tree.config import Config
from stream_sql_tree.formatter.sql import format_sql
from stream_sql_tree.tree.base import Node
from stream_sql_tree.tree.builder import load_file
from stream_sql_tree.tree.nodes import ColumnDefinition, CreateStream, PrimaryKeyConstraint
from stream_sql_tree.tree.visitor import AstVisitor
from stream_sql_tree.validator.statement import validate_statement

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="stream-sql-tree",
    help="Format, inspect and validate CREATE STREAM statement trees",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def get_config(indent: Optional[int] = None, log_level: Optional[str] = None) -> Config:
    """Get configuration from environment or CLI options.

    Args:
        indent: Override the formatter indent from environment
        log_level: Override the log level from environment

    Returns:
        Config instance, with logging configured
    """
    overrides: Dict[str, Any] = {}
    if indent is not None:
        overrides["indent"] = indent
    if log_level is not None:
        overrides["log_level"] = log_level

    config = Config(**overrides)
    config.configure_logging()
    logger.debug(f"Using {config!r}")
    return config


def load_create_stream(path: Path) -> CreateStream:
    """Load a tree document and check that it holds a CREATE STREAM statement.

    Raises:
        ValueError: If the document is invalid or holds another kind of node
    """
    node = load_file(path)
    if not isinstance(node, CreateStream):
        raise ValueError(f"{path} holds a {type(node).__name__} node, not a CreateStream")
    return node


class _ElementRowVisitor(AstVisitor[Tuple[str, str, str], None]):
    """Turns table elements into (name, type, nullable) display rows."""

    def visit_column_definition(
        self, node: ColumnDefinition, context: None
    ) -> Tuple[str, str, str]:
        return node.name, node.data_type, "NULL" if node.nullable else "NOT NULL"

    def visit_primary_key_constraint(
        self, node: PrimaryKeyConstraint, context: None
    ) -> Tuple[str, str, str]:
        return "PRIMARY KEY", ", ".join(node.columns), ""


def _fail(error: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


@app.command(name="format")
def format_command(
    path: Annotated[Path, typer.Argument(help="JSON tree document to format")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file path (stdout if not specified)"),
    ] = None,
    indent: Annotated[
        Optional[int], typer.Option("--indent", min=0, help="Spaces per indentation level")
    ] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
) -> None:
    """Render the statement in a tree document as SQL.

    Example:
        stream-sql-tree format orders_stream.json

        stream-sql-tree format orders_stream.json --indent 2 --output orders_stream.sql
    """
    try:
        config = get_config(indent, log_level)
        node: Node = load_file(path)
        sql = format_sql(node, indent=config.indent)
    except Exception as e:
        _fail(e)

    if output:
        output.write_text(sql + "\n", encoding="utf-8")
        console.print(f"[green]✓[/green] SQL written to {output}")
    else:
        console.print(sql, markup=False, highlight=False, soft_wrap=True)


@app.command()
def show(
    path: Annotated[Path, typer.Argument(help="JSON tree document holding a CREATE STREAM")],
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
) -> None:
    """Display the columns and properties of a CREATE STREAM statement.

    Example:
        stream-sql-tree show orders_stream.json
    """
    try:
        get_config(log_level=log_level)
        statement = load_create_stream(path)

        elements_table = RichTable(title=f"Stream: {escape(statement.name)}")
        elements_table.add_column("Name", style="cyan")
        elements_table.add_column("Type", style="magenta")
        elements_table.add_column("Nullable", style="yellow")
        row_visitor = _ElementRowVisitor()
        for element in statement.table_elements:
            elements_table.add_row(*(escape(cell) for cell in element.accept(row_visitor)))

        properties_table = RichTable(title="Properties")
        properties_table.add_column("Key", style="cyan")
        properties_table.add_column("Value", style="green")
        for key, value in statement.properties.items():
            properties_table.add_row(escape(key), escape(format_sql(value)))
    except Exception as e:
        _fail(e)

    console.print(elements_table)
    if not statement.properties.is_empty():
        console.print(properties_table)
    row_format = "(none)" if statement.row_format is None else repr(statement.row_format)
    console.print(f"Row format: {row_format}", markup=False)


@app.command()
def check(
    path: Annotated[Path, typer.Argument(help="JSON tree document holding a CREATE STREAM")],
    any_row_format: Annotated[
        bool, typer.Option("--any-row-format", help="Accept any row format")
    ] = False,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
) -> None:
    """Validate a CREATE STREAM statement.

    Exits with status 1 when problems are found.

    Example:
        stream-sql-tree check orders_stream.json
    """
    try:
        config = get_config(log_level=log_level)
        statement = load_create_stream(path)
        known_row_formats = None if any_row_format else config.known_row_formats
        issues = validate_statement(statement, known_row_formats)
    except Exception as e:
        _fail(e)

    if not issues:
        console.print(f"[green]✓[/green] {escape(statement.name)} is valid")
        return

    for issue in issues:
        console.print(f"[red]✗[/red] {issue.code}: {escape(issue.message)}")
    raise typer.Exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
