"""Output formatters for Aura Session."""

import json
from typing import Any

import yaml
from rich.table import Table

from .console import get_console

console = get_console()


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and print data in the requested format (table, json, yaml)."""
    if output_format == "json":
        console.print_json(json.dumps(data, default=str))
    elif output_format == "yaml":
        console.print(yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip())
    else:
        format_table(data)


def format_table(data: Any) -> None:
    """Print a (possibly nested) dict as a two-column key/value table."""
    table = Table(show_header=True, header_style="aura.heading")
    table.add_column("Key")
    table.add_column("Value")
    for key, value in _flatten(data):
        table.add_row(key, str(value))
    console.print(table)


def _flatten(data: Any, prefix: str = "") -> list[tuple[str, Any]]:
    if not isinstance(data, dict):
        return [(prefix or "value", data)]
    rows = []
    for key, value in data.items():
        name = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            rows.extend(_flatten(value, name))
        else:
            rows.append((name, value))
    return rows


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[aura.error]Error:[/aura.error] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[aura.success]Success:[/aura.success] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[aura.warning]Warning:[/aura.warning] {message}")
