"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML output
- Rich tables for collections
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List, Optional, Tuple

import yaml
from rich.console import Console
from rich.table import Table

TABLE_COLUMNS: Dict[str, List[Tuple[str, str]]] = {
    "sections": [("title", "Title"), ("level", "Level"), ("code_blocks", "Code"),
                 ("images", "Images"), ("numbered_steps", "Steps")],
    "accounts": [("id", "ID"), ("account_type", "Type"), ("status", "Status"),
                 ("balance", "Balance"), ("imported_at", "Imported At")],
    "steps": [("number", "#"), ("text", "Step")],
    "violations": [("number", "#"), ("text", "Violation")],
}


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def _plain(data: Any) -> Any:
    """Round-trip through JSON so YAML only sees plain types."""
    return json.loads(json.dumps(data, default=str))


def _collection(data: Any) -> Optional[Tuple[str, List[Any]]]:
    if isinstance(data, dict):
        for key in TABLE_COLUMNS:
            if isinstance(data.get(key), list):
                return key, data[key]
    return None


def _rows(items: List[Any]) -> List[Dict[str, Any]]:
    # Plain strings are numbered so they fit the two-column layouts
    return [
        item if isinstance(item, dict) else {"number": index, "text": item}
        for index, item in enumerate(items, start=1)
    ]


def _cell(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(v) for v in value) if value else "-"
    if value is None:
        return "-"
    return str(value)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    collection = _collection(data)
    if collection is None:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)

    key, items = collection
    if not items:
        return f"No {key} found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    columns = TABLE_COLUMNS[key]
    for _, header in columns:
        table.add_column(header)
    for row in _rows(items):
        table.add_row(*(_cell(row.get(field)) for field, _ in columns))

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    collection = _collection(data)
    if collection is None:
        return json.dumps(data, indent=2, default=str)

    key, items = collection
    if not items:
        return f"No {key} found."

    lines: List[str] = []
    columns = TABLE_COLUMNS[key]
    for row in _rows(items):
        for field, header in columns:
            lines.append(f"{header}: {_cell(row.get(field))}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"
