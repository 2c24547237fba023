"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Plain text lines
- JSON and YAML dumps
- Rich tables
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

OUTPUT_FORMATS = ["text", "json", "yaml", "table"]


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)
    elif format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return format_text_output(data)


def format_text_output(data: Any) -> str:
    """Format demo results as plain lines, one block per example."""
    if isinstance(data, dict) and "results" in data:
        blocks = []
        for result in data["results"]:
            header = f"== {result.get('name', 'example')}"
            blocks.append("\n".join([header] + list(result.get("lines", []))))
        return "\n\n".join(blocks)
    if isinstance(data, dict) and "lines" in data:
        return "\n".join(data["lines"])
    if isinstance(data, list):
        return "\n".join(str(item) for item in data)
    return str(data)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    if isinstance(data, dict):
        return format_mapping_table(data)
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_results_table(results: List[Dict[str, Any]]) -> str:
    """Format demo results as a Rich table."""
    if not results:
        return "No examples run."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Example", style="cyan", width=12)
    table.add_column("Output", style="green")

    for result in results:
        table.add_row(str(result.get("name", "N/A")), "\n".join(result.get("lines", [])))

    return _render(table)


def format_mapping_table(data: Dict[str, Any]) -> str:
    """Format a flat mapping as a two-column Rich table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="yellow")
    for key, value in data.items():
        table.add_row(str(key), str(value))
    return _render(table)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
