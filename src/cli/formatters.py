"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Rich tables for demo and drink listings
- List formatting for detailed views
- JSON and YAML output
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, default_style=None, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    elif isinstance(data, dict) and "drinks" in data:
        return format_drinks_table(data["drinks"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    elif isinstance(data, dict) and "drinks" in data:
        return format_drinks_list(data["drinks"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_demos_table(demos: List[Dict]) -> str:
    """Format demos as a table."""
    if not demos:
        return "No demos found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category", style="green")
    table.add_column("Description")

    for demo in demos:
        table.add_row(
            str(demo.get("name", "N/A")),
            str(demo.get("category", "N/A")),
            str(demo.get("description", "")),
        )

    return _render(table)


def format_drinks_table(drinks: List[Dict]) -> str:
    """Format drink menu entries as a table."""
    if not drinks:
        return "No drinks available."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Index", style="yellow", justify="right")
    table.add_column("Drink", style="cyan")

    for drink in drinks:
        table.add_row(str(drink.get("index", "N/A")), str(drink.get("name", "N/A")))

    return _render(table)


def format_demos_list(demos: List[Dict]) -> str:
    """Format demos as a detailed list grouped by category."""
    if not demos:
        return "No demos found."

    lines = []
    current_category = None
    for demo in demos:
        category = demo.get("category", "N/A")
        if category != current_category:
            if lines:
                lines.append("")
            lines.append(f"{category}:")
            current_category = category
        lines.append(f"  {demo.get('name', 'N/A')} - {demo.get('description', '')}")

    return "\n".join(lines)


def format_drinks_list(drinks: List[Dict]) -> str:
    """Format drink menu entries as a numbered list."""
    if not drinks:
        return "No drinks available."

    return "\n".join(f"{d.get('index', 'N/A')}: {d.get('name', 'N/A')}" for d in drinks)
