"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for principles and snippet reports
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type.

    Plain strings (snippet sources, rendered README) are returned unchanged.
    """
    if isinstance(data, str):
        return data
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "principles" in data:
        return format_principles_table(data["principles"])
    elif isinstance(data, dict) and "snippets" in data:
        return format_snippets_table(data["snippets"])
    elif isinstance(data, dict) and "readme" in data:
        return format_readme_list(data["readme"])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "principles" in data:
        return format_principles_list(data["principles"])
    elif isinstance(data, dict) and "snippets" in data:
        return format_snippets_list(data["snippets"])
    elif isinstance(data, dict) and "readme" in data:
        return format_readme_list(data["readme"])
    return json.dumps(data, indent=2, default=str)


def _render_table(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_principles_table(principles: List[Dict]) -> str:
    """Format principles as a Rich table."""
    if not principles:
        return "No principles found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("ID", style="cyan", width=5)
    table.add_column("Name", style="green", width=32)
    table.add_column("Summary", style="white")

    for principle in principles:
        table.add_row(
            str(principle.get("id", "N/A")),
            str(principle.get("name", "N/A")),
            str(principle.get("summary", "")),
        )
    return _render_table(table)


def format_snippets_table(snippets: List[Dict]) -> str:
    """Format snippet validation reports as a Rich table."""
    if not snippets:
        return "No snippets found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Snippet", style="cyan", width=10)
    table.add_column("Valid", justify="center", width=6)
    table.add_column("Problems", style="red")

    for snippet in snippets:
        valid = snippet.get("valid", False)
        table.add_row(
            str(snippet.get("snippet", "N/A")),
            "[green]yes[/green]" if valid else "[red]no[/red]",
            "\n".join(snippet.get("problems", [])) or "-",
        )
    return _render_table(table)


def format_principles_list(principles: List[Dict]) -> str:
    """Format principles as a detailed list."""
    if not principles:
        return "No principles found."

    lines = []
    for i, principle in enumerate(principles):
        if i > 0:
            lines.append("")
        lines.append(f"Principle: {principle.get('id', 'N/A')}")
        lines.append(f"  Name: {principle.get('name', 'N/A')}")
        lines.append(f"  Summary: {principle.get('summary', 'N/A')}")
        lines.append(f"  Bad: {principle.get('bad_module', 'N/A')}")
        lines.append(f"  Good: {principle.get('good_module', 'N/A')}")
    return "\n".join(lines)


def format_snippets_list(snippets: List[Dict]) -> str:
    """Format snippet validation reports as a detailed list."""
    if not snippets:
        return "No snippets found."

    lines = []
    for snippet in snippets:
        status = "OK" if snippet.get("valid") else "FAILED"
        lines.append(f"{snippet.get('snippet', 'N/A')}: {status}")
        for problem in snippet.get("problems", []):
            lines.append(f"  - {problem}")
    return "\n".join(lines)


def format_readme_list(readme: Dict) -> str:
    """Format a README sync report."""
    lines = [f"README: {readme.get('path', 'N/A')}"]
    if not readme.get("found", True):
        lines.append("  not found")
    lines.append(f"  In sync: {'yes' if readme.get('in_sync') else 'no'}")
    for label in ("matched", "mismatched", "missing", "unexpected"):
        items = readme.get(label) or []
        if items:
            lines.append(f"  {label.capitalize()}: {', '.join(items)}")
    return "\n".join(lines)
