from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .paths import UniPaths
from .util import json_dumps_pretty


OUTPUT_FORMATS = ("table", "text", "json", "markdown")
COLOR_MODES = ("auto", "always", "never")


def build_console(color: str) -> Console:
    c = color.lower()
    if c == "always":
        return Console(force_terminal=True, no_color=False)
    if c == "never":
        return Console(no_color=True)
    return Console()


def render_paths(
    *,
    layout: UniPaths,
    output_format: str,
    color: str,
) -> str | None:
    fmt = output_format.lower()
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"unknown format: {output_format}")

    rows = layout.as_dict()

    if fmt == "json":
        return json_dumps_pretty(rows)

    if fmt == "markdown":
        lines = []
        lines.append("| name | path |")
        lines.append("|---|---|")
        for name, path in rows.items():
            cell = path.replace("|", "\\|")
            lines.append(f"| {name} | `{cell}` |")
        return "\n".join(lines)

    console = build_console(color)

    if fmt == "table":
        table = Table(title=None, show_header=True, header_style="bold cyan")
        table.add_column("name", style="cyan", no_wrap=True)
        # Paths can be long; fold rather than truncate.
        table.add_column("path", overflow="fold")
        for name, path in rows.items():
            table.add_row(name, path)
        console.print(table)
        return None

    # text mode
    width = max(len(name) for name in rows)
    for name, path in rows.items():
        console.print(Text(name.ljust(width) + "  ", style="cyan") + Text(path))
    return None
