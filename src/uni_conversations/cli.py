from __future__ import annotations

import typer

from .paths import (
    get_archive_dir,
    get_db_path,
    get_exclude_config_path,
    get_index_dir,
    get_uni_dir,
    resolve_layout,
)
from .render import COLOR_MODES, OUTPUT_FORMATS, render_paths


app = typer.Typer(add_completion=False, no_args_is_help=True)

RESOLVERS = {
    "uni": get_uni_dir,
    "archive": get_archive_dir,
    "index": get_index_dir,
    "db": get_db_path,
    "exclude": get_exclude_config_path,
}


def _normalize_choice(value: str, allowed: tuple[str, ...], flag: str) -> str:
    v = (value or "").strip().lower()
    if v in allowed:
        return v
    typer.echo(f"invalid {flag}: {value!r} (choose one of: {', '.join(allowed)})", err=True)
    raise typer.Exit(code=2)


@app.command()
def show(
    output_format: str = typer.Option(
        "table",
        "--format",
        help="Output format: table, text, json, markdown.",
        show_choices=True,
        case_sensitive=False,
    ),
    color: str = typer.Option(
        "auto",
        "--color",
        help="Color mode: auto, always, never.",
        show_choices=True,
        case_sensitive=False,
    ),
    json_out: bool = typer.Option(False, "--json", help="Alias for --format json."),
):
    """Print every resolved uni path for the current environment."""
    output_format = _normalize_choice("json" if json_out else output_format, OUTPUT_FORMATS, "--format")
    color = _normalize_choice(color, COLOR_MODES, "--color")

    rendered = render_paths(layout=resolve_layout(), output_format=output_format, color=color)
    if rendered is not None:
        typer.echo(rendered)


@app.command()
def get(
    name: str = typer.Argument(..., help="One of: uni, archive, index, db, exclude."),
):
    """Print a single path, undecorated (e.g. `cd "$(uni-paths get index)"`)."""
    key = _normalize_choice(name, tuple(RESOLVERS), "name")
    typer.echo(RESOLVERS[key]())
