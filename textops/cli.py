"""CLI entry point for textops."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Any, Callable

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from textops.config import DEFAULT_CONFIG_TEMPLATE, TextOpsConfig, load_config
from textops.engine import (
    SortOrder,
    Step,
    TransformPipeline,
    TransformResult,
    run_operation,
    selection_stats,
)
from textops.errors import TextOpsError, UserInputError
from textops.host import Selection
from textops.log_config import configure_logging

app = typer.Typer(
    name="textops",
    help="Rewrite a file, a line range, or stdin with small text transforms.",
)

config_app = typer.Typer(help="Manage textops configuration.")
app.add_typer(config_app, name="config")

err_console = Console(stderr=True)

# Exit code for a parse failure that left the text unchanged.
EXIT_DIAGNOSTIC = 2

# Global state
_config: TextOpsConfig | None = None

PathArg = Annotated[
    Path | None,
    typer.Argument(help="File to transform; omit or use '-' to read stdin"),
]
LinesOpt = Annotated[
    str | None,
    typer.Option("--lines", "-l", help="Only transform lines START:END (1-based, inclusive)"),
]
InPlaceOpt = Annotated[
    bool,
    typer.Option("--in-place", "-i", help="Write the result back to PATH instead of stdout"),
]


def _get_config() -> TextOpsConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to textops.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


# ---------------------------------------------------------------------------
# Host plumbing: read, run, write back
# ---------------------------------------------------------------------------


def _is_stdin(path: Path | None) -> bool:
    return path is None or str(path) == "-"


def _read_document(path: Path | None) -> str:
    if _is_stdin(path):
        return sys.stdin.read()
    try:
        return path.read_text()
    except FileNotFoundError:
        raise UserInputError(f"File not found: {path}") from None
    except IsADirectoryError:
        raise UserInputError(f"Not a file: {path}") from None


def _write_document(document: str, path: Path | None, in_place: bool) -> None:
    if in_place:
        path.write_text(document)
        err_console.print(f"[green]Updated[/green] {path}")
    else:
        typer.echo(document, nl=False)


def _show_diagnostic(selection: Selection, result: TransformResult) -> None:
    """Print the document around the failing line with that line highlighted."""
    diag = result.diagnostic
    line = diag.absolute_line(selection.start_line)
    source = diag.source if diag.source is not None else "\n".join(selection.lines)
    err_console.print(
        Syntax(
            source,
            diag.format,
            line_numbers=True,
            highlight_lines={line},
            line_range=(max(1, line - 3), line + 3),
        )
    )
    err_console.print(f"[yellow]Warning:[/yellow] {escape(diag.describe(selection.start_line))}")


def _apply(
    path: Path | None,
    lines: str | None,
    in_place: bool,
    transform: Callable[[str], TransformResult],
) -> None:
    """Run ``transform`` on the resolved selection and emit the whole document."""
    if in_place and _is_stdin(path):
        err_console.print("[red]Error:[/red] --in-place needs a file path")
        raise typer.Exit(1)

    try:
        selection = Selection.from_document(_read_document(path), lines)
        result = transform(selection.text)
    except TextOpsError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if result.diagnostic is not None:
        _show_diagnostic(selection, result)
        raise typer.Exit(EXIT_DIAGNOSTIC)

    _write_document(selection.replace(result.text), path, in_place)


def _run(name: str, path: Path | None, lines: str | None, in_place: bool, **params: Any) -> None:
    _apply(path, lines, in_place, lambda text: run_operation(name, text, _get_config(), **params))


# ---------------------------------------------------------------------------
# Transform commands
# ---------------------------------------------------------------------------


@app.command()
def dedupe(path: PathArg = None, lines: LinesOpt = None, in_place: InPlaceOpt = False) -> None:
    """Remove duplicate lines, keeping the first occurrence."""
    _run("remove-duplicates", path, lines, in_place)


@app.command()
def align(path: PathArg = None, lines: LinesOpt = None, in_place: InPlaceOpt = False) -> None:
    """Align whitespace-separated columns."""
    _run("align-columns", path, lines, in_place)


@app.command()
def sort(
    path: PathArg = None,
    lines: LinesOpt = None,
    in_place: InPlaceOpt = False,
    desc: bool = typer.Option(False, "--desc", help="Sort descending"),
) -> None:
    """Sort lines on their first column, numerically when it looks numeric."""
    _run("sort-desc" if desc else "sort-asc", path, lines, in_place)


@app.command(name="sort-column")
def sort_column(
    path: PathArg = None,
    lines: LinesOpt = None,
    in_place: InPlaceOpt = False,
    column: str = typer.Option("1", "--column", prompt="Column number (starting at 1)"),
    separator: str = typer.Option(
        " ", "--separator", prompt="Column separator (\\t for tab)", help="' ' splits on whitespace runs"
    ),
    order: SortOrder = typer.Option(SortOrder.ASC, "--order", prompt="Sort order"),
) -> None:
    """Sort lines on a chosen column. Prompts for anything not given."""
    _run(
        "sort-by-column",
        path,
        lines,
        in_place,
        column=column,
        separator=separator,
        order=order,
    )


@app.command()
def quote(path: PathArg = None, lines: LinesOpt = None, in_place: InPlaceOpt = False) -> None:
    """Wrap each line in double quotes and append a comma."""
    _run("quote-lines", path, lines, in_place)


@app.command(name="format")
def format_cmd(path: PathArg = None, lines: LinesOpt = None, in_place: InPlaceOpt = False) -> None:
    """Pretty-print JSON or YAML; on a syntax error, highlight the line and leave the text alone."""
    _run("format", path, lines, in_place)


@app.command()
def trim(path: PathArg = None, lines: LinesOpt = None, in_place: InPlaceOpt = False) -> None:
    """Strip leading and trailing whitespace from every line."""
    _run("trim", path, lines, in_place)


@app.command(name="remove-empty")
def remove_empty(path: PathArg = None, lines: LinesOpt = None, in_place: InPlaceOpt = False) -> None:
    """Remove blank and whitespace-only lines."""
    _run("remove-empty", path, lines, in_place)


@app.command(name="clean-k8s")
def clean_k8s(path: PathArg = None, lines: LinesOpt = None, in_place: InPlaceOpt = False) -> None:
    """Strip status, managedFields and other server-set fields from Kubernetes YAML."""
    _run("clean-k8s", path, lines, in_place)


def _parse_step(spec: str) -> Step:
    """Parse ``name`` or ``name:key=value,key=value``."""
    name, _, raw_params = spec.partition(":")
    params: dict[str, str] = {}
    for pair in filter(None, raw_params.split(",")):
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise UserInputError(f"Invalid step parameter '{pair}' in '{spec}': expected key=value")
        params[key.strip()] = value
    return Step(name=name.strip(), params=params)


@app.command()
def chain(
    steps: Annotated[
        list[str],
        typer.Option("--step", "-s", help="Operation to apply, e.g. trim or sort-by-column:column=2"),
    ],
    path: PathArg = None,
    lines: LinesOpt = None,
    in_place: InPlaceOpt = False,
) -> None:
    """Apply several operations in order; nothing is written if any step fails."""
    try:
        pipeline = TransformPipeline([_parse_step(s) for s in steps])
    except TextOpsError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _apply(path, lines, in_place, lambda text: pipeline.apply(text, _get_config()))


@app.command()
def stats(path: PathArg = None, lines: LinesOpt = None) -> None:
    """Show line count, or sum/max/min/avg when every line is a number."""
    try:
        selection = Selection.from_document(_read_document(path), lines)
    except TextOpsError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    typer.echo(selection_stats(selection.text).summary())


# ---------------------------------------------------------------------------
# Config commands
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default textops.yaml in current directory."""
    target = Path("textops.yaml")
    if target.exists() and not force:
        rprint("[yellow]textops.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
