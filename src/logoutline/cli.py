# src/logoutline/cli.py
"""
logoutline Command Line Interface (CLI).

This module implements the terminal front end using `typer` and `rich`. It is
a thin shell over :func:`logoutline.pipelines.run_outline`; all parsing and
tree building happens in the library.

Commands
--------
- **outline**: Show the job tree, grouped by realization, with summed elapsed times.
- **blocks**: List the flat job blocks with level, offsets and title line.
- **search**: Find jobs by title substring (case-insensitive).
- **render**: Write an HTML view of the log with navigable block anchors.

Usage
-----
    $ logoutline outline run.log
    $ logoutline outline run.log --json > outline.json
    $ logoutline search run.log "grid"
    $ logoutline render run.log -o run.html
"""

from __future__ import annotations

import json
import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from logoutline.core.contracts.node import Node
from logoutline.outline.display import NodeView, describe, describe_forest
from logoutline.outline.render import render_document
from logoutline.outline.search import search_titles
from logoutline.pipelines.outline import OutlineResult, context_from_path, run_outline

load_dotenv()

app = typer.Typer(
    help="logoutline: Outline view of RMS job logs.",
    rich_markup_mode="markdown",
)
console = Console()

LogFile = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the log document (HTML with <pre> job blocks).",
    ),
]
Verbose = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
]


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _load(file: Path, verbose: bool) -> OutlineResult:
    """Run the outline pipeline, turning unexpected errors into exit code 1."""
    try:
        return run_outline(context_from_path(file))
    except Exception as e:
        console.print(f"[bold red]Outline Error:[/bold red] {e}")
        if verbose:
            traceback.print_exc()
        raise typer.Exit(code=1) from e


def _styled_label(view: NodeView) -> str:
    style = {
        "folder": "bold",
        "note": "yellow",
        "skipped": "blue",
        "deactivated": "dark_orange",
        "event": "",
    }[view.icon]
    label = escape(view.label)
    text = f"[{style}]{label}[/{style}]" if style else label
    if view.description:
        text += f"  [dim]{view.description}[/dim]"
    return text


def _add_branch(tree: Tree, view: NodeView) -> None:
    branch = tree.add(_styled_label(view))
    for child in view.children:
        _add_branch(branch, child)


def _render_tree(source_name: str, forest: list[Node]) -> None:
    tree = Tree(f"[bold cyan]{source_name}[/bold cyan]")
    for view in describe_forest(forest):
        _add_branch(tree, view)
    console.print(tree)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def outline(
    file: LogFile,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the outline as JSON instead of a tree."),
    ] = False,
    verbose: Verbose = False,
) -> None:
    """
    Show the job hierarchy of a log, grouped by realization.
    """
    result = _load(file, verbose)
    if as_json:
        payload = [view.model_dump() for view in describe_forest(result["forest"])]
        typer.echo(json.dumps(payload, indent=2))
        return
    if result["message"]:
        console.print(f"[yellow]{result['message']}[/yellow]")
        return
    _render_tree(result["source_name"], result["forest"])


@app.command()  # type: ignore[misc]
def blocks(file: LogFile, verbose: Verbose = False) -> None:
    """
    List the flat job blocks in document order.
    """
    result = _load(file, verbose)
    if result["message"]:
        console.print(f"[yellow]{result['message']}[/yellow]")
        return

    table = Table(title=result["source_name"])
    table.add_column("Level", justify="right")
    table.add_column("Line", justify="right")
    table.add_column("Offsets")
    table.add_column("Realization", justify="right")
    table.add_column("Title")
    table.add_column("Elapsed (s)", justify="right")
    for b in result["blocks"]:
        table.add_row(
            "N/A" if b.level is None else str(b.level),
            "" if b.title_line is None else str(b.title_line + 1),
            f"{b.start}-{b.end}",
            "" if b.realization is None else str(b.realization),
            b.title,
            "" if b.elapsed is None else f"{b.elapsed:g}",
        )
    console.print(table)


@app.command()  # type: ignore[misc]
def search(
    file: LogFile,
    query: Annotated[str, typer.Argument(help="Substring to look for in job titles.")],
    verbose: Verbose = False,
) -> None:
    """
    Search jobs by title (case-insensitive substring match).
    """
    if not query.strip():
        console.print("[yellow]Empty query.[/yellow]")
        raise typer.Exit(code=2)

    result = _load(file, verbose)
    matches = search_titles(result["forest"], query)
    if not matches:
        console.print("No matches")
        return

    table = Table(title=f"Found {len(matches)} matches")
    table.add_column("Title")
    table.add_column("Elapsed")
    table.add_column("Line", justify="right")
    for node in matches:
        view = describe(node, recursive=False)
        line = view.highlight.title_line
        table.add_row(escape(view.label), view.description, "" if line is None else str(line + 1))
    console.print(table)


@app.command()  # type: ignore[misc]
def render(
    file: LogFile,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Where to write the HTML view (default: <stem>.outline.html).",
        ),
    ] = None,
) -> None:
    """
    Write an HTML view of the log with an anchor on every job block.
    """
    text = file.read_text(encoding="utf-8", errors="replace")
    target = output or file.with_name(f"{file.stem}.outline.html")
    try:
        target.write_text(render_document(text, title=file.name), encoding="utf-8")
    except OSError as e:
        console.print(f"[bold red]Failed to write {target}: {e}[/bold red]")
        raise typer.Exit(code=1) from e
    console.print(
        Panel(
            f"Saved to: [link=file://{target}]{target}[/link]",
            title="Rendered",
            border_style="green",
        )
    )


if __name__ == "__main__":
    app()
