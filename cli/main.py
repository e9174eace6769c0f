"""
adjgraph CLI

Command-line driver for the adjacency-list graph. Every command works on
the bundled sample: ten vertices keyed 1..10 over the data table
<1,A> ... <10,J>, linked by a fixed edge sequence.

Commands:
    adjgraph demo         Print the vertex/adjacency report of the sample graph
    adjgraph neighbors K  List the neighbors of the vertex keyed K
    adjgraph summary      Show capacity, build state and edge count

Usage:
    $ adjgraph demo --depth 2
    $ adjgraph neighbors 6 --undirected
    $ adjgraph -v summary
"""

import logging
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from adjgraph import __version__
from adjgraph.exceptions import AdjGraphError
from adjgraph.graph import Graph
from adjgraph.models import GraphKind
from adjgraph.report import format_graph
from adjgraph.sample import build_sample_graph, build_sample_table

# Initialize Typer app and Rich console
app = typer.Typer(
    name="adjgraph",
    help="adjgraph: a fixed-capacity adjacency-list graph",
    add_completion=False,
)
console = Console()


# Default report detail
DEFAULT_DEPTH = 1


def _setup_logging(verbose: bool, quiet: bool) -> None:
    """Configure logging for CLI output."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", force=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]adjgraph[/bold] version {__version__}")
        raise typer.Exit()


def _kind(undirected: bool) -> GraphKind:
    return GraphKind.UNDIRECTED if undirected else GraphKind.DIRECTED


def _load_sample(undirected: bool) -> Graph:
    """Build the sample graph, exiting with status 1 on a graph error."""
    try:
        return build_sample_graph(_kind(undirected))
    except AdjGraphError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def demo(
    depth: int = typer.Option(
        DEFAULT_DEPTH,
        "--depth",
        "-d",
        min=0,
        help="Report detail: 0 headers only, 1 neighbor keys, 2 node identities",
    ),
    undirected: bool = typer.Option(
        False,
        "--undirected",
        "-u",
        help="Mirror every edge",
    ),
) -> None:
    """
    Build the sample graph and print its report.
    """
    graph = _load_sample(undirected)
    with graph:
        typer.echo(format_graph(graph, depth), nl=False)


@app.command()
def neighbors(
    key: int = typer.Argument(
        ...,
        help="Key of the vertex whose neighbors are listed",
    ),
    undirected: bool = typer.Option(
        False,
        "--undirected",
        "-u",
        help="Mirror every edge",
    ),
) -> None:
    """
    List the neighbors of a sample vertex, most recently linked first.
    """
    table = build_sample_table()
    graph = _load_sample(undirected)

    with graph:
        vertex = graph.get_vertex(key)
        if vertex is None:
            console.print(f"[yellow]No vertex with key {key}.[/yellow]")
            raise typer.Exit(1)

        if vertex.neighbors is None:
            console.print(f"[dim]Vertex {key} has no neighbors.[/dim]")
            raise typer.Exit(0)

        result = Table(title=f"Neighbors of {key}", box=box.ROUNDED)
        result.add_column("Position", justify="right")
        result.add_column("Key", style="cyan", justify="right")
        result.add_column("Data index", justify="right")
        result.add_column("Name")

        for position in vertex:
            neighbor = graph.vertex_at(position)
            result.add_row(
                str(position),
                str(neighbor.key),
                str(neighbor.data_index),
                table[neighbor.data_index].name,
            )

        console.print(result)


@app.command()
def summary(
    undirected: bool = typer.Option(
        False,
        "--undirected",
        "-u",
        help="Mirror every edge",
    ),
) -> None:
    """
    Show the size and build state of the sample graph.
    """
    graph = _load_sample(undirected)
    with graph:
        stats = graph.summary()

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Kind", stats.kind.value)
    table.add_row("State", stats.state.value)
    table.add_row("Capacity", str(stats.capacity))
    table.add_row("Vertices", str(stats.count))
    table.add_row("Adjacency entries", str(stats.edge_count))
    table.add_row("Free slots", str(stats.free_slots))

    panel = Panel(table, title="[bold green]Sample graph[/bold green]", border_style="green")
    console.print(panel)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log graph operations",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log warnings",
    ),
) -> None:
    """
    adjgraph: a fixed-capacity adjacency-list graph.
    """
    _setup_logging(verbose, quiet)


if __name__ == "__main__":
    app()
