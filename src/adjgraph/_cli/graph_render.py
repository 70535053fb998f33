"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from .graph_query import VertexSummary


def render_vertex_table(summaries: list[VertexSummary], edge_count: int, console: Console) -> None:
    """Render vertex degrees as a Rich table followed by totals.

    Args:
        summaries: List of VertexSummary to render.
        edge_count: Number of edges in the graph.
        console: Rich Console to output to.

    """
    if not summaries:
        console.print("[dim]Graph is empty[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Vertex", style="bold")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")

    for summary in summaries:
        table.add_row(escape(summary.vertex), str(summary.in_degree), str(summary.out_degree))

    console.print(table)
    console.print(f"\n[dim]Total: {len(summaries)} vertices, {edge_count} edges[/dim]")


def render_edges(edges: list[tuple[str, str]], console: Console) -> None:
    """Render edges one per line as ``source -> target``."""
    if not edges:
        console.print("[dim]No edges reachable[/dim]")
        return
    for source, target in edges:
        console.print(f"{escape(source)} -> {escape(target)}")


def render_path(path: list[str], console: Console) -> None:
    """Render a path on one line."""
    if not path:
        console.print("[dim]Source and target are the same vertex[/dim]")
        return
    console.print(" -> ".join(escape(v) for v in path))


def render_generations(generations: list[list[str]], console: Console) -> None:
    """Render topological generations, one numbered line per generation."""
    for index, generation in enumerate(generations):
        console.print(f"[cyan]{index}:[/cyan] {', '.join(escape(v) for v in generation)}")
