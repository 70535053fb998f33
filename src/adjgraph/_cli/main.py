import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adjgraph._algorithms import shortest_path, topological_generations
from adjgraph._errors import GraphError
from adjgraph._graph import Graph

from .config import ConfigError, GraphKind, TraversalMethod, get_config
from .graph_query import EdgeTokenError, build_graph, summarize_vertices, traverse
from .graph_render import render_edges, render_generations, render_path, render_vertex_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

EdgesArgument = Annotated[
    list[str],
    typer.Argument(help="Edges as SOURCE:TARGET tokens; a bare token adds an isolated vertex"),
]
KindOption = Annotated[
    GraphKind | None,
    typer.Option("--kind", "-k", help="Graph kind (default from [tool.adjgraph] or 'directed')"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Adjgraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(code=1)


def _resolve_kind(kind: GraphKind | None) -> GraphKind:
    if kind is not None:
        return kind
    try:
        return get_config().kind
    except ConfigError as e:
        raise _fail(str(e)) from e


def _build(edges: list[str], kind: GraphKind) -> Graph[str]:
    try:
        graph = build_graph(edges, kind)
    except EdgeTokenError as e:
        raise typer.BadParameter(str(e), param_hint="EDGES") from e
    logger.debug(f"Built {kind} graph with {graph.number_of_nodes()} vertices")
    return graph


@app.command()
def info(edges: EdgesArgument, *, kind: KindOption = None) -> None:
    """Show every vertex with its in-degree and out-degree."""
    graph = _build(edges, _resolve_kind(kind))
    render_vertex_table(summarize_vertices(graph), graph.number_of_edges(), out_console)


@app.command(name="traverse")
def traverse_command(
    source: Annotated[str, typer.Argument(help="Vertex to start from")],
    edges: EdgesArgument,
    *,
    kind: KindOption = None,
    method: Annotated[
        TraversalMethod | None,
        typer.Option("--method", "-m", help="Traversal (default from [tool.adjgraph] or 'bfs')"),
    ] = None,
) -> None:
    """Print the edges visited by a traversal from SOURCE."""
    graph = _build(edges, _resolve_kind(kind))
    if method is None:
        try:
            method = get_config().traversal
        except ConfigError as e:
            raise _fail(str(e)) from e

    try:
        visited = traverse(graph, source, method)
    except GraphError as e:
        raise _fail(str(e)) from e
    render_edges(visited, out_console)


@app.command()
def path(
    source: Annotated[str, typer.Argument(help="First vertex of the path")],
    target: Annotated[str, typer.Argument(help="Last vertex of the path")],
    edges: EdgesArgument,
    *,
    kind: KindOption = None,
) -> None:
    """Print a shortest path from SOURCE to TARGET."""
    graph = _build(edges, _resolve_kind(kind))
    try:
        vertices = shortest_path(graph, source, target)
    except GraphError as e:
        raise _fail(str(e)) from e
    render_path(vertices, out_console)


@app.command()
def toposort(
    edges: EdgesArgument,
    *,
    kind: KindOption = None,
    generations: Annotated[
        bool,
        typer.Option("--generations", "-g", help="Print one line per topological generation"),
    ] = False,
) -> None:
    """Print the vertices in topological order."""
    graph = _build(edges, _resolve_kind(kind))
    try:
        layers = list(topological_generations(graph))
    except GraphError as e:
        raise _fail(str(e)) from e

    if generations:
        render_generations(layers, out_console)
    else:
        out_console.print(" ".join(escape(v) for layer in layers for v in layer))


if __name__ == "__main__":
    app()
