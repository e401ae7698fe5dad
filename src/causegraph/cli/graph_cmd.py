"""CLI commands for training, querying and inspecting the graph."""

from __future__ import annotations

import typer

from causegraph.cli._errors import (
    get_graph,
    get_store,
    handle_error,
    require_graph,
    require_store,
)


@require_graph
def train(
    left: list[str] = typer.Argument(..., help="Observed left-node labels"),
    to: str = typer.Option(..., "--to", "-t", help="Right-node label they led to"),
) -> None:
    """Record one observation and persist the graph."""
    graph = get_graph()
    if not graph.train(left, to):
        handle_error(
            f"Unknown right node {to!r}. Known: {', '.join(sorted(graph.right_labels))}"
        )
    get_store().write(graph.package())
    typer.echo(f"Recorded {len(left)} -> {to}")


@require_graph
def infer(
    left: list[str] = typer.Argument(..., help="Observed left-node labels"),
    detail: bool = typer.Option(False, "--detail", "-d", help="Also print the averaged score"),
) -> None:
    """Print the most likely right node for the evidence."""
    graph = get_graph()
    if detail:
        result = graph.probability_with_detail(left)
        if not result.is_conclusive:
            typer.echo("No conclusion.")
            return
        typer.echo(f"{result.label}\t{result.score:.4f}")
        return

    label = graph.probability(left)
    typer.echo(label if label else "No conclusion.")


@require_graph
def show() -> None:
    """Print the packaged graph state."""
    typer.echo(get_graph().package())


@require_graph
def stats() -> None:
    """Show node, edge and observation counts."""
    s = get_graph().stats()
    typer.echo(f"Left nodes:   {s['left_nodes']}")
    typer.echo(f"Right nodes:  {s['right_nodes']}")
    typer.echo(f"Edges:        {s['edges']}")
    typer.echo(f"Observations: {s['observations']}")


@require_store
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete the persisted graph state."""
    store = get_store()
    if not store.exists():
        typer.echo("Nothing to reset.")
        return
    if not yes:
        typer.confirm(f"Delete {store.path}?", abort=True)
    store.delete()
    typer.echo(f"Deleted {store.path}")
