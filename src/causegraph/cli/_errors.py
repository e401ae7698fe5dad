"""CLI error handling and decorators."""

from __future__ import annotations

import functools
from typing import Any, Callable

import typer

from causegraph.cli._config import get_config
from causegraph.config import GraphConfig
from causegraph.errors import GraphStateError
from causegraph.graph import CauseEffectGraph
from causegraph.store import JsonGraphStore

# Module-level holders (set by require_store / require_graph)
_current_graph: CauseEffectGraph | None = None
_current_store: JsonGraphStore | None = None


def get_graph() -> CauseEffectGraph:
    """Get the graph loaded by the require_graph decorator."""
    assert _current_graph is not None, "command is not decorated with @require_graph"
    return _current_graph


def get_store() -> JsonGraphStore:
    """Get the store opened by require_store or require_graph."""
    assert _current_store is not None, "command is not decorated with @require_store"
    return _current_store


def handle_error(msg: str) -> None:
    """Print an error message and exit."""
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(1)


def _open_store() -> tuple[GraphConfig, JsonGraphStore]:
    global _current_store
    try:
        config = get_config()
        store = JsonGraphStore(config.name, config.state_dir)
    except ValueError as err:
        handle_error(str(err))
    _current_store = store
    return config, store


def require_store(f: Callable) -> Callable:
    """Decorator that opens the configured store without loading the graph.

    For commands that must work even when the stored state is unreadable.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        _open_store()
        return f(*args, **kwargs)

    return wrapper


def require_graph(f: Callable) -> Callable:
    """Decorator that loads the configured graph before running a command.

    Exits with a helpful message when no right nodes are configured, the
    graph name is invalid, or the stored state cannot be read or loaded.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        global _current_graph
        config, store = _open_store()
        if not config.right_nodes:
            handle_error(
                "No right nodes configured.\n"
                "\n"
                "Pass them with --right, set CAUSEGRAPH_RIGHT_NODES=a,b,c,\n"
                "or add a right_nodes list to ~/.causegraph/config.yaml"
            )
        try:
            graph = CauseEffectGraph.from_state(store.read(), config.right_nodes)
        except (GraphStateError, OSError) as err:
            handle_error(
                f"Could not load {store.path}: {err}\n"
                "Run 'causegraph reset' to start over."
            )
        _current_graph = graph
        return f(*args, **kwargs)

    return wrapper
