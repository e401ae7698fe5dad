"""causegraph CLI -- typer-based command interface.

Commands:
    causegraph train LEFT... --to RIGHT   Record an observation
    causegraph infer LEFT... [--detail]   Most likely right node
    causegraph show                       Print packaged state
    causegraph stats                      Node/edge/observation counts
    causegraph reset                      Delete persisted state
"""

from __future__ import annotations

from pathlib import Path

import typer

from causegraph.cli import graph_cmd
from causegraph.cli._config import CliOverrides, set_overrides
from causegraph.observability import ObservabilityConfig, setup_logging

app = typer.Typer(
    name="causegraph",
    help="Train and query a cause-effect bipartite graph.",
    no_args_is_help=True,
)

app.command()(graph_cmd.train)
app.command()(graph_cmd.infer)
app.command()(graph_cmd.show)
app.command()(graph_cmd.stats)
app.command()(graph_cmd.reset)


@app.callback()
def main_options(
    config: Path = typer.Option(None, "--config", "-c", help="YAML config file"),
    name: str = typer.Option(None, "--name", "-n", help="Graph name (state file stem)"),
    state_dir: str = typer.Option(None, "--state-dir", help="Directory for state files"),
    right: list[str] = typer.Option(None, "--right", "-r", help="Right-node label (repeatable)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at debug level"),
) -> None:
    """Global options shared by every command."""
    obs = ObservabilityConfig()
    if verbose:
        obs.log_level = "DEBUG"
    setup_logging(obs)
    set_overrides(
        CliOverrides(
            config_path=config,
            name=name,
            state_dir=state_dir,
            right_nodes=list(right or []),
        )
    )


def main() -> None:
    """Entry point for the causegraph CLI."""
    app()
