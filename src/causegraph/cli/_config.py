"""CLI configuration: GraphConfig plus command-line overrides."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from causegraph.config import GraphConfig


@dataclass
class CliOverrides:
    """Values given as global options; None/empty means "use config"."""

    config_path: Path | None = None
    name: str | None = None
    state_dir: str | None = None
    right_nodes: list[str] = field(default_factory=list)


_overrides = CliOverrides()


def set_overrides(overrides: CliOverrides) -> None:
    global _overrides
    _overrides = overrides


def get_config() -> GraphConfig:
    """Resolve the effective configuration for this invocation.

    Always re-reads the file and environment, so each command sees the
    current state rather than a cached singleton.
    """
    config = GraphConfig.load(_overrides.config_path)
    if _overrides.name:
        config.name = _overrides.name
    if _overrides.state_dir:
        config.state_dir = _overrides.state_dir
    if _overrides.right_nodes:
        config.right_nodes = list(_overrides.right_nodes)
    return config
