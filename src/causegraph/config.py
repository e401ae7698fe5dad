"""Graph configuration: YAML file + env var overrides.

Priority: env var > YAML file > default.
Env vars use the CAUSEGRAPH_{FIELD} convention (e.g. CAUSEGRAPH_NAME=weather).
YAML file default: ~/.causegraph/config.yaml

Example config.yaml:
    name: weather
    state_dir: ~/weather-state
    right_nodes: [rain, sun]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

_DEFAULT_PATH = "~/.causegraph/config.yaml"


def _split_labels(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass
class GraphConfig:
    # Store name, also the state file stem
    name: str = "default"
    # Directory for state files ("" = store default)
    state_dir: str = ""
    # The fixed conclusion set handed to load()
    right_nodes: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, path: Path | None = None) -> GraphConfig:
        """Load config from YAML file, then override with env vars."""
        file_path = path or Path(_DEFAULT_PATH).expanduser()
        raw: dict = {}
        if file_path.exists():
            loaded = yaml.safe_load(file_path.read_text()) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"{file_path}: expected a mapping, got {type(loaded).__name__}")
            raw = loaded

        kwargs: dict = {}
        if isinstance(raw.get("name"), str):
            kwargs["name"] = raw["name"]
        if raw.get("state_dir") is not None:
            kwargs["state_dir"] = str(raw["state_dir"])
        right = raw.get("right_nodes")
        if isinstance(right, str):
            kwargs["right_nodes"] = _split_labels(right)
        elif isinstance(right, list):
            kwargs["right_nodes"] = [str(r) for r in right]

        if "CAUSEGRAPH_NAME" in os.environ:
            kwargs["name"] = os.environ["CAUSEGRAPH_NAME"]
        if "CAUSEGRAPH_STATE_DIR" in os.environ:
            kwargs["state_dir"] = os.environ["CAUSEGRAPH_STATE_DIR"]
        if "CAUSEGRAPH_RIGHT_NODES" in os.environ:
            kwargs["right_nodes"] = _split_labels(os.environ["CAUSEGRAPH_RIGHT_NODES"])

        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "state_dir": self.state_dir,
            "right_nodes": list(self.right_nodes),
        }


# Singleton
_config: GraphConfig | None = None


def get_config(path: Path | None = None) -> GraphConfig:
    """Get the singleton GraphConfig instance."""
    global _config
    if _config is None:
        _config = GraphConfig.load(path)
    return _config


def reset_config() -> None:
    """Reset for testing."""
    global _config
    _config = None
