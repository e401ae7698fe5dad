"""Graph state persistence: protocol + JSON file backend.

GraphStore is the protocol. Code against it. The graph itself never touches
storage; callers read a blob, hand it to load(), and write package() back.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from causegraph.errors import MalformedStateError

logger = logging.getLogger(__name__)

_SAFE_NAME = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9._-]*$")
DEFAULT_STATE_DIR = "~/.causegraph/graphs"


def _sanitize_name(graph_name: str) -> str:
    """Validate graph_name is safe for use in file paths."""
    if not _SAFE_NAME.match(graph_name) or ".." in graph_name:
        raise ValueError(
            f"Invalid graph name {graph_name!r}: must be alphanumeric "
            f"with optional dots, hyphens, underscores; no path separators."
        )
    return graph_name


@runtime_checkable
class GraphStore(Protocol):
    """Protocol for graph state persistence."""

    def read(self) -> str | None: ...
    def write(self, state: str) -> None: ...
    def exists(self) -> bool: ...
    def delete(self) -> bool: ...


class JsonGraphStore:
    """Persists one packaged graph as a JSON file.

    File layout: {state_dir}/{graph_name}.json
    """

    def __init__(self, graph_name: str, state_dir: str = "") -> None:
        self._name = _sanitize_name(graph_name)
        self._dir = Path(state_dir or DEFAULT_STATE_DIR).expanduser()
        self._dir.mkdir(parents=True, exist_ok=True)
        self._path = self._dir / f"{self._name}.json"

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read(self) -> str | None:
        """Return the stored blob, or None for a graph never written.

        Raises MalformedStateError when the file is not UTF-8 text.
        """
        if not self._path.exists():
            return None
        try:
            return self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as err:
            raise MalformedStateError(f"{self._path} is not UTF-8 text: {err}") from err

    def write(self, state: str) -> None:
        # temp file + rename so a crash never leaves a half-written state
        fd, tmp = tempfile.mkstemp(dir=self._dir, prefix=f".{self._name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(state)
            os.replace(tmp, self._path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("Wrote graph state to %s", self._path)

    def delete(self) -> bool:
        """Remove the stored state. Returns False if there was none."""
        if not self._path.exists():
            return False
        self._path.unlink()
        return True
