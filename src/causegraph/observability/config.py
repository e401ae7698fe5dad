"""Logging configuration, env-var driven.

Every field has a default; nothing needs to be set for stderr output.

    CAUSEGRAPH_LOG_DESTINATION=stderr (default) | jsonl
    CAUSEGRAPH_LOG_FORMAT=console (default) | json
    CAUSEGRAPH_LOG_LEVEL=WARNING (default)
    CAUSEGRAPH_LOG_PATH=<file for the jsonl destination>
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class ObservabilityConfig:
    log_destination: str = field(
        default_factory=lambda: os.environ.get("CAUSEGRAPH_LOG_DESTINATION", "stderr")
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("CAUSEGRAPH_LOG_LEVEL", "WARNING")
    )
    log_format: str = field(
        default_factory=lambda: os.environ.get("CAUSEGRAPH_LOG_FORMAT", "console")
    )
    jsonl_path: str | None = field(
        default_factory=lambda: os.environ.get("CAUSEGRAPH_LOG_PATH")
    )
