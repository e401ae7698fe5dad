"""structlog output for the CLI.

Library modules log through ``logging.getLogger(__name__)``. setup_logging()
puts a structlog ProcessorFormatter on one root handler, so those stdlib
records come out timestamped and rendered as console lines or JSON.

    CAUSEGRAPH_LOG_DESTINATION=stderr | jsonl
    CAUSEGRAPH_LOG_FORMAT=console | json
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from causegraph.observability.config import ObservabilityConfig

DEFAULT_JSONL_PATH = "~/.causegraph/causegraph.jsonl"

_MANAGED = "_causegraph_managed"


def _build_formatter(log_format: str) -> logging.Formatter:
    pre_chain: list = [
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def _build_handler(config: ObservabilityConfig) -> logging.Handler:
    if config.log_destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if config.log_destination == "jsonl":
        path = Path(config.jsonl_path or DEFAULT_JSONL_PATH).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(str(path), mode="a", encoding="utf-8")
    raise ValueError(
        f"Unknown log destination: {config.log_destination!r}. Available: ['stderr', 'jsonl']"
    )


def _detach() -> None:
    root = logging.getLogger()
    for handler in [h for h in root.handlers if getattr(h, _MANAGED, False)]:
        root.removeHandler(handler)
        handler.close()


def setup_logging(config: ObservabilityConfig) -> None:
    """Attach one structlog-formatted handler to the root logger.

    Replaces a handler from an earlier call; leaves foreign handlers
    (pytest caplog, host applications) alone.
    """
    if config.log_format not in ("console", "json"):
        raise ValueError(
            f"Unknown log format: {config.log_format!r}. Available: ['console', 'json']"
        )
    handler = _build_handler(config)
    handler.setFormatter(_build_formatter(config.log_format))
    setattr(handler, _MANAGED, True)

    _detach()
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(getattr(logging, config.log_level.upper(), logging.WARNING))


def shutdown_logging() -> None:
    """Flush, close and remove the handler added by setup_logging()."""
    _detach()
