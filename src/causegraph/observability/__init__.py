"""Logging setup for the causegraph CLI."""

from causegraph.observability.config import ObservabilityConfig
from causegraph.observability.logging import setup_logging, shutdown_logging

__all__ = ["ObservabilityConfig", "setup_logging", "shutdown_logging"]
