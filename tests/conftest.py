"""Shared fixtures.

Canonical graphs: empty, untrained, weather.
"""

from __future__ import annotations

import pytest

from causegraph.graph import CauseEffectGraph

WEATHER = ["rain", "sun"]


@pytest.fixture
def untrained_graph() -> CauseEffectGraph:
    """Right nodes only, no evidence."""
    graph = CauseEffectGraph()
    graph.load(None, WEATHER)
    return graph


@pytest.fixture
def weather_graph(untrained_graph) -> CauseEffectGraph:
    """cloudy, windy -> rain (x3); clear -> sun (x1)"""
    for _ in range(3):
        untrained_graph.train(["cloudy", "windy"], "rain")
    untrained_graph.train(["clear"], "sun")
    return untrained_graph


@pytest.fixture
def mixed_graph(untrained_graph) -> CauseEffectGraph:
    """humid: rain x3, sun x1; breeze: sun x2"""
    for _ in range(3):
        untrained_graph.train(["humid"], "rain")
    untrained_graph.train(["humid"], "sun")
    untrained_graph.train(["breeze"], "sun")
    untrained_graph.train(["breeze"], "sun")
    return untrained_graph
