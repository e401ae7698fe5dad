"""causegraph: a bipartite cause-effect counting graph.

Public API:
    CauseEffectGraph      - load(), train(), probability(),
                            probability_with_detail(), package()
    LeftNode              - evidence node with weighted edges
    Inference             - (label, score) result of a detailed query
    NO_CONCLUSION         - "" returned when no evidence resolves
    GraphStateError       - base class for load failures
    MalformedStateError   - state blob has the wrong shape
    UnknownRightNodeError - state references an unconfigured right node
    GraphStore            - protocol for state persistence
    JsonGraphStore        - JSON file backend
"""

from causegraph.errors import GraphStateError, MalformedStateError, UnknownRightNodeError
from causegraph.graph import CauseEffectGraph
from causegraph.store import GraphStore, JsonGraphStore
from causegraph.types import NO_CONCLUSION, Inference, LeftNode

__all__ = [
    "CauseEffectGraph",
    "LeftNode",
    "Inference",
    "NO_CONCLUSION",
    "GraphStateError",
    "MalformedStateError",
    "UnknownRightNodeError",
    "GraphStore",
    "JsonGraphStore",
]
