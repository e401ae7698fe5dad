"""Core types for the cause-effect graph.

LeftNode = an observed event with weighted edges to conclusions.
Inference = the winning conclusion of a query and its averaged score.

Right nodes have no type of their own: a conclusion is its string label.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

NO_CONCLUSION = ""


@dataclass
class LeftNode:
    """An evidence node and its co-occurrence counts.

    ``edges`` maps a right label to the number of times this node was
    observed together with it. ``count`` is always the sum of those weights.
    """

    label: str
    count: int = 0
    edges: dict[str, int] = field(default_factory=dict)

    def add_edges(self, right_label: str, weight: int = 1) -> None:
        """Add ``weight`` observations towards ``right_label``."""
        if weight <= 0:
            raise ValueError(f"Edge weight must be positive, got {weight!r}")
        self.edges[right_label] = self.edges.get(right_label, 0) + weight
        self.count += weight

    def add_edge(self, right_label: str) -> None:
        self.add_edges(right_label, 1)

    def probability_to(self, right_label: str) -> float:
        """Share of this node's observations that went to ``right_label``."""
        weight = self.edges.get(right_label)
        if weight is None:
            logger.debug("No edge from %r to %r", self.label, right_label)
            return 0.0
        return weight / self.count

    def probabilities(self) -> dict[str, float]:
        """Per-edge distribution: right label -> weight / count."""
        return {right: weight / self.count for right, weight in self.edges.items()}

    def to_dict(self) -> dict:
        return {
            "name": self.label,
            "count": self.count,
            "rightNodes": [
                {"name": right, "count": weight} for right, weight in self.edges.items()
            ],
        }


@dataclass(frozen=True)
class Inference:
    """Result of a detailed query.

    ``score`` is the winning summed probability averaged over the evidence
    nodes that actually resolved. Unpacks as ``(label, score)``.
    """

    label: str = NO_CONCLUSION
    score: float = 0.0

    @property
    def is_conclusive(self) -> bool:
        return self.label != NO_CONCLUSION

    def __iter__(self) -> Iterator:
        yield self.label
        yield self.score
