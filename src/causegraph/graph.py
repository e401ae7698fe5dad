"""CauseEffectGraph: bipartite counting graph for simple causal inference.

Left nodes are observed events, right nodes are the fixed set of possible
conclusions. Training records co-occurrences; inference sums each evidence
node's edge distribution and picks the strongest conclusion.

Usage:
    graph = CauseEffectGraph()
    graph.load(None, ["rain", "sun"])
    graph.train(["cloudy", "windy"], "rain")
    graph.probability(["cloudy"])          # -> "rain"
    blob = graph.package()                 # persist it, load(blob, ...) later

Not thread-safe: train() and the inference methods touch the same dicts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from causegraph.errors import GraphStateError, UnknownRightNodeError
from causegraph.serialization import decode_state, encode_state, state_dict
from causegraph.types import NO_CONCLUSION, Inference, LeftNode

logger = logging.getLogger(__name__)


class CauseEffectGraph:
    """Owns every left node and the right-node label set."""

    def __init__(self) -> None:
        self._left_nodes: dict[str, LeftNode] = {}
        self._right_nodes: frozenset[str] = frozenset()

    @classmethod
    def from_state(
        cls, serialized_state: str | None, right_node_labels: Iterable[str]
    ) -> CauseEffectGraph:
        graph = cls()
        graph.load(serialized_state, right_node_labels)
        return graph

    # ------------------------------------------------------------------
    # Load / package
    # ------------------------------------------------------------------

    def load(self, serialized_state: str | None, right_node_labels: Iterable[str]) -> None:
        """Reset the graph and rebuild it from a packaged state.

        ``serialized_state=None`` leaves an untrained graph holding only the
        right nodes. Raises MalformedStateError or UnknownRightNodeError; on
        failure no left nodes are kept.
        """
        self._clean()
        self._right_nodes = frozenset(right_node_labels)

        if serialized_state is None:
            logger.debug("Loaded untrained graph with %d right nodes", len(self._right_nodes))
            return

        try:
            nodes = decode_state(serialized_state)
            for node in nodes:
                for right in node.edges:
                    if right not in self._right_nodes:
                        raise UnknownRightNodeError(node.label, right)
        except GraphStateError as err:
            logger.error("Failed to load graph state: %s", err)
            raise

        self._left_nodes = {node.label: node for node in nodes}
        logger.info(
            "Loaded graph: %d left nodes, %d right nodes",
            len(self._left_nodes),
            len(self._right_nodes),
        )

    def package(self) -> str:
        """Serialize every left node to a JSON string. Does not mutate."""
        return encode_state(self._left_nodes.values())

    def to_dict(self) -> dict:
        return state_dict(self._left_nodes.values())

    def _clean(self) -> None:
        self._left_nodes = {}
        self._right_nodes = frozenset()

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def train(self, left_node_labels: Iterable[str], right_node_label: str) -> bool:
        """Record that ``left_node_labels`` were observed with one outcome.

        Unknown outcomes are ignored and return False.
        """
        if right_node_label not in self._right_nodes:
            logger.debug("Ignoring training for unknown right node %r", right_node_label)
            return False

        for label in left_node_labels:
            node = self._left_nodes.get(label)
            if node is None:
                node = LeftNode(label)
                self._left_nodes[label] = node
            node.add_edge(right_node_label)
        return True

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------

    def _resolve(self, left_node_labels: Iterable[str]) -> list[LeftNode]:
        return [self._left_nodes[label] for label in left_node_labels if label in self._left_nodes]

    @staticmethod
    def _best(nodes: list[LeftNode]) -> tuple[str, float]:
        scores: dict[str, float] = {}
        for node in nodes:
            for right, p in node.probabilities().items():
                scores[right] = scores.get(right, 0.0) + p

        # strict ">" keeps the first label reached on ties
        best_label, best_score = NO_CONCLUSION, 0.0
        for right, score in scores.items():
            if score > best_score:
                best_label, best_score = right, score
        return best_label, best_score

    def probability(self, left_node_labels: Iterable[str]) -> str:
        """Most likely right label for the evidence, or "" when none resolves."""
        label, _ = self._best(self._resolve(left_node_labels))
        return label

    def probability_with_detail(self, left_node_labels: Iterable[str]) -> Inference:
        """Like probability(), plus the winning score averaged per resolved node."""
        nodes = self._resolve(left_node_labels)
        if not nodes:
            return Inference(NO_CONCLUSION, 0.0)
        label, score = self._best(nodes)
        return Inference(label, score / len(nodes))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def right_labels(self) -> frozenset[str]:
        return self._right_nodes

    @property
    def left_labels(self) -> frozenset[str]:
        return frozenset(self._left_nodes)

    def left_node(self, label: str) -> LeftNode | None:
        """A detached copy of the node; train() is the only way to change counts."""
        node = self._left_nodes.get(label)
        if node is None:
            return None
        return LeftNode(node.label, node.count, dict(node.edges))

    def stats(self) -> dict[str, int]:
        return {
            "left_nodes": len(self._left_nodes),
            "right_nodes": len(self._right_nodes),
            "edges": sum(len(n.edges) for n in self._left_nodes.values()),
            "observations": sum(n.count for n in self._left_nodes.values()),
        }

    def __len__(self) -> int:
        return len(self._left_nodes)

    def __contains__(self, label: object) -> bool:
        return label in self._left_nodes

    def __repr__(self) -> str:
        return (
            f"CauseEffectGraph(left_nodes={len(self._left_nodes)}, "
            f"right_nodes={len(self._right_nodes)})"
        )
