"""JSON codec for the persisted graph state.

Wire format:
    {"LeftNode": [{"name": str, "count": int,
                   "rightNodes": [{"name": str, "count": int}, ...]}, ...]}

Only left nodes are written. The right-node label set is configuration owned
by the caller and is supplied again on every load.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from causegraph.errors import MalformedStateError
from causegraph.types import LeftNode

STATE_KEY = "LeftNode"


def _require(record: dict, key: str, kind: type, where: str) -> Any:
    if key not in record:
        raise MalformedStateError(f"{where}: missing {key!r}")
    value = record[key]
    # bool is an int subclass; reject it explicitly for counts
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise MalformedStateError(
            f"{where}: {key!r} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _parse_left_node(record: Any, index: int) -> LeftNode:
    where = f"LeftNode[{index}]"
    if not isinstance(record, dict):
        raise MalformedStateError(f"{where}: expected an object, got {type(record).__name__}")

    label = _require(record, "name", str, where)
    where = f"LeftNode[{index}] ({label!r})"
    count = _require(record, "count", int, where)
    edges = _require(record, "rightNodes", list, where)

    node = LeftNode(label)
    for j, edge in enumerate(edges):
        edge_where = f"{where}.rightNodes[{j}]"
        if not isinstance(edge, dict):
            raise MalformedStateError(f"{edge_where}: expected an object")
        right = _require(edge, "name", str, edge_where)
        weight = _require(edge, "count", int, edge_where)
        if weight <= 0:
            raise MalformedStateError(f"{edge_where}: count must be positive, got {weight}")
        node.add_edges(right, weight)

    if node.count != count:
        raise MalformedStateError(
            f"{where}: count {count} does not match edge total {node.count}"
        )
    return node


def decode_state(blob: str) -> list[LeftNode]:
    """Parse a state blob into left nodes.

    Raises MalformedStateError on invalid JSON or a wrong shape. An object
    without a ``LeftNode`` key decodes to no nodes.
    """
    try:
        data = json.loads(blob)
    except (json.JSONDecodeError, TypeError, RecursionError) as err:
        raise MalformedStateError(f"State is not valid JSON: {err}") from err

    if not isinstance(data, dict):
        raise MalformedStateError(f"State must be a JSON object, got {type(data).__name__}")

    records = data.get(STATE_KEY)
    if records is None:
        return []
    if not isinstance(records, list):
        raise MalformedStateError(f"{STATE_KEY!r} must be a list")

    nodes: list[LeftNode] = []
    seen: set[str] = set()
    for i, record in enumerate(records):
        node = _parse_left_node(record, i)
        if node.label in seen:
            raise MalformedStateError(f"Duplicate left node {node.label!r}")
        seen.add(node.label)
        nodes.append(node)
    return nodes


def state_dict(nodes: Iterable[LeftNode]) -> dict:
    return {STATE_KEY: [node.to_dict() for node in nodes]}


def encode_state(nodes: Iterable[LeftNode], indent: int | None = 2) -> str:
    """Serialize left nodes. Pretty-printed by default."""
    return json.dumps(state_dict(nodes), indent=indent, ensure_ascii=False)
