"""Tests for the state codec."""

from __future__ import annotations

import json

import pytest

from causegraph.errors import MalformedStateError
from causegraph.serialization import decode_state, encode_state
from causegraph.types import LeftNode


def _record(name="humid", count=1, edges=None):
    return {
        "name": name,
        "count": count,
        "rightNodes": edges if edges is not None else [{"name": "rain", "count": 1}],
    }


def _blob(*records) -> str:
    return json.dumps({"LeftNode": list(records)})


class TestDecode:
    def test_decodes_nodes(self):
        nodes = decode_state(
            _blob(_record(count=3, edges=[{"name": "rain", "count": 2}, {"name": "sun", "count": 1}]))
        )
        assert len(nodes) == 1
        assert nodes[0].label == "humid"
        assert nodes[0].count == 3
        assert nodes[0].edges == {"rain": 2, "sun": 1}

    def test_empty_list(self):
        assert decode_state(_blob()) == []

    def test_missing_key_is_untrained(self):
        assert decode_state(json.dumps({"other": 1})) == []

    def test_left_node_with_no_edges(self):
        nodes = decode_state(_blob(_record(count=0, edges=[])))
        assert nodes[0].count == 0
        assert nodes[0].edges == {}

    @pytest.mark.parametrize(
        "blob",
        [
            "",
            "not json",
            "[]",
            '"LeftNode"',
            json.dumps({"LeftNode": {}}),
            json.dumps({"LeftNode": ["humid"]}),
        ],
    )
    def test_wrong_top_level_shape(self, blob):
        with pytest.raises(MalformedStateError):
            decode_state(blob)

    @pytest.mark.parametrize(
        "record",
        [
            {"count": 1, "rightNodes": []},
            {"name": "humid", "rightNodes": []},
            {"name": "humid", "count": 0},
            {"name": 7, "count": 0, "rightNodes": []},
            {"name": "humid", "count": "1", "rightNodes": [{"name": "rain", "count": 1}]},
            {"name": "humid", "count": True, "rightNodes": [{"name": "rain", "count": 1}]},
            {"name": "humid", "count": 1, "rightNodes": {"rain": 1}},
            {"name": "humid", "count": 1, "rightNodes": ["rain"]},
            {"name": "humid", "count": 1, "rightNodes": [{"name": "rain", "count": 1.0}]},
            {"name": "humid", "count": 0, "rightNodes": [{"name": "rain", "count": 0}]},
            {"name": "humid", "count": -1, "rightNodes": [{"name": "rain", "count": -1}]},
            {"name": "humid", "count": 1, "rightNodes": [{"count": 1}]},
        ],
    )
    def test_wrong_record_shape(self, record):
        with pytest.raises(MalformedStateError):
            decode_state(_blob(record))

    def test_deeply_nested_json(self):
        with pytest.raises(MalformedStateError):
            decode_state("[" * 200_000 + "]" * 200_000)

    def test_count_mismatch(self):
        with pytest.raises(MalformedStateError, match="does not match"):
            decode_state(_blob(_record(count=5)))

    def test_duplicate_left_node(self):
        with pytest.raises(MalformedStateError, match="Duplicate"):
            decode_state(_blob(_record(), _record()))

    def test_error_names_offending_record(self):
        with pytest.raises(MalformedStateError, match=r"LeftNode\[1\]"):
            decode_state(_blob(_record("ok"), {"name": "bad", "count": 1}))


class TestEncode:
    def test_encode_is_pretty_printed(self):
        node = LeftNode("humid")
        node.add_edges("rain", 2)
        blob = encode_state([node])
        assert "\n" in blob
        assert json.loads(blob) == {
            "LeftNode": [{"name": "humid", "count": 2, "rightNodes": [{"name": "rain", "count": 2}]}]
        }

    def test_compact(self):
        assert encode_state([], indent=None) == '{"LeftNode": []}'

    def test_non_ascii_labels_survive(self):
        node = LeftNode("多云")
        node.add_edge("下雨")
        decoded = decode_state(encode_state([node]))
        assert decoded[0].label == "多云"
        assert decoded[0].edges == {"下雨": 1}
