"""Unit tests for the canvas generation library."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from judging_canvas.lib.canvas.generator import (
    generate_canvas,
    generate_label,
    generate_node,
    generate_nodes,
    render_canvas,
)
from judging_canvas.lib.canvas.ids import generate_id, label_hash
from judging_canvas.lib.canvas.layout import node_position, node_x, node_y
from judging_canvas.lib.canvas.models import CanvasFile, CanvasNode
from judging_canvas.lib.canvas.siphash import siphash, siphash13
from judging_canvas.lib.issues.models import Issue

MEDIUM_TITLE = "This is a medium severity bug"

EXPECTED_IDS = {
    "001 - This is a medium severity bug": "1426e27891c91000",
    "002 - This is a medium severity bug": "0b9b5099b5b2bc17",
    "003 - This is a medium severity bug": "83eb17f90d7e7a32",
}


def _issue(number: int, title: str = MEDIUM_TITLE, watson: str = "John Doe", severity: str = "medium") -> Issue:
    return Issue(issue_number=number, watson=watson, severity=severity, title=title)


# ---------------------------------------------------------------------------
# siphash.py tests
# ---------------------------------------------------------------------------


class TestSipHash:
    KEY = bytes(range(16))

    def test_siphash24_empty_message_vector(self):
        assert siphash(b"", self.KEY) == 0x726FDB47DD0E0E31

    def test_siphash24_reference_vector(self):
        # Test vector from the SipHash paper, appendix A.
        assert siphash(bytes(range(15)), self.KEY) == 0xA129CA6149BE45E5

    def test_result_is_64_bit(self):
        for data in (b"", b"a", b"x" * 8, b"y" * 100):
            assert 0 <= siphash13(data) < 2**64

    def test_rounds_change_result(self):
        assert siphash(b"label", c_rounds=1, d_rounds=3) == siphash13(b"label")
        assert siphash(b"label") != siphash13(b"label")

    def test_bad_key_length(self):
        with pytest.raises(ValueError, match="16 bytes"):
            siphash(b"data", b"short")


# ---------------------------------------------------------------------------
# ids.py tests
# ---------------------------------------------------------------------------


class TestGenerateId:
    @pytest.mark.parametrize("label,expected", sorted(EXPECTED_IDS.items()))
    def test_known_ids(self, label, expected):
        assert generate_id(label) == expected

    def test_format(self):
        node_id = generate_id("042 - Anything")
        assert len(node_id) == 16
        assert node_id == node_id.lower()
        int(node_id, 16)

    def test_deterministic(self):
        label = "017 - Oracle price can be stale"
        assert generate_id(label) == generate_id(label)
        assert label_hash(label) == label_hash(label)

    def test_zero_padded(self):
        assert generate_id("x") == format(label_hash("x"), "016x")

    def test_distinct_labels_distinct_ids(self):
        assert len({generate_id(label) for label in EXPECTED_IDS}) == 3

    def test_non_ascii_label(self):
        assert len(generate_id("004 - Überlauf in Berechnung")) == 16


# ---------------------------------------------------------------------------
# layout.py tests
# ---------------------------------------------------------------------------


class TestLayout:
    def test_first_row_steps_by_360(self):
        xs = [node_x(n) for n in range(1, 21)]
        assert xs == [i * 360 for i in range(20)]
        assert all(node_y(n) == 0 for n in range(1, 21))

    def test_wraps_every_20(self):
        assert node_position(20) == (6840, 0)
        assert node_position(21) == (0, 300)
        assert node_position(40) == (6840, 300)
        assert node_position(41) == (0, 600)

    def test_large_numbers(self):
        assert node_position(1000) == (19 * 360, 49 * 300)

    @pytest.mark.parametrize("number", [0, -1])
    def test_below_one_raises(self, number):
        with pytest.raises(ValueError, match="start at 1"):
            node_position(number)


# ---------------------------------------------------------------------------
# generator.py tests
# ---------------------------------------------------------------------------


class TestGenerateLabel:
    def test_generate_issue_label(self):
        assert generate_label(_issue(1)) == "001 - This is a medium severity bug"

    @pytest.mark.parametrize("number,prefix", [(1, "001"), (12, "012"), (999, "999")])
    def test_padded_to_three_digits(self, number, prefix):
        assert generate_label(_issue(number, "T")) == f"{prefix} - T"

    def test_prefix_round_trips_below_1000(self):
        for number in range(1, 1000):
            prefix = generate_label(_issue(number, "T")).split(" - ", 1)[0]
            assert len(prefix) == 3
            assert int(prefix) == number

    @pytest.mark.parametrize("number", [1000, 12345, 65535])
    def test_full_digits_from_1000(self, number):
        assert generate_label(_issue(number, "T")) == f"{number} - T"

    def test_ignores_watson_and_severity(self):
        a = _issue(5, "Same", watson="Alice", severity="high")
        b = _issue(5, "Same", watson="Bob", severity="medium")
        assert generate_label(a) == generate_label(b)


class TestGenerateNode:
    def test_generate_single_canvas_node(self):
        node = generate_node(_issue(1))
        assert node == CanvasNode(
            node_type="text",
            text="001 - This is a medium severity bug",
            id="1426e27891c91000",
            x=0,
            y=0,
            width=300,
            height=150,
        )

    def test_id_follows_label_not_number(self):
        a = generate_node(_issue(3, "Same title"))
        b = generate_node(_issue(3, "Same title", watson="Other"))
        assert a.id == b.id

    def test_space_out_multiple_nodes(self):
        nodes = generate_nodes([_issue(1), _issue(2), _issue(3)])
        assert [(n.text, n.id, n.x, n.y) for n in nodes] == [
            ("001 - This is a medium severity bug", "1426e27891c91000", 0, 0),
            ("002 - This is a medium severity bug", "0b9b5099b5b2bc17", 360, 0),
            ("003 - This is a medium severity bug", "83eb17f90d7e7a32", 720, 0),
        ]
        assert all((n.width, n.height) == (300, 150) for n in nodes)

    def test_preserves_input_order(self):
        nodes = generate_nodes([_issue(3), _issue(1)])
        assert [n.text[:3] for n in nodes] == ["003", "001"]

    def test_zero_issue_number_raises(self):
        with pytest.raises(ValueError):
            generate_node(_issue(0))


class TestGenerateCanvas:
    def test_edges_always_empty(self):
        canvas = generate_canvas([_issue(1), _issue(2)])
        assert len(canvas.nodes) == 2
        assert canvas.edges == []

    def test_empty_input(self):
        data = json.loads(render_canvas(generate_canvas([])))
        assert data == {"nodes": [], "edges": []}

    def test_accepts_generator(self):
        canvas = generate_canvas(_issue(n) for n in (1, 2))
        assert [n.x for n in canvas.nodes] == [0, 360]


# ---------------------------------------------------------------------------
# models.py / serialization tests
# ---------------------------------------------------------------------------


class TestSerialization:
    def test_key_names_and_order(self):
        text = render_canvas(generate_canvas([_issue(1)]))
        data = json.loads(text)
        assert list(data) == ["nodes", "edges"]
        assert list(data["nodes"][0]) == ["type", "text", "id", "x", "y", "width", "height"]
        assert data["nodes"][0]["type"] == "text"

    def test_numbers_are_integers(self):
        data = json.loads(render_canvas(generate_canvas([_issue(22)])))
        node = data["nodes"][0]
        for key in ("x", "y", "width", "height"):
            assert type(node[key]) is int
        assert (node["x"], node["y"]) == (360, 300)

    def test_pretty_printed(self):
        text = render_canvas(generate_canvas([_issue(1)]))
        assert "\n" in text
        assert '"edges": []' in text

    def test_round_trip_model(self):
        canvas = generate_canvas([_issue(1), _issue(2)])
        assert CanvasFile.model_validate_json(canvas.to_json()) == canvas

    def test_rejects_bad_id(self):
        with pytest.raises(ValidationError):
            CanvasNode(text="t", id="XYZ", x=0, y=0)

    def test_rejects_negative_position(self):
        with pytest.raises(ValidationError):
            CanvasNode(text="t", id="0" * 16, x=-1, y=0)

    def test_node_defaults(self):
        node = CanvasNode(text="t", id="0" * 16, x=0, y=0)
        assert node.node_type == "text"
        assert (node.width, node.height) == (300, 150)
