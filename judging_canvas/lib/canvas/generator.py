"""Turn ordered Issues into canvas nodes and a serialized canvas document."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from judging_canvas.lib.canvas.ids import generate_id
from judging_canvas.lib.canvas.layout import NODE_HEIGHT, NODE_WIDTH, node_position
from judging_canvas.lib.canvas.models import CanvasFile, CanvasNode
from judging_canvas.lib.issues.models import Issue

logger = logging.getLogger("canvas.generator")


def generate_label(issue: Issue) -> str:
    """Zero-padded 3 digit number, a dash, then the title.

    e.g. ``001 - This is a medium severity bug``
    """
    return f"{issue.issue_number:03d} - {issue.title}"


def generate_node(issue: Issue) -> CanvasNode:
    """Build the text node for a single issue."""
    label = generate_label(issue)
    x, y = node_position(issue.issue_number)
    return CanvasNode(
        node_type="text",
        text=label,
        id=generate_id(label),
        x=x,
        y=y,
        width=NODE_WIDTH,
        height=NODE_HEIGHT,
    )


def generate_nodes(issues: Iterable[Issue]) -> list[CanvasNode]:
    return [generate_node(issue) for issue in issues]


def generate_canvas(issues: Iterable[Issue]) -> CanvasFile:
    """Build the canvas document, keeping the input order of issues."""
    nodes = generate_nodes(issues)
    logger.debug("Generated %d canvas nodes", len(nodes))
    return CanvasFile(nodes=nodes, edges=[])


def render_canvas(canvas: CanvasFile) -> str:
    """Pretty-printed JSON text of the canvas."""
    return canvas.to_json()
