"""Canvas generation library -- Issues to an Obsidian canvas document.

Pure functions only: labels, ids, grid layout and serialization. No file
system access.
"""

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

__all__ = [
    "generate_canvas",
    "generate_label",
    "generate_node",
    "generate_nodes",
    "render_canvas",
    "generate_id",
    "label_hash",
    "node_position",
    "node_x",
    "node_y",
    "CanvasFile",
    "CanvasNode",
]
