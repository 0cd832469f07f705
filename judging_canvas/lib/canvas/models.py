"""Pydantic models for the Obsidian canvas document."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from judging_canvas.lib.canvas.layout import NODE_HEIGHT, NODE_WIDTH


class CanvasNode(BaseModel):
    """A text card on the canvas, one per issue."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    node_type: Literal["text"] = Field("text", alias="type")
    text: str
    id: str = Field(..., pattern=r"^[0-9a-f]{16}$")
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    width: int = NODE_WIDTH
    height: int = NODE_HEIGHT


class CanvasFile(BaseModel):
    """The whole canvas document. Edges are never produced."""

    nodes: list[CanvasNode] = []
    edges: list[dict] = []

    def to_json(self, indent: int = 2) -> str:
        """Serialize with canvas key names (``type``) in declaration order."""
        return self.model_dump_json(indent=indent, by_alias=True)
