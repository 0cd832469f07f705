"""Deterministic canvas node ids.

An id is SipHash-1-3 (zero key) over the label's UTF-8 bytes followed by a
single 0xFF terminator, rendered as 16 lowercase hex digits. Regenerating a
canvas from the same reports therefore yields the same ids, and they match
the ids of canvases produced by earlier releases of the tool.
"""

from __future__ import annotations

from judging_canvas.lib.canvas.siphash import siphash13

STRING_TERMINATOR = b"\xff"
ID_HEX_DIGITS = 16


def label_hash(label: str) -> int:
    """64-bit hash of a node label."""
    return siphash13(label.encode("utf-8") + STRING_TERMINATOR)


def generate_id(label: str) -> str:
    """Obsidian canvas nodes use 16 hex digit identifiers."""
    return format(label_hash(label), f"0{ID_HEX_DIGITS}x")
