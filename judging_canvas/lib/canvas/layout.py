"""Grid placement of canvas nodes.

Nodes tile a 20-column grid in issue-number order. Each cell is 360 wide
and 300 tall, leaving a 60 unit gutter beside and a 150 unit gutter below
every 300x150 node.
"""

from __future__ import annotations

NODE_WIDTH = 300
NODE_HEIGHT = 150
GRID_COLUMNS = 20
COLUMN_SPACING = 360
ROW_SPACING = 300


def _grid_index(issue_number: int) -> int:
    if issue_number < 1:
        raise ValueError(f"Issue numbers start at 1, got {issue_number}")
    return issue_number - 1


def node_x(issue_number: int) -> int:
    column = _grid_index(issue_number) % GRID_COLUMNS
    return column * COLUMN_SPACING


def node_y(issue_number: int) -> int:
    row = _grid_index(issue_number) // GRID_COLUMNS
    return row * ROW_SPACING


def node_position(issue_number: int) -> tuple[int, int]:
    """Return the ``(x, y)`` pixel position of an issue's node.

    Raises:
        ValueError: If ``issue_number`` is below 1.
    """
    return node_x(issue_number), node_y(issue_number)
