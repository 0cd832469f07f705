"""End-to-end conversion: issue directory in, canvas document out."""

from __future__ import annotations

import logging
from pathlib import Path

from judging_canvas.errors import CanvasWriteError
from judging_canvas.lib.canvas import generate_canvas, render_canvas
from judging_canvas.lib.canvas.models import CanvasFile
from judging_canvas.lib.issues import parse_directory

logger = logging.getLogger("pipeline")


def build_canvas(directory: str | Path) -> CanvasFile:
    """Parse ``directory`` and build the canvas model.

    Raises:
        DirectoryReadError: If the directory cannot be listed.
        IssueFileError: If any issue file fails to parse.
    """
    issues = parse_directory(Path(directory))
    return generate_canvas(issues)


def generate_canvas_file_content(directory: str | Path) -> str:
    """Serialized canvas document for every issue in ``directory``."""
    return render_canvas(build_canvas(directory))


def write_canvas(canvas: CanvasFile, output_path: str | Path) -> Path:
    """Write a rendered canvas to ``output_path``.

    Raises:
        CanvasWriteError: If the file cannot be written.
    """
    output_path = Path(output_path)
    content = render_canvas(canvas)
    try:
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise CanvasWriteError(output_path, e) from e
    logger.debug("Wrote %d nodes to %s", len(canvas.nodes), output_path)
    return output_path


def create_canvas_file(directory: str | Path, output_path: str | Path) -> Path:
    """Generate the canvas for ``directory`` and save it to ``output_path``.

    Nothing is written unless the whole directory parses.

    Returns:
        The path written to.
    """
    return write_canvas(build_canvas(directory), output_path)
