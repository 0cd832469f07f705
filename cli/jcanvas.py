"""jcanvas -- Sherlock judging canvas CLI.

Thin command-line wrapper over the judging_canvas pipeline.
Reads a directory of issue reports and writes an Obsidian canvas file.

Usage:
    jcanvas --input-path DIR --output-path FILE [--verbose]
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from judging_canvas import __version__
from judging_canvas.config import get_config
from judging_canvas.errors import CanvasError
from judging_canvas.pipeline import build_canvas, write_canvas

logger = logging.getLogger("cli")


@click.command()
@click.option(
    "-i",
    "--input-path",
    required=True,
    envvar="JCANVAS_INPUT_PATH",
    help="Path to directory containing Sherlock judging issues.",
)
@click.option(
    "-o",
    "--output-path",
    required=True,
    envvar="JCANVAS_OUTPUT_PATH",
    help=(
        "Output path, where you want to save the created canvas file. "
        "For ex. ~/Documents/Judging/Contest.canvas"
    ),
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="jcanvas")
def cli(input_path: str, output_path: str, verbose: bool) -> None:
    """Create an Obsidian canvas with one card per judging issue."""
    try:
        get_config().configure_logging(verbose)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="JCANVAS_LOG_LEVEL")

    source = Path(input_path).expanduser()
    target = Path(output_path).expanduser()
    logger.info("Generating canvas from %s", source)

    try:
        canvas = build_canvas(source)
        written = write_canvas(canvas, target)
    except CanvasError as e:
        raise click.ClickException(str(e))

    click.echo(f"✓ Canvas written to {written} ({len(canvas.nodes)} nodes)")


# ── entry point ───────────────────────────────────────────────────────────


def main() -> None:
    """Entry point for the jcanvas command."""
    cli()


if __name__ == "__main__":
    main()
