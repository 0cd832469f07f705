"""Error kinds raised while turning an issue directory into a canvas."""

from __future__ import annotations

from pathlib import Path


class CanvasError(Exception):
    """Base class for every failure the pipeline reports to its caller.

    Attributes:
        path: The directory or file the failure applies to.
        cause: The underlying exception, also chained as ``__cause__``.
    """

    action = "processing"

    def __init__(self, path: str | Path, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        message = f"Failed while {self.action} `{self.path}`"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class DirectoryReadError(CanvasError):
    """The input directory is missing, not a directory, or cannot be listed."""

    action = "reading directory"


class IssueFileError(CanvasError):
    """A single candidate file could not be turned into an Issue."""

    action = "parsing issue file"


class CanvasWriteError(CanvasError):
    """The generated canvas could not be written to the output path."""

    action = "writing canvas file"
