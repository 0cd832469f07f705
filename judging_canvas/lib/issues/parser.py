"""Parse a directory of Sherlock judging issues into Issue records.

Each report is a markdown file named after its issue number (``001.md``)
with a fixed layout::

    <watson>

    <severity>

    # <title>

Fields are pulled from fixed line positions, not from a grammar.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from judging_canvas.errors import DirectoryReadError, IssueFileError
from judging_canvas.lib.issues.models import Issue

logger = logging.getLogger("issues.parser")

MAX_ISSUE_NUMBER = 0xFFFF
UNPARSABLE_SORT_KEY = -1

_DIGITS_PATTERN = re.compile(r"[0-9]+")

# Unicode White_Space only; \x1c-\x1f are kept.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _verbatim(line: str) -> str:
    return line


def _strip_heading(line: str) -> str:
    """Drop the leading run of markdown ``#`` characters and surrounding whitespace."""
    return line.lstrip("#").strip(WHITESPACE)


@dataclass(frozen=True)
class LineField:
    """Where an Issue field lives in the file and how it is cleaned up."""

    name: str
    index: int
    transform: Callable[[str], str]


ISSUE_LINE_FIELDS: tuple[LineField, ...] = (
    LineField("watson", 0, _verbatim),
    LineField("severity", 2, _verbatim),
    LineField("title", 4, _strip_heading),
)

MIN_ISSUE_LINES = max(f.index for f in ISSUE_LINE_FIELDS) + 1


def _parse_stem(stem: str) -> int | None:
    """Parse a file stem as an unsigned 16-bit integer, or return None."""
    if not _DIGITS_PATTERN.fullmatch(stem):
        return None
    value = int(stem)
    if value > MAX_ISSUE_NUMBER:
        return None
    return value


def issue_sort_key(path: Path) -> int:
    """Ordering key for a directory entry: its numeric stem, lowest when unparsable."""
    value = _parse_stem(Path(path).stem)
    return UNPARSABLE_SORT_KEY if value is None else value


def parse_issue_number(path: Path) -> int:
    """Derive the issue number from a file's base name.

    Raises:
        ValueError: If the stem is not an integer in 1..65535.
    """
    stem = Path(path).stem
    value = _parse_stem(stem)
    if value is None:
        raise ValueError(
            f"File name '{stem}' is not an issue number "
            f"(expected an integer between 1 and {MAX_ISSUE_NUMBER})"
        )
    if value == 0:
        raise ValueError("Issue number 0 is not allowed; numbering starts at 1")
    return value


def split_lines(content: str) -> list[str]:
    r"""Split text on ``\n`` only, dropping the ``\r`` of each ``\r\n``.

    A final newline does not start an extra line. Other separators such as
    form feed or U+2028 stay inside the line.
    """
    lines = content.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def parse_issue_lines(lines: Sequence[str], issue_number: int) -> Issue:
    """Build an Issue from the lines of a report.

    Args:
        lines: The report's text split into lines.
        issue_number: Number taken from the file name.

    Returns:
        The parsed Issue.

    Raises:
        ValueError: If there are fewer lines than the layout needs.
    """
    if len(lines) < MIN_ISSUE_LINES:
        raise ValueError(
            f"Expected at least {MIN_ISSUE_LINES} lines "
            f"(watson, severity and title), found {len(lines)}"
        )

    fields = {f.name: f.transform(lines[f.index]) for f in ISSUE_LINE_FIELDS}
    return Issue(issue_number=issue_number, **fields)


def parse_issue_file(path: Path) -> Issue:
    """Read and parse one issue file.

    Raises:
        IssueFileError: If the file cannot be read as UTF-8 text, has too few
            lines, or is not named after a valid issue number.
    """
    path = Path(path)
    try:
        # Bytes, not text mode: a lone \r is not a line break.
        content = path.read_bytes().decode("utf-8")
        issue_number = parse_issue_number(path)
        return parse_issue_lines(split_lines(content), issue_number)
    except (OSError, ValueError) as e:
        raise IssueFileError(path, e) from e


def list_issue_paths(directory: Path) -> list[Path]:
    """List every entry of ``directory`` ordered by issue number.

    The listing is sorted by name first so the result never depends on the
    order the OS returns entries in; the stable sort by issue number keeps
    that order for entries sharing a key.

    Raises:
        DirectoryReadError: If the directory cannot be listed.
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise DirectoryReadError(directory, e) from e

    entries.sort(key=issue_sort_key)
    return entries


def parse_directory(directory: Path) -> list[Issue]:
    """Parse every file in ``directory`` into Issues, ascending by issue number.

    Raises:
        DirectoryReadError: If the directory cannot be listed.
        IssueFileError: On the first file that fails to parse. No partial
            result is returned.
    """
    paths = list_issue_paths(directory)
    logger.debug("Found %d candidate issue files in %s", len(paths), directory)

    issues = [parse_issue_file(path) for path in paths]
    logger.debug("Parsed %d issues from %s", len(issues), directory)
    return issues
