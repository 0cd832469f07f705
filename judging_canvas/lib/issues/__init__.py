"""Issue parsing library -- directory of judging reports to ordered Issue records."""

from judging_canvas.lib.issues.models import Issue
from judging_canvas.lib.issues.parser import (
    ISSUE_LINE_FIELDS,
    issue_sort_key,
    list_issue_paths,
    parse_directory,
    parse_issue_file,
    parse_issue_lines,
    parse_issue_number,
    split_lines,
)

__all__ = [
    "Issue",
    "ISSUE_LINE_FIELDS",
    "issue_sort_key",
    "list_issue_paths",
    "parse_directory",
    "parse_issue_file",
    "parse_issue_lines",
    "parse_issue_number",
    "split_lines",
]
