"""Data models for parsed judging issues."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Issue:
    """One judging report, parsed from a single numbered file."""

    issue_number: int
    watson: str
    severity: str
    title: str
