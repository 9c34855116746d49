"""Issue data model and the sink shared by all rules of one file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Issue:
    """A single finding: where it is and what is wrong.

    ``col`` is 0 when the reporting rule works on whole lines.
    """

    kind: str
    line: int
    col: int
    message: str


@dataclass
class IssueSink:
    """Append-only, ordered collector of issues."""

    issues: list[Issue] = field(default_factory=list)

    def add(self, issue: Issue) -> None:
        log.debug("issue: %s", issue)
        self.issues.append(issue)

    def log(self, kind: str, line: int, message: str) -> None:
        """Record a line-level issue without column information."""
        self.add(Issue(kind=kind, line=line, col=0, message=message))

    def __iter__(self) -> Iterator[Issue]:
        return iter(self.issues)

    def __len__(self) -> int:
        return len(self.issues)
