"""Analysis context shared across checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

import tree_sitter

from .issues import IssueSink
from .utils import iter_nodes


@dataclass
class AnalysisContext:
    tree: tree_sitter.Tree
    source_bytes: bytes
    path: Optional[str] = None
    sink: IssueSink = field(default_factory=IssueSink)
    lines: list[str] = field(init=False, default_factory=list)

    def __post_init__(self):
        # Rows follow tree-sitter, which only breaks on "\n".
        text = self.source_bytes.decode("utf-8", errors="replace")
        self.lines = [line.removesuffix("\r") for line in text.split("\n")]

    def iter_nodes(self) -> Iterator[tree_sitter.Node]:
        return iter_nodes(self.tree.root_node)
