"""Walks a parsed file and dispatches nodes to the registered checks."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import tree_sitter

from ..errors import SourceError
from .checks import Rule, build_rules
from .context import AnalysisContext
from .issues import Issue
from .utils import create_java_parser, node_line

log = logging.getLogger(__name__)


@dataclass
class FileResult:
    path: str
    issues: List[Issue] = field(default_factory=list)


@dataclass
class LintReport:
    files: List[FileResult] = field(default_factory=list)

    @property
    def issue_count(self) -> int:
        return sum(len(f.issues) for f in self.files)

    @property
    def has_issues(self) -> bool:
        return self.issue_count > 0


class Linter:
    """
    Runs rules over Java sources.

    Nodes are visited in document order; each rule sees only the node
    types it declares. A rule that fails on a node is logged and skipped
    so the remaining nodes and rules still run.

    Example:
        linter = Linter()
        for issue in linter.lint_file("Foo.java"):
            print(issue.line, issue.message)
    """

    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self.rules = list(rules) if rules is not None else build_rules()
        self.parser = create_java_parser()
        self._dispatch: Dict[str, List[Rule]] = defaultdict(list)
        for rule in self.rules:
            for node_type in rule.node_types:
                self._dispatch[node_type].append(rule)

    def lint_tree(
        self,
        tree: tree_sitter.Tree,
        source_bytes: bytes,
        path: Optional[str] = None,
    ) -> List[Issue]:
        ctx = AnalysisContext(tree, source_bytes, path)
        for node in ctx.iter_nodes():
            for rule in self._dispatch.get(node.type, ()):
                try:
                    rule.visit(node, ctx)
                except Exception:
                    log.warning(
                        "rule %s failed on %s at %s:%d",
                        rule.name, node.type, path or "<source>",
                        node_line(node), exc_info=True,
                    )
        return list(ctx.sink)

    def lint_source(self, source: bytes | str, path: Optional[str] = None) -> List[Issue]:
        if isinstance(source, str):
            source = source.encode("utf-8")
        tree = self.parser.parse(source)
        return self.lint_tree(tree, source, path)

    def lint_file(self, path: str | Path) -> List[Issue]:
        path = Path(path)
        log.debug("parse sourcefile %s", path)
        try:
            source = path.read_bytes()
        except OSError as e:
            raise SourceError(f"Cannot read {path}: {e}") from e
        return self.lint_source(source, str(path))

    def lint_paths(self, paths: Iterable[str | Path]) -> LintReport:
        report = LintReport()
        for path in find_java_files(paths):
            report.files.append(FileResult(str(path), self.lint_file(path)))
        return report


def find_java_files(paths: Iterable[str | Path]) -> List[Path]:
    """Expand directories into their ``*.java`` files, sorted."""
    files: List[Path] = []
    for path in map(Path, paths):
        if path.is_dir():
            files.extend(sorted(path.rglob("*.java")))
        elif path.exists():
            files.append(path)
        else:
            raise SourceError(f"Path not found: {path}")
    return files
