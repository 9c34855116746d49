"""Dispatch contract between the walker and the checks."""

from __future__ import annotations

import tree_sitter

from ..context import AnalysisContext


class Rule:
    """
    A check invoked once per matching node.

    The walker calls ``visit`` for every node whose type is listed in
    ``node_types``, in document order. Each call is independent: a rule
    keeps no per-file state on the instance and reports only through
    ``ctx.sink``.
    """

    name: str = ""
    node_types: tuple[str, ...] = ()

    def visit(self, node: tree_sitter.Node, ctx: AnalysisContext) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
