"""Shared utilities for Tree-sitter parsing and node helpers."""

from __future__ import annotations

from typing import Iterator

import tree_sitter
import tree_sitter_java

JAVA_LANGUAGE = tree_sitter.Language(tree_sitter_java.language())

COMMENT_TYPES = ("line_comment", "block_comment", "comment")


def create_java_parser() -> tree_sitter.Parser:
    """Create a Tree-sitter parser configured for Java."""
    return tree_sitter.Parser(JAVA_LANGUAGE)


def node_line(node: tree_sitter.Node) -> int:
    """1-based line on which the node starts."""
    return node.start_point[0] + 1


def iter_nodes(root: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Iterative preorder traversal of the syntax tree."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def named_children(node: tree_sitter.Node) -> list[tree_sitter.Node]:
    """Named children of a node, comments excluded."""
    return [c for c in node.named_children if c.type not in COMMENT_TYPES]
