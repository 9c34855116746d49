"""Checks for required Javadoc tags in class and interface comments."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

import tree_sitter

from ..context import AnalysisContext
from ..issues import IssueSink
from ..utils import node_line
from .base import Rule

log = logging.getLogger(__name__)

KIND = "javadoc-tags"

TAG_SEARCH_TEMPLATE = r"(?P<name>^ +\* +@{name})( +)(?P<cont>.*)"


@dataclass(frozen=True)
class TagConfig:
    """
    One required tag.

    Attributes:
        name: Tag name without the ``@``
        content: Pattern the tag text has to match completely
        tag: Pattern locating the tag line; must define the ``name`` and
            ``cont`` groups. Built from ``name`` when omitted.
    """
    name: str
    content: re.Pattern
    tag: Optional[re.Pattern] = None

    @property
    def search(self) -> re.Pattern:
        if self.tag is not None:
            return self.tag
        return re.compile(TAG_SEARCH_TEMPLATE.format(name=re.escape(self.name)))


DEFAULT_TAGS = (
    TagConfig("since", re.compile(r"^\d+(\.\d+){1,2}(\.[0-9A-Za-z]+)?$")),
)


class RequiredJavadocTag:
    """Validates presence and format of one tag within comment lines."""

    def __init__(self, config: TagConfig, sink: IssueSink):
        self.config = config
        self.sink = sink

    def match_tag_format(self, lines: Sequence[str], start: int, end: int) -> None:
        """
        Check the tag within ``lines[start..end]`` (0-based, inclusive).

        Reports a missing tag at the first comment line, or a malformed one
        at the line it was found on.
        """
        search = self.config.search
        found = None
        for pos in range(start, min(end, len(lines) - 1) + 1):
            match = search.fullmatch(lines[pos])
            if match is not None and _tag_found(match):
                found = (pos, match.group("cont"))
                break

        if found is None:
            self.sink.log(
                KIND,
                start + 1,
                f"Missing '@{self.config.name}' tag in class/interface comment",
            )
            return

        pos, text = found
        if self.config.content.fullmatch(text) is None:
            self.sink.log(
                KIND,
                pos + 1,
                f"Tag text '{text}' does not match the pattern '{self.config.content.pattern}'",
            )


def _tag_found(match: re.Match) -> bool:
    return not _blank(match.group("name")) and not _blank(match.group("cont"))


def _blank(text: Optional[str]) -> bool:
    return text is None or text.strip() == ""


def find_javadoc(node: tree_sitter.Node) -> Optional[tree_sitter.Node]:
    """The ``/** */`` comment right before a declaration, if any."""
    prev = node.prev_sibling
    if prev is None or prev.type not in ("block_comment", "comment"):
        return None
    if prev.text is None or not prev.text.startswith(b"/**"):
        return None
    return prev


class JavadocTagsRule(Rule):
    name = KIND
    node_types = ("class_declaration", "interface_declaration")

    def __init__(self, tags: Sequence[TagConfig] = DEFAULT_TAGS):
        self.tags = tuple(tags)

    def visit(self, node: tree_sitter.Node, ctx: AnalysisContext) -> None:
        comment = find_javadoc(node)
        if comment is None:
            log.debug("no javadoc before %s at line %d", node.type, node_line(node))
            return
        start, end = comment.start_point[0], comment.end_point[0]
        for tag in self.tags:
            RequiredJavadocTag(tag, ctx.sink).match_tag_format(ctx.lines, start, end)
