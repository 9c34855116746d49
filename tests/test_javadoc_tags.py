"""
tests/test_javadoc_tags.py

Tests for required Javadoc tag validation:
- RequiredJavadocTag on raw comment lines
- JavadocTagsRule on parsed class and interface declarations
"""

import re
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from javalint.syntaxer import IssueSink, JavadocTagsRule, Linter, RequiredJavadocTag, TagConfig
from javalint.syntaxer.checks.javadoc_tags import DEFAULT_TAGS, KIND


SINCE = DEFAULT_TAGS[0]


@pytest.fixture
def sink():
    return IssueSink()


class TestRequiredJavadocTag:

    def test_valid_tag(self, sink):
        lines = ["/**", " * This is my class.", " *", " * @since 0.3", " */"]
        RequiredJavadocTag(SINCE, sink).match_tag_format(lines, 0, 4)
        assert len(sink) == 0

    def test_extra_spaces_are_allowed(self, sink):
        lines = ["    /**", "     * Inner.", "     *", "     *    @since    0.3.1", "     */"]
        RequiredJavadocTag(SINCE, sink).match_tag_format(lines, 0, 4)
        assert len(sink) == 0

    def test_missing_tag_reported_at_comment_start(self, sink):
        lines = ["package x;", "/**", " * No tags here.", " */"]
        RequiredJavadocTag(SINCE, sink).match_tag_format(lines, 1, 3)
        (issue,) = sink
        assert issue.line == 2
        assert issue.kind == KIND
        assert issue.message == "Missing '@since' tag in class/interface comment"

    def test_tag_without_content_is_missing(self, sink):
        lines = ["/**", " * @since", " */"]
        RequiredJavadocTag(SINCE, sink).match_tag_format(lines, 0, 2)
        assert [i.message for i in sink] == ["Missing '@since' tag in class/interface comment"]

    def test_bad_content_reported_at_tag_line(self, sink):
        lines = ["/**", " * Foo.", " * @since yesterday", " */"]
        RequiredJavadocTag(SINCE, sink).match_tag_format(lines, 0, 3)
        (issue,) = sink
        assert issue.line == 3
        assert issue.message == (
            f"Tag text 'yesterday' does not match the pattern '{SINCE.content.pattern}'"
        )

    def test_only_first_tag_is_checked(self, sink):
        lines = ["/**", " * @since 1.0", " * @since nope", " */"]
        RequiredJavadocTag(SINCE, sink).match_tag_format(lines, 0, 3)
        assert len(sink) == 0

    def test_lines_outside_range_are_ignored(self, sink):
        lines = [" * @since 1.0", "/**", " * Foo.", " */"]
        RequiredJavadocTag(SINCE, sink).match_tag_format(lines, 1, 3)
        assert [i.line for i in sink] == [2]

    def test_custom_search_pattern(self, sink):
        config = TagConfig(
            "author",
            re.compile(r"[a-z]+"),
            tag=re.compile(r"(?P<name>^\s*\*\s*@author)(\s+)(?P<cont>.*)"),
        )
        lines = ["/**", "* @author Bob", "*/"]
        RequiredJavadocTag(config, sink).match_tag_format(lines, 0, 2)
        (issue,) = sink
        assert issue.message == "Tag text 'Bob' does not match the pattern '[a-z]+'"

    def test_default_search_pattern_uses_tag_name(self):
        config = TagConfig("version", re.compile(".+"))
        assert config.search.fullmatch(" * @version 2") is not None
        assert config.search.fullmatch(" * @since 2") is None


class TestJavadocTagsRule:

    @pytest.fixture
    def linter(self):
        return Linter([JavadocTagsRule()])

    def test_class_with_valid_since(self, linter):
        issues = linter.lint_source(
            "/**\n"
            " * Foo.\n"
            " *\n"
            " * @since 1.0\n"
            " */\n"
            "public final class Foo {\n"
            "}\n"
        )
        assert issues == []

    def test_class_missing_since(self, linter):
        issues = linter.lint_source(
            "package foo;\n"
            "\n"
            "/**\n"
            " * Foo.\n"
            " */\n"
            "public final class Foo {\n"
            "}\n"
        )
        assert [(i.line, i.message) for i in issues] == [
            (3, "Missing '@since' tag in class/interface comment"),
        ]

    def test_interface_with_bad_since(self, linter):
        issues = linter.lint_source(
            "/**\n"
            " * Bar.\n"
            " * @since soon\n"
            " */\n"
            "interface Bar {\n"
            "}\n"
        )
        assert [i.line for i in issues] == [3]

    def test_declaration_without_javadoc_is_skipped(self, linter):
        issues = linter.lint_source(
            "// plain comment\n"
            "class Foo {\n"
            "}\n"
        )
        assert issues == []

    def test_several_required_tags(self):
        linter = Linter([JavadocTagsRule([SINCE, TagConfig("author", re.compile(".+"))])])
        issues = linter.lint_source(
            "/**\n"
            " * Foo.\n"
            " * @since 1.0\n"
            " */\n"
            "class Foo {\n"
            "}\n"
        )
        assert [i.message for i in issues] == [
            "Missing '@author' tag in class/interface comment",
        ]

    def test_form_feed_does_not_shift_lines(self, linter):
        """Form feeds are whitespace, not line breaks."""
        issues = linter.lint_source(
            "package p; \x0c \x0c \x0c\n"
            "/**\n"
            " * Foo.\n"
            " *\n"
            " * @since 0.3\n"
            " */\n"
            "class Foo {}\n"
        )
        assert issues == []

    def test_crlf_line_endings(self, linter):
        issues = linter.lint_source(
            "/**\r\n"
            " * Foo.\r\n"
            " * @since nope\r\n"
            " */\r\n"
            "class Foo {}\r\n"
        )
        assert [(i.line, i.message) for i in issues] == [
            (3, f"Tag text 'nope' does not match the pattern '{SINCE.content.pattern}'"),
        ]
