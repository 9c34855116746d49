"""
Syntactic checks over Java sources.

Source files are parsed with tree-sitter; the Linter walks each tree in
document order and hands matching nodes to the registered checks, which
report through a shared IssueSink.
"""

from .checks import RULES, Rule, build_rules
from .checks.constructors import (
    UnusedPrivateConstructorRule,
    build_usage,
    collect_constructors,
    collect_private_constructors,
    find_unused_private_constructors,
    matches_signature,
)
from .checks.javadoc_tags import JavadocTagsRule, RequiredJavadocTag, TagConfig
from .context import AnalysisContext
from .issues import Issue, IssueSink
from .linter import FileResult, LintReport, Linter, find_java_files
from .members import (
    ConstructorMember,
    MethodMember,
    OtherMember,
    Statement,
    StatementKind,
    TypeBody,
    Visibility,
    read_type_body,
)
from .utils import create_java_parser

__all__ = [
    # Engine
    "Linter",
    "LintReport",
    "FileResult",
    "AnalysisContext",
    "find_java_files",
    "create_java_parser",

    # Issues
    "Issue",
    "IssueSink",

    # Checks
    "RULES",
    "Rule",
    "build_rules",
    "UnusedPrivateConstructorRule",
    "JavadocTagsRule",
    "RequiredJavadocTag",
    "TagConfig",
    "build_usage",
    "collect_constructors",
    "collect_private_constructors",
    "find_unused_private_constructors",
    "matches_signature",

    # Member model
    "TypeBody",
    "ConstructorMember",
    "MethodMember",
    "OtherMember",
    "Statement",
    "StatementKind",
    "Visibility",
    "read_type_body",
]
