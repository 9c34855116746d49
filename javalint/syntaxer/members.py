"""
Read-only member model of a Java type body.

Projects a tree-sitter ``class_body`` node into plain, frozen values that
the checks can reason about without touching the syntax tree again.
Anything missing from the tree (modifiers, parameters, a body) is read as
absence of information rather than an error, so a malformed member never
stops the analysis of its siblings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

import tree_sitter

from .utils import COMMENT_TYPES, named_children, node_line

log = logging.getLogger(__name__)


class Visibility(Enum):
    """Declared access level of a member."""
    PRIVATE = "private"
    PACKAGE = "package-private"
    PROTECTED = "protected"
    PUBLIC = "public"


class StatementKind(Enum):
    DELEGATION = "delegation"
    OTHER = "other"


@dataclass(frozen=True)
class Statement:
    """
    Top-level statement of a member body.

    Only ``this(...)`` delegations carry an argument count; every other
    statement is opaque.
    """
    kind: StatementKind
    line: int
    argument_count: Optional[int] = None

    @property
    def is_delegation(self) -> bool:
        return self.kind is StatementKind.DELEGATION


@dataclass(frozen=True)
class ConstructorMember:
    index: int
    visibility: Visibility
    parameter_count: int
    line: int
    statements: tuple[Statement, ...] = ()

    @property
    def is_private(self) -> bool:
        return self.visibility is Visibility.PRIVATE


@dataclass(frozen=True)
class MethodMember:
    index: int
    line: int
    statements: tuple[Statement, ...] = ()


@dataclass(frozen=True)
class OtherMember:
    """Fields, nested types, initializers; ignored by the checks."""
    index: int
    line: int
    node_type: str = ""


Member = Union[ConstructorMember, MethodMember, OtherMember]


@dataclass(frozen=True)
class TypeBody:
    """Members of one type declaration, in source order."""
    members: tuple[Member, ...] = field(default_factory=tuple)

    @property
    def constructors(self) -> list[ConstructorMember]:
        return [m for m in self.members if isinstance(m, ConstructorMember)]

    @property
    def methods(self) -> list[MethodMember]:
        return [m for m in self.members if isinstance(m, MethodMember)]


# ============================================================================
# Reading from tree-sitter
# ============================================================================

_VISIBILITY_KEYWORDS = {
    "private": Visibility.PRIVATE,
    "protected": Visibility.PROTECTED,
    "public": Visibility.PUBLIC,
}

_PARAMETER_TYPES = ("formal_parameter", "spread_parameter")

# Argument lists of a recovered this(...) inside a method body.
_DELEGATION_LISTS = ("argument_list", "formal_parameters")


def read_type_body(body: tree_sitter.Node) -> TypeBody:
    """
    Build a TypeBody from the direct children of a ``class_body`` node.

    Nested types stay opaque; their own members belong to their own
    declaration.
    """
    members: list[Member] = []
    for child in body.named_children:
        if child.type in COMMENT_TYPES:
            continue
        index = len(members)
        if child.type == "constructor_declaration":
            members.append(read_constructor(child, index))
        elif child.type == "method_declaration":
            members.append(
                MethodMember(
                    index=index,
                    line=node_line(child),
                    statements=read_statements(child.child_by_field_name("body")),
                )
            )
        else:
            members.append(OtherMember(index=index, line=node_line(child), node_type=child.type))
    type_body = TypeBody(members=tuple(members))
    log.debug(
        "type body at line %d: %d members, %d constructors",
        node_line(body), len(members), len(type_body.constructors),
    )
    return type_body


def read_constructor(node: tree_sitter.Node, index: int = 0) -> ConstructorMember:
    return ConstructorMember(
        index=index,
        visibility=read_visibility(node),
        parameter_count=count_parameters(node.child_by_field_name("parameters")),
        line=node_line(node),
        statements=read_statements(node.child_by_field_name("body")),
    )


def read_visibility(node: tree_sitter.Node) -> Visibility:
    """Visibility from the ``modifiers`` child; none means package-private."""
    for child in node.children:
        if child.type != "modifiers":
            continue
        for mod in child.children:
            visibility = _VISIBILITY_KEYWORDS.get(mod.type)
            if visibility is not None:
                return visibility
    return Visibility.PACKAGE


def count_parameters(params: Optional[tree_sitter.Node]) -> int:
    if params is None:
        return 0
    return sum(1 for c in params.named_children if c.type in _PARAMETER_TYPES)


def count_arguments(args: Optional[tree_sitter.Node]) -> int:
    if args is None:
        return 0
    return len(named_children(args))


def read_statements(body: Optional[tree_sitter.Node]) -> tuple[Statement, ...]:
    """Direct statements of a body; nested blocks are not entered."""
    if body is None:
        return ()
    return tuple(read_statement(child) for child in named_children(body))


def read_statement(node: tree_sitter.Node) -> Statement:
    """
    Classify one top-level statement.

    ``this(...)`` is only legal in a constructor body; inside a method
    tree-sitter recovers it as an ERROR node holding ``this`` and the
    parenthesized list, which still counts as a delegation.
    """
    if node.type == "explicit_constructor_invocation":
        ctor = node.child_by_field_name("constructor")
        if ctor is not None and ctor.type == "this":
            return Statement(
                kind=StatementKind.DELEGATION,
                line=node_line(node),
                argument_count=count_arguments(node.child_by_field_name("arguments")),
            )
    elif node.type == "ERROR":
        children = named_children(node)
        if (
            len(children) >= 2
            and children[0].type == "this"
            and children[1].type in _DELEGATION_LISTS
        ):
            return Statement(
                kind=StatementKind.DELEGATION,
                line=node_line(node),
                argument_count=count_arguments(children[1]),
            )
    return Statement(kind=StatementKind.OTHER, line=node_line(node))
