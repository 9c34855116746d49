"""
Detection of private constructors that nothing in their class delegates to.

Usage is derived from ``this(...)`` statements only. The syntax tree has no
resolved types, so a delegation is matched to constructors by arity alone:
a call with N arguments counts as a use of *every* constructor taking N
parameters. Object creation expressions (``new A()``), including those in
static factory methods, are not counted as usage, so a private constructor
reached only that way is still reported.
"""

from __future__ import annotations

import logging

import tree_sitter

from ..context import AnalysisContext
from ..members import ConstructorMember, OtherMember, TypeBody, read_type_body
from .base import Rule

log = logging.getLogger(__name__)

KIND = "unused-private-constructor"
MESSAGE = "Unused private constructor."


def collect_constructors(body: TypeBody) -> list[ConstructorMember]:
    """Constructors declared directly in the body, in source order."""
    return body.constructors


def collect_private_constructors(body: TypeBody) -> list[ConstructorMember]:
    return [c for c in collect_constructors(body) if c.is_private]


def matches_signature(argument_count: int, parameter_count: int) -> bool:
    """Whether a delegation call could target a constructor (arity only)."""
    return argument_count == parameter_count


def build_usage(body: TypeBody) -> frozenset[int]:
    """
    Indices of the constructors reached by a delegation from another member.

    Only direct statements of each constructor or method body are scanned.
    A constructor never counts as using itself.
    """
    constructors = collect_constructors(body)
    used: set[int] = set()
    for member in body.members:
        if isinstance(member, OtherMember):
            continue
        for stmt in member.statements:
            if not stmt.is_delegation:
                continue
            for ctor in constructors:
                if ctor.index == member.index:
                    continue
                if matches_signature(stmt.argument_count, ctor.parameter_count):
                    used.add(ctor.index)
    return frozenset(used)


def find_unused_private_constructors(body: TypeBody) -> list[ConstructorMember]:
    used = build_usage(body)
    return [c for c in collect_private_constructors(body) if c.index not in used]


class UnusedPrivateConstructorRule(Rule):
    """Reports each private constructor no other member delegates to."""

    name = KIND
    node_types = ("class_declaration",)

    def visit(self, node: tree_sitter.Node, ctx: AnalysisContext) -> None:
        body_node = node.child_by_field_name("body")
        if body_node is None:
            return
        for ctor in find_unused_private_constructors(read_type_body(body_node)):
            log.debug("unused private constructor at line %d", ctor.line)
            ctx.sink.log(KIND, ctor.line, MESSAGE)
