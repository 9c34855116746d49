"""Registry of analysis checks."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence

from ...errors import ConfigError
from .base import Rule
from .constructors import UnusedPrivateConstructorRule
from .javadoc_tags import DEFAULT_TAGS, JavadocTagsRule, TagConfig

# Factories receive the required Javadoc tags; rules without options ignore them.
RuleFactory = Callable[[Sequence[TagConfig]], Rule]

RULES: Dict[str, RuleFactory] = {
    UnusedPrivateConstructorRule.name: lambda tags: UnusedPrivateConstructorRule(),
    JavadocTagsRule.name: JavadocTagsRule,
}


def build_rules(
    names: Iterable[str] | None = None,
    tags: Sequence[TagConfig] = DEFAULT_TAGS,
) -> List[Rule]:
    """Instantiate the named rules (all of them when ``names`` is None)."""
    selected = list(RULES) if names is None else list(names)
    rules: List[Rule] = []
    for name in selected:
        factory = RULES.get(name)
        if factory is None:
            raise ConfigError(
                f"Unknown rule '{name}' (available: {', '.join(sorted(RULES))})"
            )
        rules.append(factory(tags))
    return rules


__all__ = ["RULES", "Rule", "build_rules"]
