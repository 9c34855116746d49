"""Run configuration assembled from command-line arguments."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import ConfigError
from .syntaxer.checks.javadoc_tags import DEFAULT_TAGS, TagConfig


@dataclass
class LintConfig:
    """
    What to check and how loudly.

    Attributes:
        rules: Enabled rule names, None for all registered rules;
            unknown names are rejected by build_rules
        tags: Javadoc tags required in class/interface comments
        log_level: Level handed to logging.basicConfig
    """
    rules: Optional[List[str]] = None
    tags: Sequence[TagConfig] = DEFAULT_TAGS
    log_level: int = logging.INFO

    @classmethod
    def from_args(cls, args) -> "LintConfig":
        if args.quiet:
            level = logging.WARNING
        elif args.verbose:
            level = logging.DEBUG
        else:
            level = logging.INFO
        tags = [parse_tag(spec) for spec in args.tag] if args.tag else DEFAULT_TAGS
        return cls(rules=args.rule or None, tags=tags, log_level=level)


def parse_tag(spec: str) -> TagConfig:
    """Parse ``NAME=REGEX`` into a TagConfig."""
    name, sep, pattern = spec.partition("=")
    name = name.strip().lstrip("@")
    if not sep or not name:
        raise ConfigError(f"Invalid tag '{spec}' (expected NAME=REGEX)")
    try:
        content = re.compile(pattern)
    except re.error as e:
        raise ConfigError(f"Invalid pattern for tag '@{name}': {e}") from e
    return TagConfig(name, content)
