"""Java source checks built on tree-sitter."""

from .errors import ConfigError, JavalintError, SourceError
from .syntaxer import Issue, Linter, LintReport

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "JavalintError",
    "SourceError",
    "Issue",
    "Linter",
    "LintReport",
    "__version__",
]
