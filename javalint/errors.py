"""Exceptions raised by the outer layers (configuration, file access)."""


class JavalintError(Exception):
    """Base class for errors that stop a lint run."""


class ConfigError(JavalintError):
    """Unknown rule name or invalid rule option."""


class SourceError(JavalintError):
    """A source file or directory could not be read."""
