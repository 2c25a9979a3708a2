"""Exceptions raised by the content linter."""


class LintError(Exception):
    """Base class for content linter errors."""


class ContentLoadError(LintError):
    """A content path is missing or cannot be read."""
