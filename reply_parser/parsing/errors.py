"""
Parser exceptions.

Parsing itself is total; only pattern configuration can fail.
"""
import re


class PatternSyntaxError(Exception):
    """Raised when a caller-supplied quote-header pattern does not compile."""

    def __init__(self, pattern: str, error: re.error):
        self.pattern = pattern
        self.error = error
        super().__init__(f"Invalid quote-header pattern {pattern!r}: {error}")
