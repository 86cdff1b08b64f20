"""
Line Classifier — declarative rule tables for quote markers, quote headers
and signature markers.

Every predicate looks at a single line in natural reading order. Rules are
independent (name, regex) pairs: a line matches a table when any rule does,
so new rules or locales never touch the fragment builder.
"""
import re
from typing import Iterable, Optional, Pattern, Sequence, Tuple

from reply_parser.config.constants import QUOTE_MARKER_RULES, SIGNATURE_MARKER_RULES

Rule = Tuple[str, Pattern[str]]


def compile_rules(rules: Iterable[Tuple[str, str]]) -> Tuple[Rule, ...]:
    return tuple((name, re.compile(regex)) for name, regex in rules)


QUOTE_MARKER_TABLE: Tuple[Rule, ...] = compile_rules(QUOTE_MARKER_RULES)
SIGNATURE_MARKER_TABLE: Tuple[Rule, ...] = compile_rules(SIGNATURE_MARKER_RULES)


def first_matching_rule(rules: Sequence[Rule], line: str) -> Optional[str]:
    """Name of the first rule matching *line*, or None."""
    for name, regex in rules:
        if regex.search(line):
            return name
    return None


def is_quote_marker(line: str) -> bool:
    """True if the line is '>'-quoted text."""
    return first_matching_rule(QUOTE_MARKER_TABLE, line) is not None


def is_signature_marker(line: str) -> bool:
    """
    True if the line opens a signature block.

    Matches '--' or '__' separators, a trailing hyphen glued to a
    word ('Bob-') and mobile client tags such as 'Sent from my iPhone'.
    """
    return first_matching_rule(SIGNATURE_MARKER_TABLE, line) is not None


def is_quote_header(line: str, patterns: Sequence[Pattern[str]]) -> bool:
    """True if the line matches any of the compiled quote-header patterns."""
    return any(p.search(line) for p in patterns)


def prepare_line(line: str) -> str:
    """
    Strip trailing whitespace unless the raw line is a signature marker,
    so blank-looking lines classify as empty and '-- ' keeps its form.
    """
    if is_signature_marker(line):
        return line
    return line.rstrip()


class LineClassifier:
    """Classifier bound to one immutable set of quote-header patterns."""

    def __init__(self, quote_headers: Sequence[Pattern[str]]):
        self.quote_headers: Tuple[Pattern[str], ...] = tuple(quote_headers)

    def is_quote_marker(self, line: str) -> bool:
        return is_quote_marker(line)

    def is_signature_marker(self, line: str) -> bool:
        return is_signature_marker(line)

    def is_quote_header(self, line: str) -> bool:
        return is_quote_header(line, self.quote_headers)

    def prepare_line(self, line: str) -> str:
        return prepare_line(line)
