"""
Quote-Header Normalizer — pre-pass run before fragmentation.

Mail clients wrap long quote headers:

    On Tue, Mar 3, 2020 at 10:12 AM, Jane Doe <jane@example.com>
    wrote:

Each wrapped header is collapsed into one logical line so the fragment
builder never sees a header split across lines.
"""
import logging
from typing import List, Match, Optional, Pattern, Sequence

from reply_parser.config.constants import MAX_QUOTE_HEADER_LINES

logger = logging.getLogger(__name__)


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n")


def _line_starts(text: str, start: int, end: int) -> List[int]:
    """Offsets of every line start strictly inside (start, end)."""
    starts = []
    pos = text.find("\n", start, end)
    while pos != -1 and pos + 1 < end:
        starts.append(pos + 1)
        pos = text.find("\n", pos + 1, end)
    return starts


def _window_end(text: str, pos: int, max_lines: int) -> int:
    """End offset of the *max_lines*-line window starting at *pos*."""
    end = pos
    for _ in range(max_lines):
        newline = text.find("\n", end)
        if newline == -1:
            return len(text)
        end = newline + 1
    return end - 1


def _wrapped_header_at(
    text: str,
    pattern: Pattern[str],
    pos: int,
    max_lines: int,
) -> Optional[Match[str]]:
    """
    Wrapped header starting at line offset *pos*, if any.

    Matching is confined to the next *max_lines* lines, so each attempt costs
    at most a few lines of text. A match is rejected when the same pattern
    also matches from a later line inside the span (the later, tighter match
    is the real header).
    """
    match = pattern.match(text, pos, _window_end(text, pos, max_lines))
    if match is None or "\n" not in match.group(0):
        return None
    for inner in _line_starts(text, match.start(), match.end()):
        if pattern.match(text, inner, match.end()) is not None:
            return None
    return match


def join_wrapped_headers(
    text: str,
    pattern: Pattern[str],
    max_lines: int = MAX_QUOTE_HEADER_LINES,
) -> str:
    """Replace line breaks inside every wrapped match of *pattern* with spaces."""
    pieces: List[str] = []
    cursor = 0
    pos = 0
    while True:
        match = _wrapped_header_at(text, pattern, pos, max_lines)
        if match is not None:
            pieces.append(text[cursor:match.start()])
            pieces.append(match.group(0).replace("\n", " "))
            cursor = match.end()
            next_break = text.find("\n", cursor)
        else:
            next_break = text.find("\n", pos)
        if next_break == -1:
            break
        pos = next_break + 1

    if not pieces:
        return text
    pieces.append(text[cursor:])
    return "".join(pieces)


def normalize_quote_headers(
    text: str,
    patterns: Sequence[Pattern[str]],
    max_lines: int = MAX_QUOTE_HEADER_LINES,
) -> str:
    """Collapse every wrapped quote header, pattern by pattern, in list order."""
    for pattern in patterns:
        joined = join_wrapped_headers(text, pattern, max_lines)
        if joined != text:
            logger.debug("Joined wrapped quote header for pattern '%s'", pattern.pattern)
        text = joined
    return text
