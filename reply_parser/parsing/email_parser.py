"""
EmailParser — main entry point for splitting a reply into fragments.

Flow:
    1. CRLF → LF
    2. Collapse wrapped quote headers onto one line
    3. Bottom-up fragment building
    4. Assembly into an Email (document order)

Parsing is total: any string yields a well-formed Email. The only failure
mode is a bad quote-header pattern, which is rejected when the parser is
configured.
"""
import logging
from typing import Callable, Iterable, Optional, Tuple

from reply_parser.config.constants import DEFAULT_QUOTE_HEADER_PATTERNS
from reply_parser.models.email import Email
from reply_parser.parsing.builder import build_fragments
from reply_parser.parsing.classifier import LineClassifier
from reply_parser.parsing.metrics import record_fragments, timed_parse
from reply_parser.parsing.normalizer import normalize_line_endings, normalize_quote_headers
from reply_parser.parsing.patterns import PatternLike, compile_quote_headers

logger = logging.getLogger(__name__)

# (markup, truncate_at) -> plain text
PlainTextConverter = Callable[[str, Optional[str]], str]


class EmailParser:
    """
    Splits plain-text email bodies into quoted, signature and visible fragments.

    Each instance owns an immutable tuple of compiled quote-header patterns.
    Replacing it swaps the whole tuple, so parses already running keep the
    patterns they started with.
    """

    def __init__(self, quote_headers: Optional[Iterable[PatternLike]] = None):
        self._classifier = LineClassifier(())
        self.set_quote_headers(
            DEFAULT_QUOTE_HEADER_PATTERNS if quote_headers is None else quote_headers
        )

    @property
    def quote_headers(self) -> Tuple[str, ...]:
        """Pattern strings currently used to recognise quote headers."""
        return tuple(p.pattern for p in self._classifier.quote_headers)

    def set_quote_headers(self, patterns: Iterable[PatternLike]) -> "EmailParser":
        """
        Replace the quote-header patterns.

        Raises:
            PatternSyntaxError: If a pattern does not compile. The previous
                patterns stay in place.
        """
        self._classifier = LineClassifier(compile_quote_headers(patterns))
        return self

    def parse(self, text: str) -> Email:
        """Split *text* into an Email of fragments in document order."""
        classifier = self._classifier

        with timed_parse():
            text = normalize_line_endings(text)
            text = normalize_quote_headers(text, classifier.quote_headers)
            email = Email.from_working(build_fragments(text, classifier))

        record_fragments(email)
        logger.debug(
            "Parsed %d chars into %d fragments (%d visible)",
            len(text),
            len(email),
            len(email.visible_fragments),
        )
        return email

    def parse_markup(
        self,
        markup: str,
        to_plain_text: PlainTextConverter,
        truncate_at: Optional[str] = None,
    ) -> Email:
        """
        Parse a markup body through a caller-supplied plain-text converter.

        The converter's output is handed to parse() verbatim.
        """
        return self.parse(to_plain_text(markup, truncate_at))


def read(text: str, quote_headers: Optional[Iterable[PatternLike]] = None) -> Email:
    """Parse *text* with a fresh parser."""
    return EmailParser(quote_headers).parse(text)


def parse_reply(text: str, quote_headers: Optional[Iterable[PatternLike]] = None) -> str:
    """Return only the visible reply text of *text*."""
    return read(text, quote_headers).visible_text
