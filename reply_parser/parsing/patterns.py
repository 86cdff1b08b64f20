"""
Quote-header pattern set — compile, validate and load locale patterns.

Patterns are compiled eagerly so a bad pattern fails at configuration time,
never in the middle of a parse.
"""
import logging
import re
from pathlib import Path
from typing import Iterable, Pattern, Tuple, Union

from reply_parser.parsing.errors import PatternSyntaxError
from reply_parser.parsing.metrics import record_pattern_error

logger = logging.getLogger(__name__)

PatternLike = Union[str, Pattern[str]]


def compile_quote_headers(patterns: Iterable[PatternLike]) -> Tuple[Pattern[str], ...]:
    """
    Compile an ordered list of quote-header patterns.

    Strings are compiled with re.MULTILINE; inline flags such as (?s) are
    honoured. Already compiled patterns are kept as they are.

    Raises:
        PatternSyntaxError: If any pattern does not compile.
    """
    compiled = []
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
            continue
        try:
            compiled.append(re.compile(pattern, re.MULTILINE))
        except re.error as e:
            logger.error("Rejected quote-header pattern '%s': %s", pattern, e)
            record_pattern_error()
            raise PatternSyntaxError(pattern, e) from e
    return tuple(compiled)


def load_quote_headers(path: Union[str, Path]) -> Tuple[str, ...]:
    """
    Read quote-header patterns from a UTF-8 file, one per line.

    Blank lines and lines starting with '#' are skipped. The patterns are
    returned as strings; pass them to compile_quote_headers() or an
    EmailParser to validate them.
    """
    patterns = []
    with open(path, encoding="utf-8") as f:
        for raw in f:
            line = raw.rstrip("\r\n")
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            patterns.append(line)
    logger.info("Loaded %d quote-header patterns from %s", len(patterns), path)
    return tuple(patterns)
