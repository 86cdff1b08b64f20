"""
Constants used across the parser.
Versioned and pinned for determinism.
"""
from typing import Tuple

PARSER_VERSION: str = "reply-parser-1.0.0"

# =============================================================================
# Quote headers ("On DATE, NAME wrote:" and locale variants)
# =============================================================================
# Compiled with re.MULTILINE. Patterns prefixed with (?s) may span wrapped
# lines; the normalizer joins such spans into a single line before parsing.
DEFAULT_QUOTE_HEADER_PATTERNS: Tuple[str, ...] = (
    r"(?s)^On\s.+?wrote:$",                          # On DATE, NAME <EMAIL> wrote:
    r"(?s)^Le\s.+?écrit :$",                         # Le DATE, NAME <EMAIL> a écrit :
    r"(?s)^El\s.+?escribió:$",                       # El DATE, NAME <EMAIL> escribió:
    r"(?s)^W dniu\s.+?(?:pisze|napisał):$",          # W dniu DATE, NAME <EMAIL> pisze|napisał:
    r"^Den\s.+\sskrev\s.+:$",                        # Den DATE skrev NAME <EMAIL>:
    r"^Am\s.+\sum\s.+\sschrieb\s.+:$",               # Am DATE um TIME schrieb NAME:
    r"^.+\s<.+>\sschrieb:$",                         # NAME <EMAIL> schrieb:
    (                                                # 20YY-MM-DD HH:II GMT+01:00 NAME <EMAIL>:
        r"(?s)^20[0-9]{2}-(?:0?[1-9]|1[012])-(?:0?[0-9]|[1-2][0-9]|3[01]|[1-9])"
        r"\s[0-2]?[0-9]:\d{2}\s.+?:$"
    ),
)

# A wrapped quote header is joined only if it spans at most this many lines.
MAX_QUOTE_HEADER_LINES: int = 3

# =============================================================================
# Line classification rule tables (natural reading order)
# =============================================================================
QUOTE_MARKER_RULES: Tuple[Tuple[str, str], ...] = (
    ("angle_prefix", r"^>"),
)

SIGNATURE_MARKER_RULES: Tuple[Tuple[str, str], ...] = (
    ("dash_separator", r"^--\s*$"),
    ("underscore_separator", r"^__\s*$"),
    ("trailing_hyphen", r"\w-$"),
    ("mobile_client", r"^Sent from my(?:\s+\w+){1,3}\s*$"),
)

# =============================================================================
# Fragment kinds (metrics labels and serialized output)
# =============================================================================
FRAGMENT_KINDS: Tuple[str, ...] = ("visible", "quoted", "signature", "empty")
