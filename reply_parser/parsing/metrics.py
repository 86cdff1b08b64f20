"""
Prometheus Metrics — parser observability.

Exposes counters and a histogram for:
- Parse latency
- Fragments produced, by kind (visible / quoted / signature / empty)
- Rejected quote-header patterns

Recording is skipped when METRICS_ENABLED is false in the environment.

Usage
-----
    from reply_parser.parsing.metrics import record_fragments, timed_parse

    with timed_parse():
        email = parser.parse(text)

    record_fragments(email)
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Iterable

from prometheus_client import Counter, Histogram

from reply_parser.config.settings import METRICS_ENABLED
from reply_parser.models.fragment import Fragment

# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Time spent in EmailParser.parse (seconds).
PARSE_LATENCY: Histogram = Histogram(
    "reply_parser_parse_seconds",
    "Time spent splitting one email body into fragments",
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)

# Fragments emitted, labelled by kind.
FRAGMENTS: Counter = Counter(
    "reply_parser_fragments_total",
    "Fragments emitted by kind (visible / quoted / signature / empty)",
    ["kind"],
)

# Quote-header patterns rejected at configuration time.
PATTERN_ERRORS: Counter = Counter(
    "reply_parser_pattern_errors_total",
    "Quote-header patterns rejected because they do not compile",
)

# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_fragments(fragments: Iterable[Fragment]) -> None:
    """Increment the fragment counter once per fragment, by its kind."""
    if not METRICS_ENABLED:
        return
    for fragment in fragments:
        FRAGMENTS.labels(kind=fragment.kind).inc()

def record_pattern_error() -> None:
    """Increment the rejected-pattern counter."""
    if METRICS_ENABLED:
        PATTERN_ERRORS.inc()

@contextmanager
def timed_parse() -> Generator[None, None, None]:
    """
    Context manager that records parse latency.

    Usage::

        with timed_parse():
            email = parser.parse(text)
    """
    if not METRICS_ENABLED:
        yield
        return
    with PARSE_LATENCY.time():
        yield
