"""
Output Builder — serialises a parsed Email into the output document.

The document is validated against PARSE_OUTPUT_SCHEMA before it is returned.
"""
import logging

from jsonschema import validate

from reply_parser.config.constants import PARSER_VERSION
from reply_parser.config.schemas import PARSE_OUTPUT_SCHEMA
from reply_parser.models.email import Email

logger = logging.getLogger(__name__)


def build_parse_output(
    email: Email,
    message_id: str = "",
    duration_ms: int = 0,
    quote_header_patterns: int = 0,
) -> dict:
    """
    Build the output document for one parsed message.

    Args:
        email: Parsed Email.
        message_id: Caller-side identifier.
        duration_ms: Wall-clock parse time in milliseconds.
        quote_header_patterns: Number of quote-header patterns in effect.

    Returns:
        Dict conforming to PARSE_OUTPUT_SCHEMA.

    Raises:
        jsonschema.ValidationError: If the document breaks the schema.
    """
    body = email.to_dict()
    output = {
        "message_id": message_id,
        "parser_version": PARSER_VERSION,
        "fragments": body["fragments"],
        "visible_text": body["visible_text"],
        "processing_metadata": {
            "parse_duration_ms": duration_ms,
            "fragments_total": len(email),
            "fragments_hidden": sum(1 for f in email if f.is_hidden),
            "quote_header_patterns": quote_header_patterns,
        },
    }

    validate(instance=output, schema=PARSE_OUTPUT_SCHEMA)
    logger.debug("Output for '%s' validated (%d fragments)", message_id, len(email))
    return output
