"""
JSON Schema for the parser output document.

PARSE_OUTPUT_SCHEMA — what build_parse_output() must produce, one document
per parsed message.
"""
from reply_parser.config.constants import FRAGMENT_KINDS

PARSE_OUTPUT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": [
        "message_id",
        "parser_version",
        "fragments",
        "visible_text",
        "processing_metadata",
    ],
    "properties": {
        "message_id": {"type": "string"},
        "parser_version": {"type": "string", "minLength": 1},
        "fragments": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "additionalProperties": False,
                "required": ["kind", "content", "is_quoted", "is_signature", "is_hidden"],
                "properties": {
                    "kind": {"type": "string", "enum": list(FRAGMENT_KINDS)},
                    "content": {"type": "string"},
                    "is_quoted": {"type": "boolean"},
                    "is_signature": {"type": "boolean"},
                    "is_hidden": {"type": "boolean"},
                },
            },
        },
        "visible_text": {"type": "string"},
        "processing_metadata": {
            "type": "object",
            "additionalProperties": False,
            "required": [
                "parse_duration_ms",
                "fragments_total",
                "fragments_hidden",
                "quote_header_patterns",
            ],
            "properties": {
                "parse_duration_ms": {"type": "integer", "minimum": 0},
                "fragments_total": {"type": "integer", "minimum": 1},
                "fragments_hidden": {"type": "integer", "minimum": 0},
                "quote_header_patterns": {"type": "integer", "minimum": 0},
            },
        },
    },
}
