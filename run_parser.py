"""
Run the reply parser on one email body.

Reads:
  - a plain-text email body (file argument or stdin), or
  - with --json, a ParseRequest document {"message_id", "text", "quote_headers"}

Produces:
  - the parse output document (PARSE_OUTPUT_SCHEMA) on stdout or --output
"""
import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from reply_parser.config.settings import LOG_LEVEL, MAX_INPUT_CHARS, QUOTE_HEADERS_FILE
from reply_parser.models.parse_io import ParseRequest
from reply_parser.parsing.email_parser import EmailParser
from reply_parser.parsing.errors import PatternSyntaxError
from reply_parser.parsing.output_builder import build_parse_output
from reply_parser.parsing.patterns import load_quote_headers

logger = logging.getLogger("run_parser")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Split an email reply into fragments.")
    parser.add_argument("input", nargs="?", help="Input file (default: stdin)")
    parser.add_argument("--json", action="store_true", help="Input is a ParseRequest JSON document")
    parser.add_argument("--output", "-o", help="Write the output JSON here (default: stdout)")
    parser.add_argument("--visible-only", action="store_true", help="Print only the visible reply text")
    parser.add_argument(
        "--quote-headers-file",
        default=QUOTE_HEADERS_FILE,
        help="File with one quote-header regex per line, replacing the defaults",
    )
    return parser


def read_input(path: Optional[str]) -> str:
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def cap_input(text: str, limit: int = MAX_INPUT_CHARS) -> str:
    """Truncate oversized bodies before parsing. A limit <= 0 disables the cap."""
    if limit > 0 and len(text) > limit:
        logger.warning("Input is %d chars, truncating to %d", len(text), limit)
        return text[:limit]
    return text


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # -----------------------------------------------------------------------
    # Load input
    # -----------------------------------------------------------------------
    try:
        raw = read_input(args.input)
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return 1

    try:
        if args.json:
            request = ParseRequest.model_validate_json(raw)
        else:
            request = ParseRequest(text=raw)
    except ValidationError as e:
        logger.error("Invalid parse request: %s", e)
        return 2

    # -----------------------------------------------------------------------
    # Configure parser
    # -----------------------------------------------------------------------
    try:
        if request.quote_headers is not None:
            parser = EmailParser(request.quote_headers)
        elif args.quote_headers_file:
            parser = EmailParser(load_quote_headers(args.quote_headers_file))
        else:
            parser = EmailParser()
    except OSError as e:
        logger.error("Cannot read quote-header file: %s", e)
        return 1
    except PatternSyntaxError as e:
        logger.error("%s", e)
        return 2

    # -----------------------------------------------------------------------
    # Parse
    # -----------------------------------------------------------------------
    start_time = time.monotonic()
    email = parser.parse(cap_input(request.text))
    elapsed_ms = int((time.monotonic() - start_time) * 1000)

    logger.info("message_id : %s", request.message_id or "-")
    logger.info("fragments  : %d (%d visible)", len(email), len(email.visible_fragments))

    if args.visible_only:
        rendered = email.visible_text + "\n"
    else:
        output = build_parse_output(
            email,
            message_id=request.message_id,
            duration_ms=elapsed_ms,
            quote_header_patterns=len(parser.quote_headers),
        )
        rendered = json.dumps(output, ensure_ascii=False, indent=2) + "\n"

    # -----------------------------------------------------------------------
    # Write output
    # -----------------------------------------------------------------------
    if args.output:
        Path(args.output).write_text(rendered, encoding="utf-8")
        logger.info("Output saved to: %s", args.output)
    else:
        sys.stdout.write(rendered)
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )
    sys.exit(main())
