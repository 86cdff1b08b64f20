"""
Typed Pydantic models for the parser's JSON input contract.

A ParseRequest is what run_parser.py --json accepts: one message body plus an
optional per-request quote-header list.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from reply_parser.parsing.errors import PatternSyntaxError
from reply_parser.parsing.patterns import compile_quote_headers


class ParseRequest(BaseModel):
    """A single email body to split into fragments."""

    message_id: str = Field("", description="Caller-side identifier echoed in the output.")
    text: str = Field(..., description="Plain-text body, already converted from markup if needed.")
    quote_headers: Optional[List[str]] = Field(
        None,
        description="Replacement quote-header regexes. None keeps the parser defaults.",
    )

    @field_validator("quote_headers")
    @classmethod
    def validate_quote_headers(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is not None:
            try:
                compile_quote_headers(v)
            except PatternSyntaxError as e:
                raise ValueError(str(e)) from e
        return v
