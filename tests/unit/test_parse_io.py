"""
Unit tests for the ParseRequest I/O contract.
"""
import pytest
from pydantic import ValidationError

from reply_parser.models.parse_io import ParseRequest


class TestParseRequest:
    def test_from_json(self, mock_request_json):
        request = ParseRequest.model_validate_json(mock_request_json)
        assert request.message_id == "test-msg-001@example.com"
        assert request.text.startswith("Hi,")
        assert request.quote_headers is None

    def test_defaults(self):
        request = ParseRequest(text="hello")
        assert request.message_id == ""
        assert request.quote_headers is None

    def test_text_required(self):
        with pytest.raises(ValidationError):
            ParseRequest(message_id="x")

    def test_valid_quote_headers(self):
        request = ParseRequest(text="x", quote_headers=[r"^Il .+ ha scritto:$"])
        assert request.quote_headers == [r"^Il .+ ha scritto:$"]

    def test_invalid_quote_header_rejected(self):
        with pytest.raises(ValidationError, match="Invalid quote-header pattern"):
            ParseRequest(text="x", quote_headers=[r"[invalid("])
