"""
Shared test fixtures for the reply parser test suite.
"""
import json

import pytest

from reply_parser.parsing.email_parser import EmailParser


# ==========================================================================
# Parser
# ==========================================================================

@pytest.fixture
def parser():
    return EmailParser()


# ==========================================================================
# Email bodies
# ==========================================================================

@pytest.fixture
def reply_with_quote():
    return "Hi,\nThanks!\n\nOn Jan 1, 2020, Bob wrote:\n> old message"


@pytest.fixture
def reply_with_signature():
    return "Reply text\n--\nJohn Doe"


@pytest.fixture
def reply_with_wrapped_header():
    return (
        "Sounds good, see you then.\n"
        "\n"
        "On Tue, Mar 3, 2020 at 10:12 AM, Jane Doe <jane@example.com>\n"
        "wrote:\n"
        "> Are we still on for Thursday?\n"
        "> Jane\n"
    )


@pytest.fixture
def full_thread():
    """Reply + signature + quoted message with its own signature."""
    return (
        "Hello Jane,\n"
        "\n"
        "The invoice is attached.\n"
        "\n"
        "-- \n"
        "Bob Smith\n"
        "ACME Corp\n"
        "\n"
        "On Mon, Feb 10, 2020 at 9:00 AM, Jane <jane@example.com> wrote:\n"
        "> Could you send the invoice?\n"
        ">\n"
        "> --\n"
        "> Jane\n"
    )


@pytest.fixture
def french_reply():
    return (
        "Merci beaucoup !\n"
        "\n"
        "Le 5 mars 2020 à 10:00, Marie <marie@example.fr> a écrit :\n"
        "> Bonjour\n"
    )


# ==========================================================================
# Parse requests
# ==========================================================================

@pytest.fixture
def mock_request(reply_with_quote):
    return {
        "message_id": "test-msg-001@example.com",
        "text": reply_with_quote,
    }


@pytest.fixture
def mock_request_json(mock_request):
    return json.dumps(mock_request, ensure_ascii=False)
