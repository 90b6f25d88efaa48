# -*- coding: utf-8 -*-
"""
Tests for the Quote Submission Gateway.

Tests cover:
- Success envelope parsing
- Remote rejection, timeout and network failures as typed outcomes
"""

import pytest
import requests

from models.quote import QuoteDraft
from services.http_transport import BoundedHttpCall
from services.quote_gateway import ErrorKind, QuoteSubmissionGateway
from tests.conftest import Stopwatch, http_reply, make_response

CREATED = {
    "status": 201,
    "message": "Quote request submitted",
    "data": {"quoteId": "Q-123", "estimatedResponse": "24-48 hours"},
}


@pytest.fixture
def draft(sofa_item):
    return QuoteDraft.seeded([sofa_item])


class TestSuccess:
    """Test accepted submissions."""

    def test_quote_id_returned(self, gateway, session, draft):
        session.request.return_value = make_response(201, CREATED)

        outcome = gateway.submit(draft)

        assert outcome.success is True
        assert outcome.quote_id == "Q-123"
        assert outcome.estimated_response == "24-48 hours"

    def test_posts_request_body(self, gateway, session, draft):
        session.request.return_value = make_response(201, CREATED)

        gateway.submit(draft)

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"].endswith("/quotes/request")
        assert kwargs["json"] == draft.to_request()
        assert session.request.call_count == 1

    def test_numeric_quote_id_as_string(self, gateway, session, draft):
        session.request.return_value = make_response(
            201, {"status": 201, "data": {"quoteId": 42}})
        assert gateway.submit(draft).quote_id == "42"


class TestFailures:
    """Test failures are returned, never raised."""

    def test_non_created_envelope_status(self, gateway, session, draft):
        session.request.return_value = make_response(
            200, {"status": 400, "message": "Invalid quote"})

        outcome = gateway.submit(draft)

        assert outcome.success is False
        assert outcome.error_kind == ErrorKind.REMOTE
        assert outcome.status_code == 400
        assert outcome.message == "Your quote request could not be submitted. Please try again."

    def test_server_error_keeps_status_code(self, gateway, session, draft):
        session.request.return_value = make_response(500, {"message": "boom"})

        outcome = gateway.submit(draft)

        assert outcome.error_kind == ErrorKind.REMOTE
        assert outcome.status_code == 500

    def test_missing_quote_id(self, gateway, session, draft):
        session.request.return_value = make_response(201, {"status": 201, "data": {}})
        outcome = gateway.submit(draft)
        assert outcome.success is False
        assert outcome.error_kind == ErrorKind.REMOTE

    def test_timeout_is_classified(self, gateway, session, draft):
        session.request.side_effect = requests.exceptions.Timeout()

        outcome = gateway.submit(draft)

        assert outcome.is_timeout is True
        assert outcome.message == "Connection timeout. Please try again."

    def test_network_failure(self, gateway, session, draft):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        outcome = gateway.submit(draft)

        assert outcome.error_kind == ErrorKind.NETWORK
        assert outcome.is_timeout is False

    def test_from_config_uses_submit_timeout(self):
        from app.api_config import ApiConfig
        gateway = QuoteSubmissionGateway.from_config(
            ApiConfig(base_url="http://x/api", timeout=5, submit_timeout=20))
        assert gateway.http_call.timeout == 20
        assert gateway.http_call.base_url == "http://x/api"

    def test_slow_reply_is_timeout_not_success(self, slow_server, draft):
        """Test a 201 that arrives after the budget is reported as a timeout."""
        url = slow_server(
            http_reply("201 Created", {"status": 201, "data": {"quoteId": "Q-1"}}),
            byte_delay=0.05,
        )
        gateway = QuoteSubmissionGateway(BoundedHttpCall(url, timeout=0.5))

        with Stopwatch() as watch:
            outcome = gateway.submit(draft)

        assert outcome.success is False
        assert outcome.is_timeout is True
        assert outcome.quote_id is None
        assert watch.elapsed < 2.0
