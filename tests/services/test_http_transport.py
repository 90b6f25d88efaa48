# -*- coding: utf-8 -*-
"""
Tests for the bounded HTTP call.

Tests cover:
- Request construction (URL, timeout, JSON body)
- Error mapping to ApiException / NetworkException / RequestTimeoutException
"""

import pytest
import requests

from services.exceptions import ApiException, NetworkException, RequestTimeoutException
from services.http_transport import BoundedHttpCall
from tests.conftest import BASE_URL, Stopwatch, http_reply, make_response


class TestRequest:
    """Test successful requests."""

    def test_sends_json_with_timeout(self, http_call, session):
        session.request.return_value = make_response(200, {"status": 200, "data": []})

        result = http_call.request("POST", "/quotes/request", json_data={"a": 1})

        assert result == {"status": 200, "data": []}
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == f"{BASE_URL}/quotes/request"
        assert kwargs["json"] == {"a": 1}
        assert kwargs["timeout"] == 15
        assert kwargs["stream"] is True

    def test_timeout_override(self, http_call, session):
        http_call.request("GET", "/categories/list", timeout=3)
        assert session.request.call_args.kwargs["timeout"] == 3

    def test_empty_body_returns_none(self, http_call, session):
        session.request.return_value = make_response(204)
        assert http_call.request("DELETE", "/quotes/1") is None

    def test_trailing_slash_trimmed(self, session):
        call = BoundedHttpCall(BASE_URL + "/", timeout=5, session=session)
        call.request("GET", "/quotes")
        assert session.request.call_args.kwargs["url"] == f"{BASE_URL}/quotes"

    def test_non_positive_timeout_rejected(self, session):
        with pytest.raises(ValueError):
            BoundedHttpCall(BASE_URL, timeout=0, session=session)


class TestErrorMapping:
    """Test transport and status failures."""

    def test_http_error_carries_status_and_message(self, http_call, session):
        session.request.return_value = make_response(500, {"message": "Database down"})

        with pytest.raises(ApiException) as exc_info:
            http_call.request("POST", "/quotes/request", json_data={})

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Database down"

    def test_http_error_without_body(self, http_call, session):
        session.request.return_value = make_response(502, "<html>Bad gateway</html>")

        with pytest.raises(ApiException) as exc_info:
            http_call.request("GET", "/quotes")

        assert exc_info.value.message == "HTTP error! status: 502"

    def test_timeout(self, http_call, session):
        session.request.side_effect = requests.exceptions.ReadTimeout("read timed out")

        with pytest.raises(RequestTimeoutException) as exc_info:
            http_call.request("POST", "/quotes/request", json_data={})

        assert exc_info.value.timeout == 15

    def test_connection_error(self, http_call, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(NetworkException) as exc_info:
            http_call.request("GET", "/quotes")

        assert not isinstance(exc_info.value, RequestTimeoutException)

    def test_invalid_json(self, http_call, session):
        session.request.return_value = make_response(200, "not json")

        with pytest.raises(ApiException, match="Invalid JSON"):
            http_call.request("GET", "/quotes")


class TestTimeBudget:
    """Test the budget caps the whole exchange against a real server."""

    def test_fast_server_within_budget(self, slow_server):
        url = slow_server(http_reply("201 Created", {"status": 201, "data": {"quoteId": "Q-1"}}))
        call = BoundedHttpCall(url, timeout=5)

        result = call.request("POST", "/quotes/request", json_data={"a": 1})

        assert result["data"]["quoteId"] == "Q-1"

    def test_trickled_reply_times_out(self, slow_server):
        """Test a reply arriving byte by byte cannot outlast the budget."""
        url = slow_server(
            http_reply("201 Created", {"status": 201, "data": {"quoteId": "Q-1"}}),
            byte_delay=0.05,
        )
        call = BoundedHttpCall(url, timeout=0.5)

        with Stopwatch() as watch:
            with pytest.raises(RequestTimeoutException) as exc_info:
                call.request("POST", "/quotes/request", json_data={})

        assert exc_info.value.timeout == 0.5
        assert watch.elapsed < 2.0

    def test_silent_server_times_out(self, slow_server):
        url = slow_server(http_reply("200 OK", {"status": 200}), stall=5)
        call = BoundedHttpCall(url, timeout=0.5)

        with Stopwatch() as watch:
            with pytest.raises(RequestTimeoutException):
                call.request("GET", "/quotes")

        assert watch.elapsed < 2.0
