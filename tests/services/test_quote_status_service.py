# -*- coding: utf-8 -*-
"""
Tests for the quote status service.
"""

import pytest
import requests

from services.exceptions import ValidationException
from services.quote_status_service import QuoteRecord, QuoteStatusService
from tests.conftest import make_response


@pytest.fixture
def service(http_call):
    return QuoteStatusService(http_call)


class TestGetStatus:
    """Test status lookup."""

    def test_status_found(self, service, session):
        session.request.return_value = make_response(200, {
            "_id": "Q-123", "status": "reviewed", "updatedAt": "2026-01-05T10:00:00Z",
        })

        result = service.get_quote_status("Q-123")

        assert result.success is True
        assert result.data.status == "reviewed"
        assert result.data.last_updated == "2026-01-05T10:00:00Z"
        assert session.request.call_args.kwargs["url"].endswith("/quotes/Q-123/status")

    def test_not_found_keeps_status_code(self, service, session):
        session.request.return_value = make_response(404, {"message": "Quote not found"})

        result = service.get_quote_status("Q-missing")

        assert result.success is False
        assert result.status == 404
        assert result.error == "Quote not found"

    def test_network_failure_is_500(self, service, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        result = service.get_quote_status("Q-123")

        assert result.status == 500
        assert result.message == "Internal server error"


class TestListQuotes:
    """Test quote listing."""

    def test_document_wrappers_unwrapped(self, service, session):
        session.request.return_value = make_response(200, [{
            "_id": "Q-1",
            "message": "ok",
            "_doc": {
                "status": "pending",
                "customerInfo": {"name": "Asha", "email": "a@b.c", "phone": "+91 9876543210",
                                 "address": {"city": "Pune"}},
                "items": [{"productId": "prod-1", "productName": "Sofa", "quantity": 1}],
                "projectDetails": {"description": "Flat", "budget": "100k+"},
            },
        }])

        result = service.list_quotes()

        assert result.success is True
        record = result.data[0]
        assert record.quote_id == "Q-1"
        assert record.status == "pending"
        assert record.draft.contact.name == "Asha"
        assert record.draft.address.city == "Pune"
        assert record.draft.project_details.budget.value == "100k+"

    def test_single_object_listing(self, service, session):
        session.request.return_value = make_response(200, {"_id": "Q-2", "status": "accepted"})
        assert [r.quote_id for r in service.list_quotes().data] == ["Q-2"]

    def test_plain_record(self):
        record = QuoteRecord.from_api({"_id": "Q-3", "status": "completed"})
        assert record.quote_id == "Q-3"
        assert record.draft.items == []


class TestUpdateStatus:
    """Test status updates."""

    def test_update_sends_put(self, service, session):
        session.request.return_value = make_response(200, {"_id": "Q-1", "status": "accepted"})

        result = service.update_quote_status("Q-1", "accepted")

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["json"] == {"status": "accepted"}
        assert result.data.status == "accepted"

    def test_unknown_status_rejected_before_request(self, service, session):
        with pytest.raises(ValidationException):
            service.update_quote_status("Q-1", "archived")
        session.request.assert_not_called()
