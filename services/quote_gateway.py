# -*- coding: utf-8 -*-
"""
Quote Submission Gateway.

Turns a validated QuoteDraft into one POST to the quote endpoint and
returns a typed outcome. It never raises for transport or remote
failures and never touches wizard state.

Success envelope (HTTP 2xx, "status" must be 201):
    {
        "status": 201,
        "message": "Quote request submitted",
        "data": {"quoteId": "Q-123", "estimatedResponse": "24-48 hours"}
    }
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.api_config import ApiConfig
from app.config import Config
from models.quote import QuoteDraft
from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException, RequestTimeoutException
from services.http_transport import BoundedHttpCall
from utils.logger import get_logger

logger = get_logger(__name__)

CREATED_STATUS = 201


class ErrorKind(Enum):
    TIMEOUT = "timeout"
    NETWORK = "network"
    REMOTE = "remote"
    UNKNOWN = "unknown"


@dataclass
class SubmissionOutcome:
    """Exactly one of: success with a quote id, or failure with a cause."""
    success: bool
    quote_id: Optional[str] = None
    estimated_response: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None
    message: str = ""

    @classmethod
    def ok(cls, quote_id: str, estimated_response: Optional[str] = None) -> 'SubmissionOutcome':
        return cls(success=True, quote_id=quote_id, estimated_response=estimated_response)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str, status_code: Optional[int] = None) -> 'SubmissionOutcome':
        return cls(success=False, error_kind=kind, message=message, status_code=status_code)

    @property
    def is_timeout(self) -> bool:
        return self.error_kind == ErrorKind.TIMEOUT


class QuoteSubmissionGateway:
    """Submits quote requests to the storefront API."""

    def __init__(self, http_call: BoundedHttpCall,
                 endpoint: str = Config.QUOTE_SUBMIT_ENDPOINT):
        """
        Args:
            http_call: Bounded request capability; its timeout is the
                submission time budget.
            endpoint: Quote submission path relative to the API base URL.
        """
        self.http_call = http_call
        self.endpoint = endpoint

    @classmethod
    def from_config(cls, config: Optional[ApiConfig] = None) -> 'QuoteSubmissionGateway':
        config = config or ApiConfig()
        return cls(BoundedHttpCall(config.base_url, timeout=config.submit_timeout))

    def submit(self, draft: QuoteDraft) -> SubmissionOutcome:
        """
        Send the draft once.

        Args:
            draft: A draft that already passed validation of steps 1-3

        Returns:
            SubmissionOutcome (never raises for transport/remote errors)
        """
        body = draft.to_request()
        logger.info(f"Submitting quote request with {len(body['items'])} item(s)")

        try:
            envelope = self.http_call.request("POST", self.endpoint, json_data=body)
            quote_id, estimated = self._parse_envelope(envelope)
        except RequestTimeoutException as e:
            logger.warning(f"Quote submission timed out after {e.timeout}s")
            return SubmissionOutcome.fail(ErrorKind.TIMEOUT, map_exception(e, "quote.submit"))
        except NetworkException as e:
            return SubmissionOutcome.fail(ErrorKind.NETWORK, map_exception(e, "quote.submit"))
        except ApiException as e:
            return SubmissionOutcome.fail(
                ErrorKind.REMOTE, map_exception(e, "quote.submit"), status_code=e.status_code
            )

        logger.info(f"Quote request accepted: {quote_id}")
        return SubmissionOutcome.ok(quote_id, estimated)

    @staticmethod
    def _parse_envelope(envelope) -> tuple:
        """Extract (quoteId, estimatedResponse) or raise ApiException."""
        if not isinstance(envelope, dict):
            raise ApiException("Unexpected response body", context="quote.submit")

        status = envelope.get("status")
        if status != CREATED_STATUS:
            raise ApiException(
                f"API error: {envelope.get('message', 'unexpected status')}",
                status_code=status if isinstance(status, int) else None,
                response_data=envelope,
                context="quote.submit",
            )

        data = envelope.get("data") or {}
        quote_id = data.get("quoteId") if isinstance(data, dict) else None
        if not quote_id:
            raise ApiException("Response carries no quote id", response_data=envelope,
                               context="quote.submit")
        return str(quote_id), data.get("estimatedResponse")
