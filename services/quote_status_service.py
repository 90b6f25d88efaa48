# -*- coding: utf-8 -*-
"""
Quote status service - lookup, listing and status updates of submitted quotes.

Every call returns an ApiResult rather than raising, so callers can show
the message directly.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from app.api_config import ApiConfig
from app.config import Vocabularies
from models.quote import QuoteDraft
from services.exceptions import ApiException, NetworkException, ValidationException
from services.http_transport import BoundedHttpCall
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

QUOTE_STATUSES = Vocabularies.codes(Vocabularies.QUOTE_STATUS)


@dataclass
class ApiResult(Generic[T]):
    """Status code, message and either data or an error description."""
    status: int
    message: str
    data: Optional[T] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None and 200 <= self.status < 300


@dataclass
class QuoteStatus:
    quote_id: str
    status: str
    estimated_response: Optional[str] = None
    message: Optional[str] = None
    last_updated: str = field(default_factory=lambda: datetime.now().isoformat())

    @classmethod
    def from_api(cls, data: Dict[str, Any], quote_id: str) -> "QuoteStatus":
        return cls(
            quote_id=str(data.get("_id") or quote_id),
            status=data.get("status", ""),
            estimated_response=data.get("estimatedResponse"),
            message=data.get("message"),
            last_updated=data.get("updatedAt") or datetime.now().isoformat(),
        )


@dataclass
class QuoteRecord:
    """A stored quote as returned by the listing endpoint."""
    quote_id: str
    draft: QuoteDraft
    status: str = ""
    message: Optional[str] = None
    source: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_api(cls, response: Dict[str, Any]) -> "QuoteRecord":
        """
        Accepts either a plain record or a MongoDB document wrapper
        ({"_doc": {...}, "_id": ..., "message": ..., "source": ...}).
        """
        doc = response.get("_doc") or response
        return cls(
            quote_id=str(response.get("_id") or doc.get("_id") or doc.get("quoteId", "")),
            draft=QuoteDraft.from_request(doc),
            status=doc.get("status", ""),
            message=response.get("message"),
            source=response.get("source"),
            created_at=doc.get("createdAt"),
            updated_at=doc.get("updatedAt"),
        )


class QuoteStatusService:
    """Read and update the status of submitted quotes."""

    def __init__(self, http_call: BoundedHttpCall):
        self.http_call = http_call

    @classmethod
    def from_config(cls, config: Optional[ApiConfig] = None) -> "QuoteStatusService":
        config = config or ApiConfig()
        return cls(BoundedHttpCall(config.base_url, timeout=config.timeout))

    def get_quote_status(self, quote_id: str) -> ApiResult[QuoteStatus]:
        try:
            data = self.http_call.request("GET", f"/quotes/{quote_id}/status") or {}
        except (ApiException, NetworkException) as e:
            return self._failure("Failed to get quote status", e)

        return ApiResult(200, "Quote status retrieved successfully",
                         data=QuoteStatus.from_api(data, quote_id))

    def list_quotes(self) -> ApiResult[List[QuoteRecord]]:
        try:
            data = self.http_call.request("GET", "/quotes")
        except (ApiException, NetworkException) as e:
            return self._failure("Failed to get quotes", e)

        records = data if isinstance(data, list) else [data] if data else []
        return ApiResult(200, "Quotes retrieved successfully",
                         data=[QuoteRecord.from_api(record) for record in records])

    def update_quote_status(self, quote_id: str, status: str) -> ApiResult[QuoteStatus]:
        if status not in QUOTE_STATUSES:
            raise ValidationException(
                f"Unsupported quote status '{status}'",
                field="status",
                errors=[f"status must be one of {', '.join(QUOTE_STATUSES)}"],
            )

        try:
            data = self.http_call.request(
                "PUT", f"/quotes/{quote_id}/status", json_data={"status": status}
            ) or {}
        except (ApiException, NetworkException) as e:
            return self._failure("Failed to update quote status", e)

        logger.info(f"Quote {quote_id} status set to {status}")
        return ApiResult(200, "Quote status updated successfully",
                         data=QuoteStatus.from_api(data, quote_id))

    @staticmethod
    def _failure(message: str, error: Exception) -> ApiResult:
        if isinstance(error, ApiException) and error.status_code:
            logger.warning(f"{message}: {error}")
            return ApiResult(error.status_code, message, error=error.message)
        logger.error(f"{message}: {error}")
        return ApiResult(500, "Internal server error", error=str(error))
