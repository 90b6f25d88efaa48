# -*- coding: utf-8 -*-
"""
Quote Context - State of one quote-request wizard session.

Holds the draft answers, the current step, the field error map and the
submission outcome. Mutated only by QuoteWizardController.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from app.config import Config
from models.quote import QuoteDraft, QuoteItem
from services.wizard.wizard_context import WizardContext


class SubmissionStatus(Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    FAILED = "failed"


class QuoteContext(WizardContext):
    """Draft + wizard state for a quote request."""

    REFERENCE_PREFIX = Config.QUOTE_REFERENCE_PREFIX

    def __init__(self, items: Optional[List[QuoteItem]] = None):
        super().__init__()
        self.draft: QuoteDraft = QuoteDraft.seeded(items)
        self.errors: Dict[str, str] = {}
        self.submission_status: SubmissionStatus = SubmissionStatus.EDITING
        self.quote_id: Optional[str] = None
        self.estimated_response: Optional[str] = None
        self.submission_error: Optional[str] = None
        self.submission_attempts: int = 0

    @property
    def is_submitted(self) -> bool:
        return self.submission_status == SubmissionStatus.SUBMITTED

    @property
    def is_submitting(self) -> bool:
        return self.submission_status == SubmissionStatus.SUBMITTING

    @property
    def is_locked(self) -> bool:
        """No edits or navigation while a submission is in flight or done."""
        return self.is_submitted or self.is_submitting

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data.update({
            "draft": self.draft.to_request(),
            "errors": dict(self.errors),
            "submission_status": self.submission_status.value,
            "quote_id": self.quote_id,
            "estimated_response": self.estimated_response,
            "submission_error": self.submission_error,
            "submission_attempts": self.submission_attempts,
        })
        return data
