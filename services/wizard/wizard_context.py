# -*- coding: utf-8 -*-
"""
Wizard Context - session identity and step bookkeeping shared by wizards.

A concrete context (QuoteContext) adds the answers being collected.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Set


class WizardContext(ABC):
    """
    State every multi-step wizard session carries.

    Attributes:
        wizard_id: Random session id
        reference_number: Human-readable id, e.g. QTE-20260118153045-A3F2
        current_step: 1-based step shown to the user
        completed_steps: Steps that passed validation on the way forward
    """

    REFERENCE_PREFIX = "WIZ"

    def __init__(self):
        now = datetime.now()
        self.wizard_id: str = str(uuid.uuid4())
        self.created_at: datetime = now
        self.updated_at: datetime = now
        self.current_step: int = 1
        self.completed_steps: Set[int] = set()
        self.reference_number: str = (
            f"{self._get_reference_prefix()}-{now.strftime('%Y%m%d%H%M%S')}-"
            f"{self.wizard_id[:4].upper()}"
        )

    def _get_reference_prefix(self) -> str:
        return self.REFERENCE_PREFIX

    def touch(self):
        self.updated_at = datetime.now()

    def mark_step_completed(self, step: int):
        self.completed_steps.add(step)
        self.touch()

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the session for logging and debugging."""

    def _base_dict(self) -> Dict[str, Any]:
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step": self.current_step,
            "completed_steps": sorted(self.completed_steps),
        }
