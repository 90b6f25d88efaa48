# -*- coding: utf-8 -*-
"""
Step validation service for the Quote Request Wizard.

Validates draft data for each step without UI coupling.
"""

from typing import Dict, List, Optional, Tuple

from models.quote import QuoteDraft
from services.translation_manager import tr
from services.validation.validation_factory import ValidationFactory, get_validation_factory


class StepValidator:
    """Validates wizard step data based on the draft."""

    # Step constants (1-based, as shown to the user)
    STEP_CONTACT = 1
    STEP_ADDRESS = 2
    STEP_PROJECT = 3
    STEP_PREFERENCES = 4
    STEP_REVIEW = 5

    FIRST_STEP = STEP_CONTACT
    FINAL_STEP = STEP_REVIEW

    # Steps carrying required fields, in the order they are re-checked on submit
    REQUIRED_STEPS = (STEP_CONTACT, STEP_ADDRESS, STEP_PROJECT)

    _RECORD_TYPES = {
        STEP_CONTACT: "contact",
        STEP_ADDRESS: "address",
        STEP_PROJECT: "project",
    }

    _STEP_TITLE_KEYS = {
        STEP_CONTACT: "wizard.step.contact",
        STEP_ADDRESS: "wizard.step.address",
        STEP_PROJECT: "wizard.step.project",
        STEP_PREFERENCES: "wizard.step.preferences",
        STEP_REVIEW: "wizard.step.review",
    }

    def __init__(self, factory: Optional[ValidationFactory] = None):
        self.factory = factory or get_validation_factory()

    @staticmethod
    def step_record(step: int, draft: QuoteDraft) -> Dict[str, str]:
        """Flatten the fields a step validates into a record."""
        if step == StepValidator.STEP_CONTACT:
            return {
                "name": draft.contact.name,
                "email": draft.contact.email,
                "phone": draft.contact.phone,
                "company": draft.contact.company,
            }
        if step == StepValidator.STEP_ADDRESS:
            return draft.address.to_dict()
        if step == StepValidator.STEP_PROJECT:
            return {
                "description": draft.project_details.description,
                "specialRequirements": draft.project_details.special_requirements,
            }
        return {}

    def validate_step(self, step: int, draft: QuoteDraft) -> Dict[str, str]:
        """
        Validate one step of the draft.

        Returns:
            Field name to error message; empty when the step passes.
            Steps 4 and 5 have no required fields and always pass.
        """
        record_type = self._RECORD_TYPES.get(step)
        if record_type is None:
            return {}
        return self.factory.validate_record(record_type, self.step_record(step, draft))

    def validate_required_steps(self, draft: QuoteDraft) -> Tuple[Optional[int], Dict[str, str]]:
        """
        Validate every step that carries required fields.

        Returns:
            (first failing step or None, errors of all failing steps merged)
        """
        first_failing = None
        errors: Dict[str, str] = {}
        for step in self.REQUIRED_STEPS:
            step_errors = self.validate_step(step, draft)
            if step_errors:
                if first_failing is None:
                    first_failing = step
                errors.update(step_errors)
        return first_failing, errors

    @staticmethod
    def fields_for_step(step: int) -> List[str]:
        return list(StepValidator.step_record(step, QuoteDraft()).keys())

    @staticmethod
    def get_step_name(step: int) -> str:
        """Get translated title for a step."""
        key = StepValidator._STEP_TITLE_KEYS.get(step)
        return tr(key) if key else ""
