# -*- coding: utf-8 -*-
"""
Wizard Framework - step navigation, validation and state for multi-step forms.
"""

from .wizard_context import WizardContext
from .quote_context import QuoteContext, SubmissionStatus
from .step_navigator import StepNavigator
from .step_validator import StepValidator

__all__ = [
    'WizardContext',
    'QuoteContext',
    'SubmissionStatus',
    'StepNavigator',
    'StepValidator',
]
