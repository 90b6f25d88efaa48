# -*- coding: utf-8 -*-
"""
Storefront Controllers
======================
Controller layer between the views and the service layer.

Controllers provide:
- Standardized error handling via OperationResult
- Qt signals for UI updates
- Validation and business rules
- State management

Usage:
    from controllers import QuoteWizardController

    controller = QuoteWizardController.open(items=items)
    controller.update_field("contact", "email", "asha@example.com")
    result = controller.submit()
    if result.success:
        print(f"Quote ID: {result.data}")
    else:
        print(f"Error: {result.message}")
"""

from controllers.base_controller import (
    BaseController,
    OperationResult,
)
from controllers.quote_wizard_controller import (
    QuoteWizardController,
    SubmissionWorker,
)

__all__ = [
    'BaseController',
    'OperationResult',
    'QuoteWizardController',
    'SubmissionWorker',
]
