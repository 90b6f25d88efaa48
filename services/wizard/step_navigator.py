# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous)
- Step validation before forward navigation
- Progress tracking
"""

from typing import Callable, Dict, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from services.wizard.wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)

# step -> {field: message}; empty dict means the step is valid
StepValidatorFn = Callable[[int], Dict[str, str]]


class StepNavigator(QObject):
    """
    Tracks the current step (1-based) and gates forward moves on validation.

    Responsibilities:
    - Track current step
    - Validate before moving forward (never when moving back)
    - Emit signals for UI updates
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_step, new_step
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)
    validation_failed = pyqtSignal(int, dict)  # step, errors

    def __init__(self, context: WizardContext, step_count: int,
                 validator: Optional[StepValidatorFn] = None):
        """
        Initialize the navigator.

        Args:
            context: Wizard context (its current_step is kept in sync)
            step_count: Total number of steps
            validator: Called with a step number before leaving it forwards
        """
        super().__init__()
        if step_count < 1:
            raise ValueError("A wizard needs at least one step")
        self.context = context
        self.step_count = step_count
        self.validator = validator
        self.last_errors: Dict[str, str] = {}
        self.context.current_step = min(max(self.context.current_step, 1), step_count)

    @property
    def current_step(self) -> int:
        return self.context.current_step

    def is_final_step(self) -> bool:
        return self.current_step == self.step_count

    def can_go_next(self) -> bool:
        return self.current_step < self.step_count

    def can_go_previous(self) -> bool:
        return self.current_step > 1

    def validate_current(self) -> Dict[str, str]:
        """Run the validator for the current step and remember the result."""
        self.last_errors = dict(self.validator(self.current_step)) if self.validator else {}
        if self.last_errors:
            logger.warning(f"Step {self.current_step} validation failed: {sorted(self.last_errors)}")
            self.validation_failed.emit(self.current_step, dict(self.last_errors))
        return self.last_errors

    def next_step(self, skip_validation: bool = False) -> bool:
        """
        Navigate to the next step.

        Returns:
            True if navigation was successful
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_step})")
            return False

        logger.info(f"Navigating: Step {self.current_step} → {self.current_step + 1}")

        if not skip_validation:
            if self.validate_current():
                return False
            self.context.mark_step_completed(self.current_step)

        return self._navigate_to(self.current_step + 1)

    def previous_step(self) -> bool:
        """Navigate to the previous step. Never validates."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_step})")
            return False

        logger.info(f"Navigating back: Step {self.current_step} → {self.current_step - 1}")
        return self._navigate_to(self.current_step - 1)

    def goto_step(self, step: int, skip_validation: bool = False) -> bool:
        """
        Navigate to a specific step.

        Forward jumps validate the current step only; callers that need
        every intermediate step checked should walk with next_step().
        """
        if step < 1 or step > self.step_count:
            return False

        if step == self.current_step:
            return True

        if step > self.current_step and not skip_validation:
            if self.validate_current():
                return False

        return self._navigate_to(step)

    def _navigate_to(self, new_step: int) -> bool:
        if new_step < 1 or new_step > self.step_count:
            logger.error(f"Invalid step: {new_step} (valid range: 1-{self.step_count})")
            return False

        old_step = self.current_step
        self.context.current_step = new_step
        self.context.touch()

        self.step_changed.emit(old_step, new_step)
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())

        logger.info(f"Navigation complete: Step {new_step} is now active")
        return True

    def reset(self):
        """Reset navigator to first step."""
        self._navigate_to(1)

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage (current step over step count).

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        return (self.current_step / self.step_count) * 100.0
