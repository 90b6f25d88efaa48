# -*- coding: utf-8 -*-
"""
Quote Wizard Controller
=======================
Owns one quote-request session: the draft, the current step, the field
error map and the submission outcome.

Steps:
    1 Contact Info   - name, email, phone required (company optional)
    2 Address        - street, city, state, zipCode required
    3 Project        - description required
    4 Preferences    - no required fields
    5 Review         - submit from here

Errors are cleared optimistically when a field is edited and recomputed
authoritatively on advance() and submit().

Usage:
    controller = QuoteWizardController.open(items=[QuoteItem("p1", "Sofa")])
    controller.update_field("contact", "name", "Asha Rao")
    if controller.advance():
        ...
    result = controller.submit()
"""

from typing import Dict, List, Optional, Tuple

from PyQt5.QtCore import QThread, pyqtSignal

from app.config import Vocabularies
from controllers.base_controller import BaseController, OperationResult
from models.quote import QuoteDraft, QuoteItem, normalize_phone
from services.error_mapper import map_exception
from services.quote_gateway import ErrorKind, QuoteSubmissionGateway, SubmissionOutcome
from services.translation_manager import tr, vocabulary_label
from services.wizard.quote_context import QuoteContext, SubmissionStatus
from services.wizard.step_navigator import StepNavigator
from services.wizard.step_validator import StepValidator
from utils.logger import get_logger

logger = get_logger(__name__)

SUBMIT_OPERATION = "submit_quote"


def _submit_safely(gateway: QuoteSubmissionGateway, draft: QuoteDraft) -> SubmissionOutcome:
    """Run the gateway; anything it fails to classify becomes a failed outcome."""
    try:
        return gateway.submit(draft)
    except Exception as e:
        logger.exception(f"Unexpected error during quote submission: {e}")
        return SubmissionOutcome.fail(ErrorKind.UNKNOWN, map_exception(e, "quote.submit"))


class SubmissionWorker(QThread):
    """Background worker for quote submission."""

    outcome_ready = pyqtSignal(object)  # SubmissionOutcome

    def __init__(self, gateway: QuoteSubmissionGateway, draft: QuoteDraft):
        super().__init__()
        self.gateway = gateway
        self.draft = draft

    def run(self):
        """Submit in background."""
        self.outcome_ready.emit(_submit_safely(self.gateway, self.draft))


class QuoteWizardController(BaseController):
    """
    Controller for the quote request wizard.

    Sole mutator of the wizard state (QuoteContext).
    """

    step_changed = pyqtSignal(int, int)  # old_step, new_step
    errors_changed = pyqtSignal(dict)
    submission_status_changed = pyqtSignal(str)
    quote_submitted = pyqtSignal(str)  # quote id
    submission_failed = pyqtSignal(str)  # displayable message

    def __init__(self, gateway: QuoteSubmissionGateway,
                 items: Optional[List[QuoteItem]] = None,
                 step_validator: Optional[StepValidator] = None,
                 parent=None):
        super().__init__(parent)
        self.gateway = gateway
        self.step_validator = step_validator or StepValidator()
        self.context = QuoteContext(items)
        self.navigator = StepNavigator(
            self.context,
            StepValidator.FINAL_STEP,
            lambda step: self.step_validator.validate_step(step, self.context.draft),
        )
        self.navigator.step_changed.connect(self.step_changed.emit)
        self._worker: Optional[SubmissionWorker] = None

        logger.info(
            f"Quote wizard opened ({self.context.reference_number}) "
            f"with {len(self.context.draft.items)} item(s)"
        )

    @classmethod
    def open(cls, gateway: Optional[QuoteSubmissionGateway] = None,
             items: Optional[List[QuoteItem]] = None, parent=None) -> 'QuoteWizardController':
        """Start a fresh quote session seeded with the selected products."""
        return cls(gateway or QuoteSubmissionGateway.from_config(), items=items, parent=parent)

    # ==================== State ====================

    @property
    def draft(self) -> QuoteDraft:
        return self.context.draft

    @property
    def current_step(self) -> int:
        return self.context.current_step

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self.context.errors)

    @property
    def submission_status(self) -> SubmissionStatus:
        return self.context.submission_status

    @property
    def quote_id(self) -> Optional[str]:
        return self.context.quote_id

    @property
    def submission_error(self) -> Optional[str]:
        return self.context.submission_error

    def is_final_step(self) -> bool:
        return self.navigator.is_final_step()

    def progress_percentage(self) -> float:
        return self.navigator.get_progress_percentage()

    def step_title(self, step: Optional[int] = None) -> str:
        return StepValidator.get_step_name(step or self.current_step)

    def progress_label(self) -> str:
        return tr("wizard.progress", current=self.current_step, total=StepValidator.FINAL_STEP)

    def review_summary(self) -> List[Tuple[str, List[Tuple[str, str]]]]:
        """
        Labelled answers for the review step, in display order.

        Returns:
            [(section title, [(label, value), ...]), ...]
        """
        draft = self.draft
        contact, address = draft.contact, draft.address
        project, preferences = draft.project_details, draft.preferences

        rows = [
            (tr("review.section.contact"), [
                (tr("field.name"), contact.name),
                (tr("field.email"), contact.email),
                (tr("field.phone"), contact.phone),
                (tr("review.company"), contact.company or tr("review.not_provided")),
            ]),
            (tr("review.section.address"), [
                (tr("field.street"), address.street),
                (tr("field.city"), address.city),
                (tr("field.state"), address.state),
                (tr("field.zipCode"), address.zip_code),
                (tr("review.country"), address.country),
            ]),
            (tr("review.section.project"), [
                (tr("review.project_type"),
                 vocabulary_label(Vocabularies.PROJECT_TYPES, project.project_type.value)),
                (tr("review.timeline"),
                 vocabulary_label(Vocabularies.TIMELINES, project.timeline.value)),
                (tr("review.budget"),
                 vocabulary_label(Vocabularies.BUDGETS, project.budget.value)),
                (tr("field.description"), project.description),
            ]),
            (tr("review.section.preferences"), [
                (tr("review.contact_method"),
                 vocabulary_label(Vocabularies.CONTACT_METHODS,
                                  preferences.preferred_contact_method.value)),
                (tr("review.contact_time"),
                 preferences.preferred_contact_time or tr("review.any_time")),
            ]),
        ]
        if project.special_requirements:
            rows[2][1].append((tr("review.special_requirements"), project.special_requirements))
        return rows

    # ==================== Editing ====================

    def update_field(self, section: str, field: str, value) -> bool:
        """
        Write a value into the draft and drop any stale error for the field.

        Args:
            section: "contact", "address", "project_details" or "preferences"
            field: Wire name ("zipCode") or attribute name ("zip_code")
            value: New value; enumerated fields accept their string codes

        Returns:
            False when the wizard no longer accepts edits

        Raises:
            ValueError: unknown section/field or invalid enumerated value
        """
        if self.context.is_locked:
            logger.warning(f"Ignoring edit of {section}.{field}: wizard is {self.submission_status.value}")
            return False

        target = self.draft.section(section)
        key = target.wire_name(field)
        if section == "contact" and key == "phone":
            value = normalize_phone(value)

        self.draft.set_value(section, field, value)
        self.context.touch()
        self._leave_failed_state()

        if key in self.context.errors:
            del self.context.errors[key]
            self.errors_changed.emit(dict(self.context.errors))
        return True

    # ==================== Navigation ====================

    def advance(self) -> bool:
        """
        Validate the current step and move forward if it passes.

        At the final step a passing validation leaves the step unchanged.
        """
        if self.context.is_locked:
            return False
        self._leave_failed_state()

        step = self.current_step
        if self.navigator.is_final_step():
            passed = not self.navigator.validate_current()
        else:
            passed = self.navigator.next_step()

        self._replace_step_errors(step, self.navigator.last_errors)
        return passed

    def retreat(self) -> bool:
        """Move back one step without validating. Floor at step 1."""
        if self.context.is_locked:
            return False
        self._leave_failed_state()
        return self.navigator.previous_step()

    def goto_step(self, step: int) -> bool:
        """
        Jump to a step (progress bar click).

        Backwards is always allowed; forwards walks one step at a time and
        stops at the first step that does not validate.
        """
        if self.context.is_locked or step < 1 or step > StepValidator.FINAL_STEP:
            return False
        if step <= self.current_step:
            self._leave_failed_state()
            return self.navigator.goto_step(step, skip_validation=True)
        while self.current_step < step:
            if not self.advance():
                return False
        return True

    # ==================== Submission ====================

    def submit(self) -> OperationResult:
        """
        Re-validate steps 1-3 and send the draft once.

        Returns:
            OperationResult with the quote id on success, or the
            displayable failure message.
        """
        gate = self._check_submittable()
        if gate is not None:
            return gate

        self._begin_submission()
        outcome = _submit_safely(self.gateway, self.draft.copy())
        return self._finish_submission(outcome)

    def submit_async(self) -> OperationResult:
        """
        Same gating as submit(), but the request runs on a SubmissionWorker.

        The outcome arrives through quote_submitted / submission_failed.
        """
        gate = self._check_submittable()
        if gate is not None:
            return gate

        self._begin_submission()
        self._worker = SubmissionWorker(self.gateway, self.draft.copy())
        self._worker.outcome_ready.connect(self._finish_submission)
        self._worker.start()
        return OperationResult.ok()

    def _check_submittable(self) -> Optional[OperationResult]:
        """None when submission may proceed, otherwise the failed result."""
        if self.context.is_submitted:
            return OperationResult.fail(tr("error.quote.already_submitted"))
        if self.context.is_submitting:
            return OperationResult.fail(tr("error.quote.in_progress"))
        if not self.navigator.is_final_step():
            return OperationResult.fail(tr("error.quote.not_final_step"))

        first_failing, errors = self.step_validator.validate_required_steps(self.draft)
        self._set_errors(errors)
        if first_failing is not None:
            logger.warning(f"Submit blocked: step {first_failing} invalid ({sorted(errors)})")
            self.navigator.goto_step(first_failing, skip_validation=True)
            return OperationResult.fail(tr("error.validation.failed"), errors=list(errors.values()))
        return None

    def _begin_submission(self):
        self.context.submission_attempts += 1
        self.context.submission_error = None
        self._set_status(SubmissionStatus.SUBMITTING)
        self._log_operation(SUBMIT_OPERATION, attempt=self.context.submission_attempts)
        self._emit_started(SUBMIT_OPERATION)

    def _finish_submission(self, outcome: SubmissionOutcome) -> OperationResult:
        # _worker stays referenced until the next submit_async(): a QThread
        # collected before run() returns aborts the process.
        if outcome.success:
            self.context.quote_id = outcome.quote_id
            self.context.estimated_response = outcome.estimated_response
            self.context.mark_step_completed(self.current_step)
            self._set_status(SubmissionStatus.SUBMITTED)
            self._emit_completed(SUBMIT_OPERATION, True)
            self.quote_submitted.emit(outcome.quote_id)
            return OperationResult.ok(
                data=outcome.quote_id, message=tr("quote.submitted", quote_id=outcome.quote_id)
            )

        self.context.submission_error = outcome.message
        self._set_status(SubmissionStatus.FAILED)
        self._emit_error(SUBMIT_OPERATION, outcome.message)
        self.submission_failed.emit(outcome.message)
        return OperationResult.fail(outcome.message)

    # ==================== Internals ====================

    def _set_status(self, status: SubmissionStatus):
        if self.context.submission_status != status:
            self.context.submission_status = status
            self.context.touch()
            self.submission_status_changed.emit(status.value)

    def _leave_failed_state(self):
        if self.context.submission_status == SubmissionStatus.FAILED:
            self._set_status(SubmissionStatus.EDITING)

    def _set_errors(self, errors: Dict[str, str]):
        if errors != self.context.errors:
            self.context.errors = dict(errors)
            self.errors_changed.emit(dict(errors))

    def _replace_step_errors(self, step: int, step_errors: Dict[str, str]):
        """Recompute the entries of one step's fields, keeping the rest."""
        step_fields = set(StepValidator.fields_for_step(step))
        errors = {k: v for k, v in self.context.errors.items() if k not in step_fields}
        errors.update(step_errors)
        self._set_errors(errors)
