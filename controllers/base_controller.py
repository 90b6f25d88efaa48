# -*- coding: utf-8 -*-
"""
Base Controller
===============
Shared plumbing for storefront controllers: the OperationResult type
returned to views and the busy/error signals views bind to.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Outcome of a controller call, ready for display."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None) -> 'OperationResult[T]':
        return cls(success=False, message=message, errors=list(errors or []))


class BaseController(QObject):
    """
    Tracks the one long-running operation a controller may have in flight.

    Views listen to:
        operation_started(name)
        operation_completed(name, success)
        operation_error(name, message)
        loading_changed(busy)
    """

    operation_started = pyqtSignal(str)
    operation_completed = pyqtSignal(str, bool)
    operation_error = pyqtSignal(str, str)
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._active_operation: Optional[str] = None
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        return self._active_operation is not None

    @property
    def active_operation(self) -> Optional[str]:
        return self._active_operation

    @property
    def last_error(self) -> str:
        return self._last_error

    def _log_operation(self, operation: str, **details):
        logger.info(f"{self.__class__.__name__}.{operation}: {details}")

    def _emit_started(self, operation: str):
        self._active_operation = operation
        self._last_error = ""
        self.operation_started.emit(operation)
        self.loading_changed.emit(True)

    def _emit_completed(self, operation: str, success: bool = True):
        self._active_operation = None
        self.operation_completed.emit(operation, success)
        self.loading_changed.emit(False)

    def _emit_error(self, operation: str, error: str):
        self._last_error = error
        logger.error(f"{self.__class__.__name__}.{operation} failed: {error}")
        self.operation_error.emit(operation, error)
        self._emit_completed(operation, False)
