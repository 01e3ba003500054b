# -*- coding: utf-8 -*-
"""
Base Controller
===============
Common signals and result handling for the listing controllers.

Controllers never raise the expected service errors (API, network,
precondition) to the UI: they come back as a failed OperationResult with a
translated message. Anything else is a bug and propagates.
"""

from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException, PreconditionException
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

EXPECTED_ERRORS = (ApiException, NetworkException, PreconditionException)


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = field(default_factory=list)
    error: Optional[Exception] = None

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None,
             error: Optional[Exception] = None) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, message=message, errors=errors or [], error=error)


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Operation lifecycle signals
    - Loading state
    - Mapping of service errors to OperationResult
    """

    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_error(self) -> str:
        return self._last_error

    def _set_loading(self, loading: bool):
        if self._is_loading != loading:
            self._is_loading = loading
            self.loading_changed.emit(loading)

    def _log_operation(self, operation: str, **kwargs):
        logger.info(f"{self.__class__.__name__}.{operation}: {kwargs}")

    def _emit_started(self, operation: str):
        self._last_error = ""
        self.operation_started.emit(operation)
        self._set_loading(True)

    def _emit_completed(self, operation: str, success: bool):
        self.operation_completed.emit(operation, success)
        self._set_loading(False)

    def _emit_error(self, operation: str, error: str):
        self._last_error = error
        logger.error(f"{self.__class__.__name__}.{operation} failed: {error}")
        self.operation_error.emit(operation, error)
        self._set_loading(False)

    def execute_with_error_handling(
        self,
        operation: str,
        func: Callable,
        *args,
        **kwargs
    ) -> OperationResult:
        """Run func, turning expected service errors into a failed result."""
        self._emit_started(operation)
        try:
            result = func(*args, **kwargs)
        except EXPECTED_ERRORS as e:
            message = map_exception(e, context=operation)
            self._emit_error(operation, message)
            return OperationResult.fail(message=message, error=e)
        except Exception:
            self._set_loading(False)
            raise
        self._emit_completed(operation, True)
        return OperationResult.ok(data=result)
