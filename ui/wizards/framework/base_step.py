# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

All wizard steps should inherit from this class and implement:
- setup_ui(): Create the step's UI
- validate(): Validate step data
- collect_data(): Yield the step's fragment
- populate_data(): Populate UI with data from the context

Steps know nothing about the overall flow; they only ask the wizard to
advance (step_completed) or report live changes (step_data_changed).
"""

from typing import Dict, Any, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from services.wizard.step_validator import StepValidationResult


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Provides common functionality for:
    - UI setup and lifecycle
    - Inline validation feedback
    - Navigation signals
    """

    # Signals
    step_completed = pyqtSignal()
    step_data_changed = pyqtSignal(dict)
    validation_changed = pyqtSignal(bool)

    def __init__(self, context: 'WizardContext', parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            context: The wizard context for data sharing
            parent: Parent widget
        """
        super().__init__(parent)
        self.context = context
        self._is_initialized = False

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

        self.title_label = QLabel()
        self.title_label.setObjectName("stepTitle")
        self.title_label.setStyleSheet("font-size: 18px; font-weight: bold;")
        self.main_layout.addWidget(self.title_label)

        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(f"color: {Config.TEXT_MUTED};")
        self.main_layout.addWidget(self.description_label)

        # Validation messages shown near the step
        self.error_label = QLabel()
        self.error_label.setObjectName("stepErrors")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(
            f"color: {Config.ERROR_COLOR}; background-color: #FEF2F2;"
            "border: 1px solid #FECACA; border-radius: 6px; padding: 8px;"
        )
        self.error_label.hide()
        self.main_layout.addWidget(self.error_label)

    def initialize(self):
        """Initialize the step (called once, the first time it is shown)."""
        if not self._is_initialized:
            self.title_label.setText(self.get_step_title())
            self.description_label.setText(self.get_step_description())
            self.description_label.setVisible(bool(self.get_step_description()))
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the step is shown; refreshes the UI from the context."""
        if not self._is_initialized:
            self.initialize()
        self.clear_errors()
        self.populate_data()

    def on_hide(self):
        """Called when the step is hidden (moving to another step)."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """Create the step's widgets (called once)."""

    @abstractmethod
    def validate(self) -> StepValidationResult:
        """Validate the step's current input."""

    @abstractmethod
    def collect_data(self) -> Dict[str, Any]:
        """
        Collect the step's fragment.

        Returns:
            Dictionary of draft fields to merge
        """

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """Populate the step's UI with data from context."""
        pass

    def get_step_title(self) -> str:
        return self.__class__.__name__

    def get_step_description(self) -> str:
        return ""

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def show_errors(self, result: StepValidationResult):
        """Show validation errors inline."""
        lines = [f"• {error}" for error in result.errors]
        self.error_label.setText("\n".join(lines))
        self.error_label.setVisible(bool(lines))

    def clear_errors(self):
        self.error_label.clear()
        self.error_label.hide()
