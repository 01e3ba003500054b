# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title and progress
- Scrollable step container (scrolled back to the top on every step change)
- Navigation buttons (Cancel, Previous, Next/Submit)
- Inline validation feedback
"""

from typing import List, Optional, Tuple
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QStackedWidget, QProgressBar, QScrollArea
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from .base_step import BaseStep
from .wizard_context import WizardContext
from .step_navigator import StepNavigator
from services.translation_manager import tr
from services.wizard.step_validator import StepValidationResult


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_steps(): Create and return list of wizard steps
    - create_context(): Create and return wizard context
    - on_submit(): Handle final submission

    Subclasses may override next_step_index()/previous_step_index() to skip
    steps, and entry_step_index() to start somewhere other than the first.
    """

    # Signals
    wizard_completed = pyqtSignal(dict)
    wizard_cancelled = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self.context = self.create_context()
        self.steps = self.create_steps()

        self.navigator = StepNavigator(
            self.context, self.steps,
            next_index=self.next_step_index,
            previous_index=self.previous_step_index,
        )
        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.can_go_next_changed.connect(self._update_navigation_buttons)
        self.navigator.can_go_previous_changed.connect(self._update_navigation_buttons)
        self.navigator.validation_failed.connect(self._on_validation_failed)

        self._navigation_locked = False
        self._setup_ui()

        self.navigator.goto_step(self.entry_step_index())

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        """Create and return the wizard steps, in index order."""

    @abstractmethod
    def create_context(self) -> WizardContext:
        """Create and return the wizard context."""

    @abstractmethod
    def on_submit(self):
        """
        Handle wizard submission.

        Called when the user confirms the last step and it validated.
        """

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def next_step_index(self, index: int) -> Optional[int]:
        return index + 1 if index < len(self.steps) - 1 else None

    def previous_step_index(self, index: int) -> Optional[int]:
        return index - 1 if index > 0 else None

    def entry_step_index(self) -> int:
        return 0

    def progress_for(self, index: int) -> Optional[Tuple[int, int]]:
        """(current, total) for the progress header, or None to hide it."""
        return index + 1, len(self.steps)

    def get_wizard_title(self) -> str:
        return tr("wizard.title")

    def get_submit_button_text(self) -> str:
        return tr("wizard.button.submit")

    def can_submit(self) -> bool:
        """Whether the submit button is enabled on the last step."""
        return True

    def on_cancel(self) -> bool:
        """Return False to keep the wizard open."""
        return True

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet("background-color: #ddd;")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        self.scroll_area.setWidget(self.step_container)
        main_layout.addWidget(self.scroll_area, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        header = QWidget()
        header.setStyleSheet("""
            QWidget {
                background-color: #f8f9fa;
            }
        """)

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.progress_widget = QWidget()
        progress_layout = QHBoxLayout(self.progress_widget)
        progress_layout.setContentsMargins(0, 0, 0, 0)
        progress_layout.setSpacing(8)

        self.progress_label = QLabel()
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: #e9ecef;
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)

        layout.addWidget(self.progress_widget)

        return header

    def _create_footer(self) -> QWidget:
        footer = QWidget()
        footer.setStyleSheet("""
            QWidget {
                background-color: #f8f9fa;
            }
        """)

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = QPushButton(tr("wizard.button.cancel"))
        self.btn_cancel.setMinimumHeight(40)
        self.btn_cancel.clicked.connect(self._handle_cancel)
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        self.btn_previous = QPushButton(tr("wizard.button.previous"))
        self.btn_previous.setMinimumHeight(40)
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        self.btn_next = QPushButton(tr("wizard.button.next"))
        self.btn_next.setMinimumHeight(40)
        self.btn_next.setStyleSheet(
            f"QPushButton {{ background-color: {Config.PRIMARY_COLOR}; color: white;"
            "border-radius: 6px; padding: 0 20px; }"
            "QPushButton:disabled { background-color: #9CA3AF; }"
        )
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        return footer

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        if not self._navigation_locked:
            self.navigator.previous_step()

    def _handle_next(self):
        if self._navigation_locked:
            return
        if self.navigator.is_last_step():
            self._handle_submit()
        else:
            self.navigator.next_step()

    def _handle_cancel(self):
        if self.on_cancel():
            self.wizard_cancelled.emit()
            self.close()

    def _handle_submit(self):
        if not self.navigator.validate_current().is_valid:
            return
        self.on_submit()

    def set_navigation_locked(self, locked: bool):
        """Disable previous/next while a long operation runs."""
        self._navigation_locked = locked
        self._update_navigation_buttons()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_changed(self, old_index: int, new_index: int):
        self.step_container.setCurrentIndex(new_index)
        self.scroll_to_top()
        self._update_progress()
        self._update_navigation_buttons()

    def scroll_to_top(self):
        self.scroll_area.verticalScrollBar().setValue(0)

    def _update_progress(self):
        progress = self.progress_for(self.navigator.current_index)
        self.progress_widget.setVisible(progress is not None)
        if progress is None:
            return
        current, total = progress
        self.progress_label.setText(tr("wizard.progress", current=current, total=total))
        self.progress_bar.setValue(int(current * 100 / total) if total else 0)

    def _update_navigation_buttons(self, *args):
        locked = self._navigation_locked
        self.btn_previous.setEnabled(not locked and self.navigator.can_go_previous())
        if self.navigator.is_last_step():
            self.btn_next.setEnabled(not locked and self.can_submit())
            self.btn_next.setText(self.get_submit_button_text())
        else:
            self.btn_next.setEnabled(not locked)
            self.btn_next.setText(tr("wizard.button.next"))

    def _on_validation_failed(self, result: StepValidationResult):
        step = self.navigator.get_current_step()
        if step is not None:
            step.show_errors(result)
            self.scroll_to_top()
