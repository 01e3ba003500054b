# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression through a caller-supplied transition function
- Validation and fragment merge before moving forward
- Step lifecycle (show/hide)
"""

from typing import Callable, List, Optional
from PyQt5.QtCore import QObject, pyqtSignal

from .base_step import BaseStep
from .wizard_context import WizardContext
from services.wizard.step_validator import StepValidationResult
from utils.logger import get_logger

logger = get_logger(__name__)

# index -> next/previous index, or None at the ends
TransitionFn = Callable[[int], Optional[int]]


class StepNavigator(QObject):
    """
    Manages navigation between wizard steps.

    Responsibilities:
    - Track current step
    - Validate and merge before moving forward
    - Emit signals for UI updates
    - Manage step lifecycle (show/hide)

    Steps may be skipped: the transition functions decide which index comes
    next or before. Without them navigation is linear.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)
    validation_failed = pyqtSignal(object)  # StepValidationResult
    data_merged = pyqtSignal(dict)

    def __init__(self, context: WizardContext, steps: List[BaseStep],
                 next_index: Optional[TransitionFn] = None,
                 previous_index: Optional[TransitionFn] = None):
        super().__init__()
        self.context = context
        self.steps = steps
        self.current_index = -1
        self._next_index = next_index or self._linear_next
        self._previous_index = previous_index or self._linear_previous

        for step in self.steps:
            step.validation_changed.connect(self._on_step_validation_changed)

    def _linear_next(self, index: int) -> Optional[int]:
        return index + 1 if index < len(self.steps) - 1 else None

    def _linear_previous(self, index: int) -> Optional[int]:
        return index - 1 if index > 0 else None

    def get_current_step(self) -> Optional[BaseStep]:
        if 0 <= self.current_index < len(self.steps):
            return self.steps[self.current_index]
        return None

    def can_go_next(self) -> bool:
        return self._next_index(self.current_index) is not None

    def can_go_previous(self) -> bool:
        return self._previous_index(self.current_index) is not None

    def is_last_step(self) -> bool:
        return not self.can_go_next()

    def validate_current(self) -> StepValidationResult:
        """Validate the current step, emitting validation_failed on errors."""
        current_step = self.get_current_step()
        if current_step is None:
            return StepValidationResult()
        result = current_step.validate()
        if not result.is_valid:
            logger.warning(f"Step {self.current_index} validation failed: {result.errors}")
            self.validation_failed.emit(result)
        return result

    def commit_current(self) -> bool:
        """
        Validate the current step and merge its fragment into the context.

        Returns:
            True if the step was valid and its data merged
        """
        if not self.validate_current().is_valid:
            return False

        current_step = self.get_current_step()
        fragment = current_step.collect_data()
        self.context.merge_step_data(fragment)
        self.context.mark_step_completed(self.current_index)
        self.data_merged.emit(fragment)
        return True

    def next_step(self) -> bool:
        """
        Validate, merge, then move to the step the transition function picks.

        The target is computed after the merge, so answers given on the
        current step already shape the path.
        """
        if self.get_current_step() is None:
            return False

        if not self.commit_current():
            return False

        target = self._next_index(self.current_index)
        if target is None:
            logger.debug(f"No step after {self.current_index}")
            return False

        logger.info(f"Navigating: Step {self.current_index} → {target}")
        return self._navigate_to(target)

    def previous_step(self) -> bool:
        """Move back. Never validates and never merges."""
        target = self._previous_index(self.current_index)
        if target is None:
            logger.debug(f"Cannot go previous from step {self.current_index}")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {target}")
        return self._navigate_to(target)

    def goto_step(self, index: int) -> bool:
        """Jump to a step without validation (entry and resumption)."""
        return self._navigate_to(index)

    def _navigate_to(self, new_index: int) -> bool:
        if new_index < 0 or new_index >= len(self.steps):
            logger.error(f"Invalid step index: {new_index} (valid range: 0-{len(self.steps)-1})")
            return False

        old_index = self.current_index

        current_step = self.get_current_step()
        if current_step is not None and new_index != old_index:
            current_step.on_hide()

        self.current_index = new_index
        self.context.current_step_index = new_index

        new_step = self.get_current_step()
        logger.debug(f"Showing step {new_index}: {new_step.get_step_title()}")
        new_step.on_show()

        self.step_changed.emit(old_index, new_index)
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())
        return True

    # =========================================================================
    # Signal Handlers
    # =========================================================================

    def _on_step_validation_changed(self, is_valid: bool):
        self.can_go_next_changed.emit(self.can_go_next())
