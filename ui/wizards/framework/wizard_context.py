# -*- coding: utf-8 -*-
"""
Wizard Context - state shared by the steps of one wizard instance.

The navigator folds each confirmed step's fragment into the context through
merge_step_data(); concrete contexts decide what the fragment means.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Set


class WizardContext(ABC):
    """
    Base class for wizard context.

    Lifecycle status values: draft, completed, cancelled.
    """

    def __init__(self):
        self.status: str = "draft"
        self.current_step_index: int = 0
        self.updated_at: datetime = datetime.now()

        # Steps confirmed with Next at least once
        self.confirmed_steps: Set[int] = set()

    def mark_step_completed(self, step_index: int):
        self.confirmed_steps.add(step_index)
        self.touch()

    def touch(self):
        self.updated_at = datetime.now()

    @abstractmethod
    def merge_step_data(self, fragment: Dict[str, Any]):
        """
        Merge the fragment a step yielded on confirmation.

        Called by the navigator after the step validated, before moving on.
        """
