# -*- coding: utf-8 -*-
"""
Type Selection Step - first step of the Property Submission Wizard.

One card per container classification; picking a card selects it and
advances immediately.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QButtonGroup, QHBoxLayout, QPushButton

from app.config import Config
from models.property_draft import CONTAINER_PROPERTY_TYPES
from services.translation_manager import tr
from services.wizard.step_validator import StepValidationResult, StepValidator
from ui.wizards.framework import BaseStep
from ui.wizards.property_submission.submission_context import SubmissionContext
from utils.logger import get_logger

logger = get_logger(__name__)


class TypeSelectionStep(BaseStep):
    """Step 0: property classification."""

    context: SubmissionContext

    def setup_ui(self):
        row = QHBoxLayout()
        row.setSpacing(16)

        self.type_group = QButtonGroup(self)
        self.type_group.setExclusive(True)
        self.type_buttons: Dict[str, QPushButton] = {}

        for property_type in CONTAINER_PROPERTY_TYPES:
            button = QPushButton(
                f"{tr(f'property_type.{property_type.value}')}\n\n"
                f"{tr(f'property_type.{property_type.value}.hint')}"
            )
            button.setCheckable(True)
            button.setMinimumSize(200, 140)
            button.setStyleSheet(
                "QPushButton { border: 2px solid #E5E7EB; border-radius: 10px; padding: 12px; }"
                f"QPushButton:checked {{ border-color: {Config.PRIMARY_COLOR}; background-color: #ECFDF5; }}"
            )
            button.clicked.connect(
                lambda checked=False, value=property_type.value: self.select_type(value)
            )
            self.type_group.addButton(button)
            self.type_buttons[property_type.value] = button
            row.addWidget(button)

        self.main_layout.addLayout(row)
        self.main_layout.addStretch()

    def select_type(self, property_type: str):
        """Select a classification and ask the wizard to move on."""
        logger.info(f"Property type selected: {property_type}")
        self.context.select_property_type(property_type)
        self.step_data_changed.emit({})
        self.step_completed.emit()

    def populate_data(self):
        button = self.type_buttons.get(self.context.selected_property_type)
        if button is not None:
            button.setChecked(True)

    def validate(self) -> StepValidationResult:
        return StepValidator.validate_property_type(self.context.selected_property_type)

    def collect_data(self) -> Dict[str, Any]:
        # The classification lives on the context; the draft's type id follows it
        return {}

    def get_step_title(self) -> str:
        return tr("step.type_selection.title")

    def get_step_description(self) -> str:
        return tr("step.type_selection.description")
