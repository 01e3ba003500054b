# -*- coding: utf-8 -*-
"""Common Areas Step (rented by unit only)."""

from typing import Any, Dict, List

from PyQt5.QtWidgets import QCheckBox, QGridLayout, QWidget

from services.translation_manager import tr
from services.wizard.step_validator import StepValidationResult, StepValidator
from ui.wizards.framework import BaseStep
from ui.wizards.property_submission.submission_context import SubmissionContext

COLUMNS = 2


class CommonAreasStep(BaseStep):
    """Step 5: shared spaces of the container; at least one is required."""

    context: SubmissionContext

    def setup_ui(self):
        self.areas_widget = QWidget()
        self.areas_grid = QGridLayout(self.areas_widget)
        self.areas_grid.setSpacing(10)
        self.main_layout.addWidget(self.areas_widget)
        self.main_layout.addStretch()

        self.checkboxes: Dict[int, QCheckBox] = {}
        self.apply_reference_data()

    def apply_reference_data(self):
        """Rebuild the checkbox grid from the context's common areas."""
        if not hasattr(self, "areas_grid"):
            return
        selected = set(self.selected_ids()) or set(self.context.draft.common_area_ids)

        for checkbox in self.checkboxes.values():
            self.areas_grid.removeWidget(checkbox)
            checkbox.deleteLater()
        self.checkboxes = {}

        for index, area in enumerate(self.context.reference_data.common_areas):
            label = f"{area.icon}  {area.name}" if area.icon else area.name
            checkbox = QCheckBox(label)
            checkbox.setChecked(area.id in selected)
            self.areas_grid.addWidget(checkbox, index // COLUMNS, index % COLUMNS)
            self.checkboxes[area.id] = checkbox

    def set_selected(self, area_ids: List[int]):
        for area_id, checkbox in self.checkboxes.items():
            checkbox.setChecked(area_id in area_ids)

    def selected_ids(self) -> List[int]:
        return [area_id for area_id, checkbox in self.checkboxes.items() if checkbox.isChecked()]

    def populate_data(self):
        self.set_selected(self.context.draft.common_area_ids)

    def validate(self) -> StepValidationResult:
        return StepValidator.validate_common_areas(self.selected_ids())

    def collect_data(self) -> Dict[str, Any]:
        return {"common_area_ids": self.selected_ids()}

    def get_step_title(self) -> str:
        return tr("step.common_areas.title")

    def get_step_description(self) -> str:
        return tr("step.common_areas.description")
