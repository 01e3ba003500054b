# -*- coding: utf-8 -*-
"""
Services Step (rented by unit only).

Each service of the fixed vocabulary can be offered, included in the rent
or charged separately, with an optional note.
"""

from typing import Any, Dict, List

from PyQt5.QtWidgets import (
    QCheckBox, QGridLayout, QGroupBox, QLineEdit, QSpinBox
)

from models.property_draft import ServiceKind, ServiceOffering
from services.translation_manager import tr
from services.wizard.step_validator import StepValidationResult, StepValidator
from ui.wizards.framework import BaseStep
from ui.wizards.property_submission.submission_context import SubmissionContext

SERVICE_GROUPS = (
    ("food", (ServiceKind.BREAKFAST, ServiceKind.LUNCH, ServiceKind.DINNER)),
    ("utilities", (ServiceKind.WIFI, ServiceKind.UTILITIES)),
    ("other", (ServiceKind.LAUNDRY, ServiceKind.HOUSEKEEPING)),
)


class _ServiceRow:
    """Widgets of one service line."""

    def __init__(self, kind: ServiceKind, grid: QGridLayout, row: int):
        self.kind = kind
        self.offered = QCheckBox(tr(f"service.{kind.value}"))
        self.included = QCheckBox(tr("service.included"))
        self.cost = QSpinBox()
        self.cost.setRange(0, 10000000)
        self.cost.setSingleStep(10000)
        self.cost.setPrefix("$ ")
        self.note = QLineEdit()
        self.note.setPlaceholderText(tr("field.note.placeholder"))

        grid.addWidget(self.offered, row, 0)
        grid.addWidget(self.included, row, 1)
        grid.addWidget(self.cost, row, 2)
        grid.addWidget(self.note, row, 3)

        self.offered.toggled.connect(self._sync_enabled)
        self.included.toggled.connect(self._sync_enabled)
        self._sync_enabled()

    def _sync_enabled(self, *args):
        offered = self.offered.isChecked()
        self.included.setEnabled(offered)
        self.note.setEnabled(offered)
        # A surcharge only makes sense when the service is not included
        self.cost.setEnabled(offered and not self.included.isChecked())

    def load(self, offering: ServiceOffering = None):
        self.offered.setChecked(offering is not None)
        self.included.setChecked(offering.is_included if offering else True)
        self.cost.setValue((offering.additional_cost or 0) if offering else 0)
        self.note.setText((offering.description or "") if offering else "")
        self._sync_enabled()

    def offering(self) -> ServiceOffering:
        included = self.included.isChecked()
        return ServiceOffering(
            service_type=self.kind,
            is_included=included,
            additional_cost=None if included else self.cost.value(),
            description=self.note.text().strip() or None,
        )


class ServicesStep(BaseStep):
    """Step 3: services offered to tenants."""

    context: SubmissionContext

    def setup_ui(self):
        self.rows: Dict[ServiceKind, _ServiceRow] = {}

        for group_key, kinds in SERVICE_GROUPS:
            box = QGroupBox(tr(f"service.group.{group_key}"))
            grid = QGridLayout(box)
            grid.setColumnStretch(3, 1)
            for row, kind in enumerate(kinds):
                self.rows[kind] = _ServiceRow(kind, grid, row)
            self.main_layout.addWidget(box)

        self.main_layout.addStretch()

    def set_service(self, kind: ServiceKind, offered: bool, included: bool = True,
                    cost: int = 0, note: str = ""):
        row = self.rows[kind]
        row.offered.setChecked(offered)
        row.included.setChecked(included)
        row.cost.setValue(cost)
        row.note.setText(note)

    def _offerings(self) -> List[ServiceOffering]:
        return [row.offering() for row in self.rows.values() if row.offered.isChecked()]

    def populate_data(self):
        current = {s.service_type: s for s in self.context.draft.services}
        for kind, row in self.rows.items():
            row.load(current.get(kind))

    def validate(self) -> StepValidationResult:
        return StepValidator.validate_services(self._offerings())

    def collect_data(self) -> Dict[str, Any]:
        return {"services": self._offerings()}

    def get_step_title(self) -> str:
        return tr("step.services.title")

    def get_step_description(self) -> str:
        return tr("step.services.description")
