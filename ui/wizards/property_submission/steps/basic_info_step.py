# -*- coding: utf-8 -*-
"""
Basic Info Step.

Title, description, rental mode, deposit requirement and minimum contract.
The rental mode chosen here decides whether services, rules and common
areas are asked for.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import (
    QButtonGroup, QCheckBox, QFormLayout, QHBoxLayout, QLabel, QLineEdit,
    QRadioButton, QSpinBox, QTextEdit
)

from models.property_draft import RentalMode
from services.translation_manager import tr
from services.wizard.step_validator import (
    CONTRACT_MAX_MONTHS, DESCRIPTION_MAX, TITLE_MAX, StepValidationResult, StepValidator
)
from ui.wizards.framework import BaseStep
from ui.wizards.property_submission.submission_context import SubmissionContext


class BasicInfoStep(BaseStep):
    """Step 1: basic container information."""

    context: SubmissionContext

    def setup_ui(self):
        form = QFormLayout()
        form.setSpacing(12)

        self.title_input = QLineEdit()
        self.title_input.setMaxLength(TITLE_MAX)
        self.title_input.setPlaceholderText(tr("field.title.placeholder"))
        form.addRow(tr("field.title"), self.title_input)

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText(tr("field.description.placeholder"))
        self.description_input.setMinimumHeight(120)
        self.description_input.textChanged.connect(self._update_description_counter)
        form.addRow(tr("field.description"), self.description_input)

        self.description_counter = QLabel()
        form.addRow("", self.description_counter)

        mode_row = QHBoxLayout()
        self.mode_group = QButtonGroup(self)
        self.by_unit_radio = QRadioButton(tr("rental_mode.by_unit"))
        self.complete_radio = QRadioButton(tr("rental_mode.complete"))
        self.mode_group.addButton(self.by_unit_radio)
        self.mode_group.addButton(self.complete_radio)
        mode_row.addWidget(self.by_unit_radio)
        mode_row.addWidget(self.complete_radio)
        mode_row.addStretch()
        form.addRow(tr("field.rental_mode"), mode_row)

        self.deposit_check = QCheckBox(tr("field.requires_deposit"))
        form.addRow("", self.deposit_check)

        self.contract_spin = QSpinBox()
        self.contract_spin.setRange(0, CONTRACT_MAX_MONTHS)
        # 0 means "no minimum"
        self.contract_spin.setSpecialValueText(tr("field.minimum_contract.none"))
        self.contract_spin.setSuffix(tr("field.minimum_contract.suffix"))
        form.addRow(tr("field.minimum_contract"), self.contract_spin)

        self.main_layout.addLayout(form)
        self.main_layout.addStretch()

    def _update_description_counter(self):
        length = len(self.description_input.toPlainText())
        self.description_counter.setText(f"{length}/{DESCRIPTION_MAX}")

    def _rental_mode(self):
        if self.complete_radio.isChecked():
            return RentalMode.COMPLETE
        if self.by_unit_radio.isChecked():
            return RentalMode.BY_UNIT
        return None

    def populate_data(self):
        draft = self.context.draft
        self.title_input.setText(draft.title or "")
        self.description_input.setPlainText(draft.description or "")
        if draft.rental_mode == RentalMode.COMPLETE:
            self.complete_radio.setChecked(True)
        else:
            self.by_unit_radio.setChecked(True)
        self.deposit_check.setChecked(bool(draft.requires_deposit))
        self.contract_spin.setValue(draft.minimum_contract_months or 0)

    def validate(self) -> StepValidationResult:
        return StepValidator.validate_basic_info(
            self.title_input.text(),
            self.description_input.toPlainText(),
            self._rental_mode(),
            self.contract_spin.value() or None,
        )

    def collect_data(self) -> Dict[str, Any]:
        return {
            "title": self.title_input.text().strip(),
            "description": self.description_input.toPlainText().strip(),
            "rental_mode": self._rental_mode(),
            "requires_deposit": self.deposit_check.isChecked(),
            "minimum_contract_months": self.contract_spin.value() or None,
        }

    def get_step_title(self) -> str:
        return tr("step.basic_info.title")

    def get_step_description(self) -> str:
        return tr("step.basic_info.description")
