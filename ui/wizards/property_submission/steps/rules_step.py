# -*- coding: utf-8 -*-
"""
Rules Step (rented by unit only).

Smoking and pets are allowed or not; curfew, noise and visits are
described in free text.
"""

from typing import Any, Dict, List

from PyQt5.QtWidgets import QCheckBox, QComboBox, QGridLayout, QGroupBox, QLineEdit, QWidget

from models.property_draft import HouseRule, RuleKind
from services.translation_manager import tr
from services.wizard.step_validator import StepValidationResult, StepValidator
from ui.wizards.framework import BaseStep
from ui.wizards.property_submission.submission_context import SubmissionContext


class _RuleRow:
    def __init__(self, kind: RuleKind, grid: QGridLayout, row: int):
        self.kind = kind
        self.active = QCheckBox(tr(f"rule.{kind.value}"))

        self.editor: QWidget
        if kind.takes_value:
            self.editor = QLineEdit()
            self.editor.setPlaceholderText(tr(f"rule.{kind.value}.placeholder"))
        else:
            self.editor = QComboBox()
            self.editor.addItem(tr("rule.allowed"), True)
            self.editor.addItem(tr("rule.not_allowed"), False)

        self.note = QLineEdit()
        self.note.setPlaceholderText(tr("field.note.placeholder"))

        grid.addWidget(self.active, row, 0)
        grid.addWidget(self.editor, row, 1)
        grid.addWidget(self.note, row, 2)

        self.active.toggled.connect(self._sync_enabled)
        self._sync_enabled()

    def _sync_enabled(self, *args):
        active = self.active.isChecked()
        self.editor.setEnabled(active)
        self.note.setEnabled(active)

    def load(self, rule: HouseRule = None):
        self.active.setChecked(rule is not None)
        if self.kind.takes_value:
            self.editor.setText((rule.value or "") if rule else "")
        else:
            allowed = rule.is_allowed if rule and rule.is_allowed is not None else True
            self.editor.setCurrentIndex(self.editor.findData(allowed))
        self.note.setText((rule.description or "") if rule else "")
        self._sync_enabled()

    def rule(self) -> HouseRule:
        if self.kind.takes_value:
            return HouseRule(
                rule_type=self.kind,
                value=self.editor.text().strip(),
                description=self.note.text().strip() or None,
            )
        return HouseRule(
            rule_type=self.kind,
            is_allowed=bool(self.editor.currentData()),
            description=self.note.text().strip() or None,
        )


class RulesStep(BaseStep):
    """Step 4: house rules."""

    context: SubmissionContext

    def setup_ui(self):
        box = QGroupBox(tr("step.rules.group"))
        grid = QGridLayout(box)
        grid.setColumnStretch(2, 1)

        self.rows: Dict[RuleKind, _RuleRow] = {}
        for row, kind in enumerate(RuleKind):
            self.rows[kind] = _RuleRow(kind, grid, row)

        self.main_layout.addWidget(box)
        self.main_layout.addStretch()

    def set_rule(self, kind: RuleKind, active: bool, allowed: bool = True, value: str = ""):
        row = self.rows[kind]
        row.active.setChecked(active)
        if kind.takes_value:
            row.editor.setText(value)
        else:
            row.editor.setCurrentIndex(row.editor.findData(allowed))

    def _rules(self) -> List[HouseRule]:
        return [row.rule() for row in self.rows.values() if row.active.isChecked()]

    def populate_data(self):
        current = {r.rule_type: r for r in self.context.draft.rules}
        for kind, row in self.rows.items():
            row.load(current.get(kind))

    def validate(self) -> StepValidationResult:
        return StepValidator.validate_rules(self._rules())

    def collect_data(self) -> Dict[str, Any]:
        return {"rules": self._rules()}

    def get_step_title(self) -> str:
        return tr("step.rules.title")

    def get_step_description(self) -> str:
        return tr("step.rules.description")
