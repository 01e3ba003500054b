# -*- coding: utf-8 -*-
"""
Unit Builder Step.

Ordered list of rentable units. A container rented by unit needs at least
one; a complete-mode container is described by exactly one unit that
stands for the whole property.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import (
    QAbstractItemView, QDialog, QHBoxLayout, QHeaderView, QLabel, QPushButton,
    QTableWidget, QTableWidgetItem
)

from models.property_draft import RentalMode
from models.unit import UnitDraft
from services.translation_manager import tr
from services.wizard.step_validator import StepValidationResult
from services.wizard.unit_list_editor import UnitListEditor
from ui.wizards.framework import BaseStep
from ui.wizards.property_submission.dialogs import UnitDialog
from ui.wizards.property_submission.submission_context import SubmissionContext

COLUMNS = ("unit.column.title", "unit.column.rent", "unit.column.room_type",
           "unit.column.beds", "unit.column.images")


def _money(value) -> str:
    return "-" if value is None else f"$ {value:,}"


class UnitBuilderStep(BaseStep):
    """Step 6: units of the container."""

    context: SubmissionContext

    def setup_ui(self):
        self.editor = UnitListEditor(self.context.draft.units, self.context.rental_mode)

        self.mode_hint = QLabel()
        self.mode_hint.setWordWrap(True)
        self.main_layout.addWidget(self.mode_hint)

        self.units_table = QTableWidget(0, len(COLUMNS))
        self.units_table.setHorizontalHeaderLabels([tr(key) for key in COLUMNS])
        self.units_table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.units_table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.units_table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.units_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.units_table.setMinimumHeight(220)
        self.units_table.itemSelectionChanged.connect(self._update_buttons)
        self.units_table.cellDoubleClicked.connect(lambda row, col: self._on_edit_unit())
        self.main_layout.addWidget(self.units_table)

        buttons = QHBoxLayout()
        self.add_btn = QPushButton(tr("unit.button.add"))
        self.add_btn.clicked.connect(self._on_add_unit)
        self.edit_btn = QPushButton(tr("unit.button.edit"))
        self.edit_btn.clicked.connect(self._on_edit_unit)
        self.remove_btn = QPushButton(tr("button.remove"))
        self.remove_btn.clicked.connect(self._on_remove_unit)
        buttons.addWidget(self.add_btn)
        buttons.addWidget(self.edit_btn)
        buttons.addWidget(self.remove_btn)
        buttons.addStretch()
        self.main_layout.addLayout(buttons)

        self.summary_label = QLabel()
        self.main_layout.addWidget(self.summary_label)
        self.main_layout.addStretch()

    # ==================== List operations ====================

    def add_unit(self, unit: UnitDraft) -> StepValidationResult:
        result = self.editor.add(unit)
        self._after_change(result)
        return result

    def replace_unit(self, index: int, unit: UnitDraft) -> StepValidationResult:
        result = self.editor.replace(index, unit)
        self._after_change(result)
        return result

    def remove_unit(self, index: int) -> UnitDraft:
        removed = self.editor.remove(index)
        self._after_change()
        return removed

    def _after_change(self, result: StepValidationResult = None):
        if result is not None and not result.is_valid:
            self.show_errors(result)
            return
        self.clear_errors()
        self._refresh()

    def _selected_row(self) -> int:
        rows = self.units_table.selectionModel().selectedRows()
        return rows[0].row() if rows else -1

    def _open_dialog(self, unit: UnitDraft = None):
        dialog = UnitDialog(self.context.reference_data.amenities, unit, parent=self)
        if dialog.exec_() == QDialog.Accepted:
            return dialog.unit()
        return None

    def _on_add_unit(self):
        if not self.editor.can_add():
            return
        unit = self._open_dialog()
        if unit is not None:
            self.add_unit(unit)

    def _on_edit_unit(self):
        row = self._selected_row()
        if row < 0:
            return
        unit = self._open_dialog(self.editor.get(row))
        if unit is not None:
            self.replace_unit(row, unit)

    def _on_remove_unit(self):
        row = self._selected_row()
        if row >= 0:
            self.remove_unit(row)

    # ==================== Rendering ====================

    def _refresh(self):
        units = self.editor.units
        self.units_table.setRowCount(len(units))
        for row, unit in enumerate(units):
            room_type = tr(f"room_type.{unit.room_type.value}") if unit.room_type else "-"
            values = (unit.display_title, _money(unit.monthly_rent), room_type,
                      str(unit.beds_in_room), str(len(unit.images)))
            for column, value in enumerate(values):
                self.units_table.setItem(row, column, QTableWidgetItem(value))

        complete = self.editor.rental_mode == RentalMode.COMPLETE
        self.mode_hint.setText(tr("unit.hint.complete" if complete else "unit.hint.by_unit"))

        summary = self.editor.summary()
        if summary is None:
            self.summary_label.setText(tr("unit.summary.empty"))
        else:
            self.summary_label.setText(tr(
                "unit.summary",
                count=summary.count,
                average=_money(summary.average),
                minimum=_money(summary.minimum),
                maximum=_money(summary.maximum),
            ))
        self._update_buttons()

    def _update_buttons(self):
        has_selection = self._selected_row() >= 0
        self.add_btn.setEnabled(self.editor.can_add())
        self.edit_btn.setEnabled(has_selection)
        self.remove_btn.setEnabled(has_selection)

    # ==================== BaseStep ====================

    def populate_data(self):
        self.editor = UnitListEditor(self.context.draft.units, self.context.rental_mode)
        self._refresh()

    def validate(self) -> StepValidationResult:
        return self.editor.validate()

    def collect_data(self) -> Dict[str, Any]:
        return {"units": self.editor.units}

    def get_step_title(self) -> str:
        return tr("step.unit_builder.title")

    def get_step_description(self) -> str:
        return tr("step.unit_builder.description")
