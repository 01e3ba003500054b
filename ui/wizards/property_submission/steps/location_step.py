# -*- coding: utf-8 -*-
"""
Location Step.

Address, city, coordinates and nearby institutions. Coordinates are entered
directly (map rendering belongs to the embedding application); every unit
of the container inherits them at submission time. When the city
directory could not be fetched the city is entered by id.
"""

from typing import Any, Dict, List, Optional

from PyQt5.QtWidgets import (
    QAbstractItemView, QComboBox, QDoubleSpinBox, QFormLayout, QGroupBox,
    QHBoxLayout, QHeaderView, QLineEdit, QPushButton, QSpinBox, QTableWidget,
    QTableWidgetItem, QVBoxLayout
)

from models.property_draft import LocationInfo, NearbyInstitution
from services.translation_manager import tr
from services.wizard.step_validator import StepValidationResult, StepValidator
from ui.wizards.framework import BaseStep
from ui.wizards.property_submission.submission_context import SubmissionContext


class LocationStep(BaseStep):
    """Step 2: where the container is."""

    context: SubmissionContext

    def setup_ui(self):
        form = QFormLayout()
        form.setSpacing(12)

        city_row = QHBoxLayout()
        self.city_combo = QComboBox()
        # Used instead of the combo while the city directory is unavailable
        self.manual_city_spin = QSpinBox()
        self.manual_city_spin.setRange(0, 999999)
        self.manual_city_spin.setSpecialValueText(tr("field.city.manual"))
        self.manual_city_spin.setToolTip(tr("field.city.manual.hint"))
        city_row.addWidget(self.city_combo, 1)
        city_row.addWidget(self.manual_city_spin, 1)
        form.addRow(tr("field.city"), city_row)

        self.street_input = QLineEdit()
        self.street_input.setPlaceholderText(tr("field.street.placeholder"))
        form.addRow(tr("field.street"), self.street_input)

        self.neighborhood_input = QLineEdit()
        form.addRow(tr("field.neighborhood"), self.neighborhood_input)

        coordinates = QHBoxLayout()
        self.latitude_spin = QDoubleSpinBox()
        self.latitude_spin.setRange(-90.0, 90.0)
        self.latitude_spin.setDecimals(6)
        self.longitude_spin = QDoubleSpinBox()
        self.longitude_spin.setRange(-180.0, 180.0)
        self.longitude_spin.setDecimals(6)
        coordinates.addWidget(self.latitude_spin)
        coordinates.addWidget(self.longitude_spin)
        form.addRow(tr("field.coordinates"), coordinates)

        self.main_layout.addLayout(form)

        institutions_box = QGroupBox(tr("field.nearby_institutions"))
        box_layout = QVBoxLayout(institutions_box)

        self.institutions_table = QTableWidget(0, 2)
        self.institutions_table.setHorizontalHeaderLabels([
            tr("field.institution_id"), tr("field.distance")
        ])
        self.institutions_table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.institutions_table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.institutions_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.institutions_table.setMinimumHeight(140)
        box_layout.addWidget(self.institutions_table)

        add_row = QHBoxLayout()
        self.institution_id_spin = QSpinBox()
        self.institution_id_spin.setRange(1, 999999)
        self.distance_spin = QSpinBox()
        self.distance_spin.setRange(0, 100000)
        self.distance_spin.setSpecialValueText(tr("field.distance.unknown"))
        self.distance_spin.setSuffix(" m")
        self.add_institution_btn = QPushButton(tr("button.add"))
        self.add_institution_btn.clicked.connect(self._on_add_institution)
        self.remove_institution_btn = QPushButton(tr("button.remove"))
        self.remove_institution_btn.clicked.connect(self._on_remove_institution)
        add_row.addWidget(self.institution_id_spin)
        add_row.addWidget(self.distance_spin)
        add_row.addWidget(self.add_institution_btn)
        add_row.addWidget(self.remove_institution_btn)
        box_layout.addLayout(add_row)

        self.main_layout.addWidget(institutions_box)
        self.main_layout.addStretch()

        self._institutions: List[NearbyInstitution] = []
        self._manual_city = False
        self.apply_reference_data()

    # ---------------------------------------------------------------------
    # Reference data
    # ---------------------------------------------------------------------

    def apply_reference_data(self):
        """Refill the city list, keeping the current choice."""
        if not hasattr(self, "city_combo"):
            return
        selected = self._selected_city_id()
        if selected is None:
            selected = self.context.draft.location.city_id
        self._fill_cities(selected)

    def _fill_cities(self, selected: Optional[int]):
        self.city_combo.blockSignals(True)
        self.city_combo.clear()
        self.city_combo.addItem(tr("field.city.placeholder"), None)
        for city in self.context.reference_data.cities:
            self.city_combo.addItem(city.name, city.id)
        if selected is not None and self.city_combo.findData(selected) < 0:
            # City not in the directory (yet); keep the stored id selectable
            self.city_combo.addItem(tr("field.city.unknown", id=selected), selected)
        self._select_city(selected)
        self.city_combo.blockSignals(False)

        self._manual_city = not self.context.reference_data.cities
        self.city_combo.setVisible(not self._manual_city)
        self.manual_city_spin.setVisible(self._manual_city)
        self.manual_city_spin.setValue(selected or 0)

    def _select_city(self, city_id: Optional[int]):
        index = self.city_combo.findData(city_id) if city_id is not None else 0
        self.city_combo.setCurrentIndex(max(index, 0))

    def _selected_city_id(self) -> Optional[int]:
        if self._manual_city:
            return self.manual_city_spin.value() or None
        if self.city_combo.count() == 0:
            return None
        return self.city_combo.currentData()

    def _department_for(self, city_id: Optional[int]) -> Optional[int]:
        for city in self.context.reference_data.cities:
            if city.id == city_id:
                return city.department_id
        return self.context.draft.location.department_id

    # ---------------------------------------------------------------------
    # Nearby institutions
    # ---------------------------------------------------------------------

    def add_institution(self, institution_id: int, distance: Optional[int] = None):
        self._institutions = [i for i in self._institutions if i.institution_id != institution_id]
        self._institutions.append(NearbyInstitution(institution_id, distance))
        self._refresh_institutions()

    def _on_add_institution(self):
        self.add_institution(self.institution_id_spin.value(), self.distance_spin.value() or None)

    def _on_remove_institution(self):
        row = self.institutions_table.currentRow()
        if 0 <= row < len(self._institutions):
            del self._institutions[row]
            self._refresh_institutions()

    def _refresh_institutions(self):
        self.institutions_table.setRowCount(len(self._institutions))
        for row, institution in enumerate(self._institutions):
            self.institutions_table.setItem(row, 0, QTableWidgetItem(str(institution.institution_id)))
            distance = "-" if institution.distance is None else f"{institution.distance} m"
            self.institutions_table.setItem(row, 1, QTableWidgetItem(distance))

    # ---------------------------------------------------------------------
    # BaseStep
    # ---------------------------------------------------------------------

    def populate_data(self):
        location = self.context.draft.location
        self._fill_cities(location.city_id)
        self.street_input.setText(location.street or "")
        self.neighborhood_input.setText(location.neighborhood or "")
        self.latitude_spin.setValue(location.latitude or 0.0)
        self.longitude_spin.setValue(location.longitude or 0.0)
        self._institutions = [
            NearbyInstitution(i.institution_id, i.distance) for i in location.nearby_institutions
        ]
        self._refresh_institutions()

    def _location(self) -> LocationInfo:
        city_id = self._selected_city_id()
        return LocationInfo(
            street=self.street_input.text().strip() or None,
            neighborhood=self.neighborhood_input.text().strip() or None,
            city_id=city_id,
            department_id=self._department_for(city_id),
            latitude=self.latitude_spin.value(),
            longitude=self.longitude_spin.value(),
            nearby_institutions=list(self._institutions),
        )

    def validate(self) -> StepValidationResult:
        return StepValidator.validate_location(self._location())

    def collect_data(self) -> Dict[str, Any]:
        return {"location": self._location()}

    def get_step_title(self) -> str:
        return tr("step.location.title")

    def get_step_description(self) -> str:
        return tr("step.location.description")
