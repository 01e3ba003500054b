# -*- coding: utf-8 -*-
"""
Unit Dialog - add or edit one rentable unit of a container.
"""

from typing import Dict, List, Optional

from PyQt5.QtWidgets import (
    QCheckBox, QComboBox, QDialog, QFileDialog, QFormLayout, QGridLayout,
    QGroupBox, QHBoxLayout, QLabel, QLineEdit, QListWidget, QPushButton,
    QSpinBox, QTextEdit, QVBoxLayout, QWidget
)

from app.config import Config
from models.reference_data import Amenity
from models.unit import RoomType, UnitDraft
from services.translation_manager import tr
from services.wizard.step_validator import (
    UNIT_BEDS_MAX, UNIT_BEDS_MIN, UNIT_TITLE_MAX,
    StepValidationResult, StepValidator
)
from utils.logger import get_logger

logger = get_logger(__name__)

AMENITY_COLUMNS = 3


class UnitDialog(QDialog):
    """
    Dialog for creating or editing a unit draft.

    The unit is validated on save; errors are shown next to their fields
    and the dialog stays open until the unit is valid.
    """

    def __init__(self, amenities: List[Amenity], unit: Optional[UnitDraft] = None, parent=None):
        super().__init__(parent)
        self._amenities = amenities
        self._unit = unit.copy() if unit else None
        self._field_errors: Dict[str, QLabel] = {}

        self.setModal(True)
        self.setMinimumWidth(560)
        self.setWindowTitle(tr("unit_dialog.title.edit" if unit else "unit_dialog.title.add"))

        self._setup_ui()
        if self._unit:
            self._load_unit(self._unit)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        form = QFormLayout()
        form.setSpacing(10)

        self.title_input = QLineEdit()
        self.title_input.setMaxLength(UNIT_TITLE_MAX)
        self.title_input.setPlaceholderText(tr("unit_dialog.title.placeholder"))
        form.addRow(tr("field.title"), self._with_error("title", self.title_input))

        self.description_input = QTextEdit()
        self.description_input.setFixedHeight(80)
        form.addRow(tr("field.description"), self.description_input)

        self.rent_spin = self._money_spin()
        form.addRow(tr("unit.monthly_rent"), self._with_error("monthly_rent", self.rent_spin))

        self.deposit_spin = self._money_spin()
        form.addRow(tr("unit.deposit"), self._with_error("deposit", self.deposit_spin))

        self.area_spin = QSpinBox()
        self.area_spin.setRange(0, 100000)
        self.area_spin.setSpecialValueText(tr("unit.area.unknown"))
        self.area_spin.setSuffix(" m²")
        form.addRow(tr("unit.area"), self._with_error("area", self.area_spin))

        self.room_type_combo = QComboBox()
        for room_type in RoomType:
            self.room_type_combo.addItem(tr(f"room_type.{room_type.value}"), room_type)
        self.room_type_combo.currentIndexChanged.connect(self._on_room_type_changed)
        form.addRow(tr("unit.room_type"), self._with_error("room_type", self.room_type_combo))

        self.beds_spin = QSpinBox()
        self.beds_spin.setRange(UNIT_BEDS_MIN, UNIT_BEDS_MAX)
        form.addRow(tr("unit.beds"), self._with_error("beds_in_room", self.beds_spin))

        layout.addLayout(form)

        amenities_box = QGroupBox(tr("unit.amenities"))
        grid = QGridLayout(amenities_box)
        self.amenity_checks: Dict[int, QCheckBox] = {}
        for index, amenity in enumerate(self._amenities):
            label = f"{amenity.icon}  {amenity.name}" if amenity.icon else amenity.name
            check = QCheckBox(label)
            grid.addWidget(check, index // AMENITY_COLUMNS, index % AMENITY_COLUMNS)
            self.amenity_checks[amenity.id] = check
        if not self._amenities:
            grid.addWidget(QLabel(tr("unit.amenities.empty")), 0, 0)
        layout.addWidget(amenities_box)

        images_box = QGroupBox(tr("unit.images"))
        images_layout = QVBoxLayout(images_box)
        self.images_list = QListWidget()
        self.images_list.setFixedHeight(90)
        images_layout.addWidget(self.images_list)

        image_row = QHBoxLayout()
        self.image_url_input = QLineEdit()
        self.image_url_input.setPlaceholderText(tr("gallery.url.placeholder"))
        self.image_url_input.returnPressed.connect(self._on_add_image_url)
        add_url_btn = QPushButton(tr("button.add"))
        add_url_btn.clicked.connect(self._on_add_image_url)
        browse_btn = QPushButton(tr("gallery.browse"))
        browse_btn.clicked.connect(self._on_browse_images)
        remove_btn = QPushButton(tr("button.remove"))
        remove_btn.clicked.connect(self._on_remove_image)
        image_row.addWidget(self.image_url_input, 1)
        image_row.addWidget(add_url_btn)
        image_row.addWidget(browse_btn)
        image_row.addWidget(remove_btn)
        images_layout.addLayout(image_row)
        images_layout.addWidget(self._error_label("images"))
        layout.addWidget(images_box)

        buttons = QHBoxLayout()
        buttons.addStretch()
        cancel_btn = QPushButton(tr("wizard.button.cancel"))
        cancel_btn.clicked.connect(self.reject)
        self.save_btn = QPushButton(tr("button.save"))
        self.save_btn.setDefault(True)
        self.save_btn.setStyleSheet(
            f"QPushButton {{ background-color: {Config.PRIMARY_COLOR}; color: white;"
            "border-radius: 6px; padding: 6px 20px; }"
        )
        self.save_btn.clicked.connect(self._on_save)
        buttons.addWidget(cancel_btn)
        buttons.addWidget(self.save_btn)
        layout.addLayout(buttons)

        self._on_room_type_changed()

    def _money_spin(self) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(0, 100000000)
        spin.setSingleStep(10000)
        spin.setPrefix("$ ")
        return spin

    def _error_label(self, field_name: str) -> QLabel:
        label = QLabel()
        label.setWordWrap(True)
        label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 12px;")
        label.hide()
        self._field_errors[field_name] = label
        return label

    def _with_error(self, field_name: str, widget) -> QWidget:
        """Wrap a form widget with the label its validation message goes to."""
        container = QWidget()
        column = QVBoxLayout(container)
        column.setContentsMargins(0, 0, 0, 0)
        column.setSpacing(2)
        column.addWidget(widget)
        column.addWidget(self._error_label(field_name))
        return container

    def _on_room_type_changed(self, *args):
        # A shared room holds at least two beds
        if self.room_type_combo.currentData() == RoomType.SHARED and self.beds_spin.value() < 2:
            self.beds_spin.setValue(2)

    # ==================== Images ====================

    def add_image(self, url: str) -> bool:
        url = url.strip()
        if not url or self.images_list.count() >= Config.MAX_UNIT_IMAGES:
            return False
        self.images_list.addItem(url)
        return True

    def _on_add_image_url(self):
        if self.add_image(self.image_url_input.text()):
            self.image_url_input.clear()

    def _on_browse_images(self):
        paths, _ = QFileDialog.getOpenFileNames(
            self, tr("gallery.browse"), "", "Images (*.png *.jpg *.jpeg *.webp)"
        )
        for path in paths:
            if not self.add_image(path):
                break

    def _on_remove_image(self):
        row = self.images_list.currentRow()
        if row >= 0:
            self.images_list.takeItem(row)

    def _images(self) -> List[str]:
        return [self.images_list.item(i).text() for i in range(self.images_list.count())]

    # ==================== Load / Save ====================

    def _load_unit(self, unit: UnitDraft):
        self.title_input.setText(unit.title)
        self.description_input.setPlainText(unit.description)
        self.rent_spin.setValue(unit.monthly_rent or 0)
        self.deposit_spin.setValue(unit.deposit or 0)
        self.area_spin.setValue(unit.area or 0)
        if unit.room_type is not None:
            self.room_type_combo.setCurrentIndex(self.room_type_combo.findData(unit.room_type))
        self.beds_spin.setValue(unit.beds_in_room or UNIT_BEDS_MIN)
        for amenity_id, check in self.amenity_checks.items():
            check.setChecked(amenity_id in unit.amenities)
        self.images_list.clear()
        self.images_list.addItems(unit.images)

    def unit(self) -> UnitDraft:
        """The unit as currently entered in the form."""
        unit = UnitDraft(
            title=self.title_input.text().strip(),
            description=self.description_input.toPlainText().strip(),
            monthly_rent=self.rent_spin.value() or None,
            deposit=self.deposit_spin.value(),
            area=self.area_spin.value() or None,
            room_type=self.room_type_combo.currentData(),
            beds_in_room=self.beds_spin.value(),
            amenities=[a for a, check in self.amenity_checks.items() if check.isChecked()],
            images=self._images(),
        )
        if self._unit:
            unit.unit_id = self._unit.unit_id
            unit.latitude = self._unit.latitude
            unit.longitude = self._unit.longitude
        return unit

    def show_field_errors(self, result: StepValidationResult):
        for field_name, label in self._field_errors.items():
            message = result.field_errors.get(field_name)
            label.setText(message or "")
            label.setVisible(bool(message))

    def _on_save(self):
        result = StepValidator.validate_unit(self.unit())
        self.show_field_errors(result)
        if not result.is_valid:
            logger.debug(f"Unit form invalid: {sorted(result.field_errors)}")
            return
        self.accept()
