# -*- coding: utf-8 -*-
"""
Media Gallery Step - last step of the Property Submission Wizard.

Collects the container's own gallery (image URLs or local paths). The
submit button only becomes active once the gallery holds an image; a
failed submission is reported here and the user stays on this step.
"""

from typing import Any, Dict, List

from PyQt5.QtWidgets import (
    QFileDialog, QHBoxLayout, QLabel, QLineEdit, QListWidget, QPushButton
)

from app.config import Config
from services.translation_manager import tr
from services.wizard.step_validator import StepValidationResult, StepValidator
from ui.wizards.framework import BaseStep
from ui.wizards.property_submission.submission_context import SubmissionContext


class MediaGalleryStep(BaseStep):
    """Step 7: container gallery."""

    context: SubmissionContext

    # Set while the submission runs; the gallery is read-only then
    _locked = False

    def setup_ui(self):
        self.images_list = QListWidget()
        self.images_list.setMinimumHeight(200)
        self.images_list.currentRowChanged.connect(self._update_buttons)
        self.main_layout.addWidget(self.images_list)

        row = QHBoxLayout()
        self.url_input = QLineEdit()
        self.url_input.setPlaceholderText(tr("gallery.url.placeholder"))
        self.url_input.returnPressed.connect(self._on_add_url)
        self.add_btn = QPushButton(tr("button.add"))
        self.add_btn.clicked.connect(self._on_add_url)
        self.browse_btn = QPushButton(tr("gallery.browse"))
        self.browse_btn.clicked.connect(self._on_browse)
        self.remove_btn = QPushButton(tr("button.remove"))
        self.remove_btn.clicked.connect(self._on_remove)
        row.addWidget(self.url_input, 1)
        row.addWidget(self.add_btn)
        row.addWidget(self.browse_btn)
        row.addWidget(self.remove_btn)
        self.main_layout.addLayout(row)

        self.count_label = QLabel()
        self.count_label.setStyleSheet(f"color: {Config.TEXT_MUTED};")
        self.main_layout.addWidget(self.count_label)

        self.submit_error_label = QLabel()
        self.submit_error_label.setObjectName("submitError")
        self.submit_error_label.setWordWrap(True)
        self.submit_error_label.setStyleSheet(
            f"color: {Config.ERROR_COLOR}; background-color: #FEF2F2;"
            "border: 1px solid #FECACA; border-radius: 6px; padding: 8px;"
        )
        self.submit_error_label.hide()
        self.main_layout.addWidget(self.submit_error_label)
        self.main_layout.addStretch()

    # ==================== Gallery ====================

    def images(self) -> List[str]:
        return [self.images_list.item(i).text() for i in range(self.images_list.count())]

    def add_image(self, reference: str) -> bool:
        reference = reference.strip()
        if self._locked or not reference or reference in self.images():
            return False
        if self.images_list.count() >= Config.MAX_GALLERY_IMAGES:
            self.show_errors(StepValidator.validate_gallery(self.images() + [reference]))
            return False
        self.images_list.addItem(reference)
        self._changed()
        return True

    def remove_image(self, index: int):
        if not self._locked and 0 <= index < self.images_list.count():
            self.images_list.takeItem(index)
            self._changed()

    def _on_add_url(self):
        if self.add_image(self.url_input.text()):
            self.url_input.clear()

    def _on_browse(self):
        paths, _ = QFileDialog.getOpenFileNames(
            self, tr("gallery.browse"), "", "Images (*.png *.jpg *.jpeg *.webp)"
        )
        for path in paths:
            if not self.add_image(path):
                break

    def _on_remove(self):
        self.remove_image(self.images_list.currentRow())

    def _changed(self):
        self.clear_errors()
        self._update_buttons()
        self.step_data_changed.emit({"images": self.images()})

    def _update_buttons(self, *args):
        count = self.images_list.count()
        self.count_label.setText(tr("gallery.count", count=count, max=Config.MAX_GALLERY_IMAGES))
        can_add = not self._locked and count < Config.MAX_GALLERY_IMAGES
        self.url_input.setEnabled(not self._locked)
        self.add_btn.setEnabled(can_add)
        self.browse_btn.setEnabled(can_add)
        self.remove_btn.setEnabled(not self._locked and self.images_list.currentRow() >= 0)

    def set_locked(self, locked: bool):
        self._locked = locked
        self._update_buttons()

    # ==================== Submission feedback ====================

    def show_submit_error(self, message: str):
        self.submit_error_label.setText(message)
        self.submit_error_label.setVisible(bool(message))

    def clear_submit_error(self):
        self.submit_error_label.clear()
        self.submit_error_label.hide()

    # ==================== BaseStep ====================

    def populate_data(self):
        self.images_list.clear()
        self.images_list.addItems(self.context.draft.images)
        self.show_submit_error(self.context.submit_error or "")
        self._update_buttons()

    def validate(self) -> StepValidationResult:
        return StepValidator.validate_gallery(self.images())

    def collect_data(self) -> Dict[str, Any]:
        return {"images": self.images()}

    def get_step_title(self) -> str:
        return tr("step.media_gallery.title")

    def get_step_description(self) -> str:
        return tr("step.media_gallery.description")
