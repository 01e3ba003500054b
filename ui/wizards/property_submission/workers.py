# -*- coding: utf-8 -*-
"""Background workers of the property submission wizard."""

from typing import Any, Dict

from PyQt5.QtCore import QThread, pyqtSignal

from controllers.submission_controller import SubmissionController, SubmissionMode


class ReferenceDataWorker(QThread):
    """Fetches amenities, common areas and cities in the background."""

    completed = pyqtSignal(object)  # ReferenceData

    def __init__(self, controller: SubmissionController):
        super().__init__()
        self.controller = controller

    def run(self):
        self.completed.emit(self.controller.fetch_reference_data())


class ContainerLoadWorker(QThread):
    """Fetches the container being edited."""

    completed = pyqtSignal(object)  # OperationResult with a ContainerDraft

    def __init__(self, controller: SubmissionController, property_id):
        super().__init__()
        self.controller = controller
        self.property_id = property_id

    def run(self):
        self.completed.emit(self.controller.load_container(self.property_id))


class SubmissionWorker(QThread):
    """Runs the terminal submission off the UI thread."""

    completed = pyqtSignal(object)  # OperationResult

    def __init__(self, controller: SubmissionController, payload: Dict[str, Any],
                 mode: SubmissionMode, property_id=None, target_owner_id=None):
        super().__init__()
        self.controller = controller
        self.payload = payload
        self.mode = mode
        self.property_id = property_id
        self.target_owner_id = target_owner_id

    def run(self):
        result = self.controller.submit(
            self.payload, self.mode,
            property_id=self.property_id,
            target_owner_id=self.target_owner_id,
        )
        self.completed.emit(result)
