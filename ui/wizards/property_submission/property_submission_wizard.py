# -*- coding: utf-8 -*-
"""
Property Submission Wizard.

Creates or edits a container (a property that may be split into rentable
units) in up to eight steps:

0. Type selection
1. Basic info
2. Location
3. Services      (rented by unit only)
4. Rules         (rented by unit only)
5. Common areas  (rented by unit only)
6. Unit builder
7. Media gallery (terminal, submits)

The in-progress draft is snapshotted after every step change and every
merge so it survives a restart of the flow; edit mode never snapshots.
"""

from typing import Callable, List, Optional, Tuple

from PyQt5.QtCore import pyqtSignal

from controllers.submission_controller import SubmissionController, SubmissionMode
from services.draft_persistence import DraftPersistence
from services.payload_assembler import assemble_payload
from services.translation_manager import tr
from services.wizard.step_transitions import StepTransitionTable, WizardStep
from services.wizard.step_validator import StepValidationResult
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep, BaseWizard
from ui.wizards.property_submission.steps import (
    BasicInfoStep, CommonAreasStep, LocationStep, MediaGalleryStep, RulesStep,
    ServicesStep, TypeSelectionStep, UnitBuilderStep
)
from ui.wizards.property_submission.submission_context import SubmissionContext
from ui.wizards.property_submission.workers import (
    ContainerLoadWorker, ReferenceDataWorker, SubmissionWorker
)
from utils.logger import get_logger

logger = get_logger(__name__)


class PropertySubmissionWizard(BaseWizard):
    """
    Wizard for publishing a container with its units.

    Signals:
        navigate_requested(str): route the host should open after a
            successful submission ("dashboard")
        submission_finished(bool): emitted once per submit attempt
        container_loaded(bool): edit mode only, once the container fetch ends
    """

    navigate_requested = pyqtSignal(str)
    submission_finished = pyqtSignal(bool)
    container_loaded = pyqtSignal(bool)

    def __init__(self, property_id: Optional[str] = None,
                 initial_property_type: Optional[str] = None,
                 admin_mode: bool = False,
                 target_owner_id=None,
                 on_admin_complete: Optional[Callable[[object], None]] = None,
                 api_client=None,
                 draft_persistence: Optional[DraftPersistence] = None,
                 fetch_reference_data: bool = True,
                 parent=None):
        # Needed by create_context(), which BaseWizard calls from its __init__
        self._property_id = property_id
        self._initial_property_type = initial_property_type
        self._admin_mode = admin_mode
        self._target_owner_id = target_owner_id
        self._on_admin_complete = on_admin_complete
        self._entry_step = WizardStep.TYPE_SELECTION
        self._disposed = False
        self._reference_worker: Optional[ReferenceDataWorker] = None
        self._load_worker: Optional[ContainerLoadWorker] = None
        self._submission_worker: Optional[SubmissionWorker] = None

        self.draft_persistence = draft_persistence or DraftPersistence()
        if property_id:
            self.draft_persistence.edit_mode = True
        self.controller = SubmissionController(
            api_client=api_client, draft_persistence=self.draft_persistence
        )

        super().__init__(parent)

        if self._property_id:
            self._start_container_load()
        if fetch_reference_data:
            self._start_reference_data_fetch()

    # =========================================================================
    # BaseWizard
    # =========================================================================

    def create_context(self) -> SubmissionContext:
        context = SubmissionContext(
            property_id=self._property_id,
            initial_property_type=self._initial_property_type,
            admin_mode=self._admin_mode,
            target_owner_id=self._target_owner_id,
        )

        if context.edit_mode:
            # The container itself arrives from ContainerLoadWorker
            self._entry_step = StepTransitionTable.entry_step(True, edit_mode=True)
            return context

        snapshot = self.draft_persistence.load()
        if snapshot is not None:
            context.replace_draft(snapshot.draft, snapshot.selected_property_type)
            self._entry_step = snapshot.step
            logger.info(f"Resuming draft at step {int(snapshot.step)}")
        else:
            self._entry_step = StepTransitionTable.entry_step(bool(self._initial_property_type))
        return context

    def create_steps(self) -> List[BaseStep]:
        # Index order must follow WizardStep
        self.type_step = TypeSelectionStep(self.context)
        self.basic_info_step = BasicInfoStep(self.context)
        self.location_step = LocationStep(self.context)
        self.services_step = ServicesStep(self.context)
        self.rules_step = RulesStep(self.context)
        self.common_areas_step = CommonAreasStep(self.context)
        self.unit_builder_step = UnitBuilderStep(self.context)
        self.media_step = MediaGalleryStep(self.context)

        steps = [
            self.type_step,
            self.basic_info_step,
            self.location_step,
            self.services_step,
            self.rules_step,
            self.common_areas_step,
            self.unit_builder_step,
            self.media_step,
        ]

        self.type_step.step_completed.connect(self._on_type_selected)
        for step in steps:
            step.step_data_changed.connect(self._on_step_data_changed)
        return steps

    def entry_step_index(self) -> int:
        return int(self._entry_step)

    def next_step_index(self, index: int) -> Optional[int]:
        if index < 0:
            return None
        target = StepTransitionTable.next_step(WizardStep(index), self.context.rental_mode)
        return None if target is None else int(target)

    def previous_step_index(self, index: int) -> Optional[int]:
        if index < 0:
            return None
        target = StepTransitionTable.previous_step(WizardStep(index), self.context.rental_mode)
        return None if target is None else int(target)

    def progress_for(self, index: int) -> Optional[Tuple[int, int]]:
        if index == WizardStep.TYPE_SELECTION:
            return None
        return StepTransitionTable.progress(WizardStep(index))

    def get_wizard_title(self) -> str:
        if self._property_id:
            return tr("wizard.title.edit")
        return tr("wizard.title")

    def get_submit_button_text(self) -> str:
        if self.context.submitting:
            return tr("wizard.button.submitting")
        return tr("wizard.button.submit")

    def can_submit(self) -> bool:
        return bool(self.context.draft.images) and not self.context.submitting

    def on_cancel(self) -> bool:
        if self.context.submitting:
            return False
        has_data = bool(self.context.draft.title or self.context.draft.units)
        if has_data and not ErrorHandler.confirm(self, tr("wizard.confirm.cancel")):
            return False
        self.context.status = "cancelled"
        logger.info("Property submission cancelled")
        return True

    # =========================================================================
    # Step events
    # =========================================================================

    def _on_type_selected(self):
        self.navigator.next_step()

    def _on_step_data_changed(self, fragment: dict):
        if fragment:
            self.context.merge_step_data(fragment)
        self._persist()
        self._update_navigation_buttons()

    def _on_step_changed(self, old_index: int, new_index: int):
        super()._on_step_changed(old_index, new_index)
        self._persist()

    def _persist(self):
        if self.context.status == "completed" or self.context.submitting:
            return
        self.draft_persistence.save(
            WizardStep(self.navigator.current_index),
            self.context.draft,
            self.context.selected_property_type,
        )

    def _show_load_error(self, message: str):
        step = self.navigator.get_current_step()
        if step is not None:
            result = StepValidationResult()
            result.add_error(message)
            step.show_errors(result)

    # =========================================================================
    # Submission
    # =========================================================================

    def on_submit(self):
        if self.context.submitting:
            return

        self.context.merge_step_data(self.media_step.collect_data())
        payload = assemble_payload(self.context.draft)
        mode = SubmissionMode.resolve(self.context.property_id, self.context.admin_mode)

        self.context.submitting = True
        self.context.submit_error = None
        self.draft_persistence.in_flight = True
        self.media_step.clear_submit_error()
        self.media_step.set_locked(True)
        self.set_navigation_locked(True)

        logger.info(f"Submitting container ({mode.value})")
        self._submission_worker = SubmissionWorker(
            self.controller, payload, mode,
            property_id=self.context.property_id,
            target_owner_id=self.context.target_owner_id,
        )
        self._submission_worker.completed.connect(self._on_submission_completed)
        self._submission_worker.start()

    def _on_submission_completed(self, result):
        self.context.submitting = False
        self.draft_persistence.in_flight = False
        self.media_step.set_locked(False)
        self.set_navigation_locked(False)
        if self._disposed:
            return

        if not result.success:
            self.context.submit_error = result.message
            self.media_step.show_submit_error(result.message)
            self.scroll_to_top()
            self.submission_finished.emit(False)
            return

        # The controller already cleared the snapshot
        self.context.status = "completed"
        entity_id = result.data
        if self.context.admin_mode and self._on_admin_complete is not None:
            self._on_admin_complete(entity_id)
        else:
            self.navigate_requested.emit("dashboard")

        self.submission_finished.emit(True)
        self.wizard_completed.emit({
            "id": entity_id,
            "mode": SubmissionMode.resolve(self.context.property_id, self.context.admin_mode).value,
            "property_type": self.context.selected_property_type,
        })

    # =========================================================================
    # Edit mode
    # =========================================================================

    def _start_container_load(self):
        # Navigation stays locked until the container is in the draft
        self.set_navigation_locked(True)
        self._load_worker = ContainerLoadWorker(self.controller, self._property_id)
        self._load_worker.completed.connect(self._on_container_loaded)
        self._load_worker.start()

    def _on_container_loaded(self, result):
        if self._disposed:
            return
        self.set_navigation_locked(False)

        if not result.success:
            self._show_load_error(result.message)
            self.container_loaded.emit(False)
            return

        self.context.replace_draft(result.data)
        logger.info(f"Editing container {self._property_id}")
        step = self.navigator.get_current_step()
        if step is not None:
            step.on_show()
        self._update_navigation_buttons()
        self.container_loaded.emit(True)

    # =========================================================================
    # Reference data
    # =========================================================================

    def _start_reference_data_fetch(self):
        self._reference_worker = ReferenceDataWorker(self.controller)
        self._reference_worker.completed.connect(self.apply_reference_data)
        self._reference_worker.start()

    def apply_reference_data(self, reference_data):
        if self._disposed:
            return
        self.context.reference_data = reference_data
        self.location_step.apply_reference_data()
        self.common_areas_step.apply_reference_data()
        logger.debug(
            f"Reference data: {len(reference_data.amenities)} amenities, "
            f"{len(reference_data.common_areas)} common areas, {len(reference_data.cities)} cities"
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def dispose(self):
        """Stop listening to background work; late results are ignored."""
        if self._disposed:
            return
        self._disposed = True
        for worker in (self._reference_worker, self._load_worker, self._submission_worker):
            if worker is not None and worker.isRunning():
                worker.wait()

    def closeEvent(self, event):
        self.dispose()
        super().closeEvent(event)
