# -*- coding: utf-8 -*-
"""
Submission Context - state of one property submission wizard instance.

Holds the accumulated ContainerDraft, the selected property classification,
the mode flags the wizard was opened with, and the reference data used by
the option lists.
"""

from typing import Any, Dict, Optional

from models.property_draft import (
    ContainerDraft, PropertyType, RentalMode, merge_fragment, property_type_for, type_id_for
)
from models.reference_data import ReferenceData
from ui.wizards.framework import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionContext(WizardContext):
    """Context for the property submission wizard."""

    def __init__(self, property_id: Optional[str] = None,
                 initial_property_type: Optional[str] = None,
                 admin_mode: bool = False,
                 target_owner_id=None):
        super().__init__()
        self.property_id = property_id
        self.admin_mode = admin_mode
        self.target_owner_id = target_owner_id

        self.draft = ContainerDraft(property_id=property_id)
        self.selected_property_type: Optional[str] = None
        self.select_property_type(initial_property_type or PropertyType.PENSION.value)

        self.reference_data = ReferenceData.defaults()

        # Terminal submission state
        self.submitting = False
        self.submit_error: Optional[str] = None

    @property
    def edit_mode(self) -> bool:
        return bool(self.property_id)

    @property
    def rental_mode(self) -> RentalMode:
        return self.draft.rental_mode

    def select_property_type(self, property_type: Optional[str]):
        """Change the classification selector; the draft's type id follows it."""
        if isinstance(property_type, PropertyType):
            property_type = property_type.value
        self.selected_property_type = property_type
        self._sync_type()

    def _sync_type(self):
        self.draft.type_id = type_id_for(self.selected_property_type)
        self.draft.type_name = self.selected_property_type

    def merge_step_data(self, fragment: Dict[str, Any]):
        """Shallow-merge a step fragment; the type id is re-derived afterwards."""
        self.draft = merge_fragment(self.draft, fragment)
        self._sync_type()
        self.touch()
        logger.debug(f"Merged fragment: {sorted(fragment)}")

    def replace_draft(self, draft: ContainerDraft, selected_property_type: Optional[str] = None):
        """Seed the draft from a snapshot or a loaded container."""
        self.draft = draft
        if selected_property_type is None:
            selected_property_type = property_type_for(draft.type_id) or self.selected_property_type
        self.select_property_type(selected_property_type)
        if self.property_id:
            self.draft.property_id = self.property_id
