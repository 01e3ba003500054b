# -*- coding: utf-8 -*-
"""
Submission Controller
=====================
Terminal write of the property submission wizard, the edit-mode loader and
the reference-data fetch.

Exactly one network write happens per submit; preconditions are checked
before it and reported as failed results without touching the network.
"""

from enum import Enum
from typing import Any, Dict, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from models.property_draft import ContainerDraft, RentalMode
from models.reference_data import Amenity, City, CommonArea, ReferenceData
from services.draft_persistence import DraftPersistence
from services.exceptions import PreconditionException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionMode(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    ADMIN_CREATE = "admin_create"

    @classmethod
    def resolve(cls, property_id=None, admin_mode: bool = False) -> "SubmissionMode":
        if property_id:
            return cls.UPDATE
        if admin_mode:
            return cls.ADMIN_CREATE
        return cls.CREATE


class SubmissionController(BaseController):
    """
    Controller for submitting a container draft.

    Signals:
        submission_succeeded(object): entity id of the created/updated container
        submission_failed(str): user-facing error message
    """

    submission_succeeded = pyqtSignal(object)
    submission_failed = pyqtSignal(str)

    def __init__(self, api_client=None, draft_persistence: Optional[DraftPersistence] = None,
                 parent=None):
        super().__init__(parent)
        self._api_client = api_client
        self.draft_persistence = draft_persistence

    @property
    def api(self):
        if self._api_client is None:
            from services.api_client import get_api_client
            self._api_client = get_api_client()
        return self._api_client

    # ==================== Submit ====================

    def check_preconditions(self, payload: Dict[str, Any], mode: SubmissionMode,
                            property_id=None, target_owner_id=None):
        """Raise PreconditionException when the submit cannot be attempted."""
        if mode == SubmissionMode.ADMIN_CREATE and not target_owner_id:
            raise PreconditionException(tr("error.submit.missing_owner"), reason="missing_owner")
        if mode == SubmissionMode.UPDATE and not property_id:
            raise PreconditionException(tr("error.submit.missing_property"), reason="missing_property")
        if payload.get("rentalMode") == RentalMode.BY_UNIT.value and not payload.get("units"):
            raise PreconditionException(tr("error.submit.no_units"), reason="no_units")

    def submit(self, payload: Dict[str, Any], mode: SubmissionMode,
               property_id=None, target_owner_id=None) -> OperationResult:
        """
        Send the assembled payload.

        On success the draft snapshot is cleared before the result is
        returned. On failure the snapshot is left as it was.

        Returns:
            OperationResult with the container id as data
        """
        self._log_operation("submit", mode=mode.value, property_id=property_id,
                            units=len(payload.get("units") or []))

        try:
            self.check_preconditions(payload, mode, property_id, target_owner_id)
        except PreconditionException as e:
            logger.warning(f"Submission precondition failed: {e.reason}")
            self.operation_error.emit("submit", e.message)
            self.submission_failed.emit(e.message)
            return OperationResult.fail(message=e.message, error=e)

        if self.draft_persistence is not None:
            self.draft_persistence.in_flight = True
        try:
            result = self.execute_with_error_handling(
                "submit", self._write, payload, mode, property_id, target_owner_id
            )
        finally:
            if self.draft_persistence is not None:
                self.draft_persistence.in_flight = False

        if not result.success:
            self.submission_failed.emit(result.message)
            return result

        entity_id = _extract_id(result.data)
        if self.draft_persistence is not None:
            self.draft_persistence.clear()
        logger.info(f"Container submitted ({mode.value}): {entity_id}")
        self.submission_succeeded.emit(entity_id)
        return OperationResult.ok(data=entity_id, message=tr("success.submitted"))

    def _write(self, payload, mode, property_id, target_owner_id):
        if mode == SubmissionMode.UPDATE:
            return self.api.update_container(property_id, payload)
        if mode == SubmissionMode.ADMIN_CREATE:
            return self.api.admin_create_container(payload, target_owner_id)
        return self.api.create_container(payload)

    # ==================== Edit mode ====================

    def load_container(self, property_id) -> OperationResult:
        """Fetch an existing container and turn it into a draft."""
        result = self.execute_with_error_handling("load", self.api.get_container, property_id)
        if not result.success:
            return result
        if not result.data:
            return OperationResult.fail(message=tr("error.api.not_found"))
        draft = ContainerDraft.from_api(result.data)
        if draft.property_id is None:
            draft.property_id = str(property_id)
        return OperationResult.ok(data=draft)

    # ==================== Reference data ====================

    def fetch_reference_data(self) -> ReferenceData:
        """
        Fetch amenities, common areas and cities.

        Each list degrades to its default independently; failures are only
        logged.
        """
        data = ReferenceData.defaults()

        result = self.execute_with_error_handling("amenities", self.api.list_amenities)
        if result.success:
            data.amenities = [Amenity.from_dict(a) for a in result.data or []]
        else:
            logger.warning(f"Amenities unavailable: {result.message}")

        result = self.execute_with_error_handling("common_areas", self.api.list_common_areas)
        if result.success and result.data:
            data.common_areas = [CommonArea.from_dict(a) for a in result.data]
        elif not result.success:
            logger.warning(f"Common areas unavailable, using defaults: {result.message}")

        result = self.execute_with_error_handling("cities", self.api.list_cities)
        if result.success:
            data.cities = [City.from_dict(c) for c in result.data or []]
        else:
            logger.warning(f"Cities unavailable: {result.message}")

        return data


def _extract_id(entity: Any) -> Any:
    if isinstance(entity, dict):
        container = entity.get("container")
        if isinstance(container, dict) and "id" in container:
            return container["id"]
        return entity.get("id")
    return entity
