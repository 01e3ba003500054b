# -*- coding: utf-8 -*-
"""
Draft persistence for the submission wizard.

The in-progress draft is cached as a JSON snapshot in a session-scoped
key/value store so that reopening the wizard in the same application
session resumes where the user left off. Edit mode never caches.
"""

import json
from dataclasses import dataclass
from typing import Dict, Optional

from app.config import Config
from models.property_draft import ContainerDraft
from services.wizard.step_transitions import WizardStep
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionStorage:
    """String key/value store that lives as long as the application process."""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str):
        self._items[key] = value

    def remove_item(self, key: str):
        self._items.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._items


_session_storage: Optional[SessionStorage] = None


def get_session_storage() -> SessionStorage:
    global _session_storage
    if _session_storage is None:
        _session_storage = SessionStorage()
    return _session_storage


def reset_session_storage():
    """Forget everything stored in this session (for tests)."""
    global _session_storage
    _session_storage = None


@dataclass
class DraftSnapshot:
    step: WizardStep
    draft: ContainerDraft
    selected_property_type: Optional[str] = None


class DraftPersistence:
    """save/load/clear of the wizard snapshot under one storage key."""

    def __init__(self, storage: Optional[SessionStorage] = None, edit_mode: bool = False,
                 key: Optional[str] = None):
        self.storage = storage if storage is not None else get_session_storage()
        self.edit_mode = edit_mode
        self.key = key or Config.DRAFT_STORAGE_KEY
        # Set while the terminal submission runs; snapshot writes are suspended
        self.in_flight = False

    def save(self, step: WizardStep, draft: ContainerDraft,
             selected_property_type: Optional[str]) -> bool:
        """Write the snapshot. Returns False when writes are suspended."""
        if self.edit_mode or self.in_flight:
            return False

        snapshot = {
            "step": int(step),
            "data": draft.to_dict(),
            "selectedPropertyType": selected_property_type,
        }
        self.storage.set_item(self.key, json.dumps(snapshot, ensure_ascii=False))
        return True

    def load(self) -> Optional[DraftSnapshot]:
        """Read the snapshot; None in edit mode, when absent, or when unreadable."""
        if self.edit_mode:
            return None

        raw = self.storage.get_item(self.key)
        if not raw:
            return None

        try:
            snapshot = json.loads(raw)
            return DraftSnapshot(
                step=WizardStep(int(snapshot["step"])),
                draft=ContainerDraft.from_dict(snapshot["data"]),
                selected_property_type=snapshot.get("selectedPropertyType"),
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Discarding unreadable draft snapshot: {e}")
            return None

    def clear(self):
        self.storage.remove_item(self.key)
        logger.debug("Draft snapshot cleared")
