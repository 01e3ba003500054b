# -*- coding: utf-8 -*-
"""
Property Submission Wizard Package.

This package contains:
- SubmissionContext: Wizard context holding the container draft
- PropertySubmissionWizard: Main wizard class
- Steps: Individual wizard steps (type, basic info, location, ...)
- Dialogs: Unit editor dialog
"""

from .submission_context import SubmissionContext
from .property_submission_wizard import PropertySubmissionWizard

__all__ = [
    'SubmissionContext',
    'PropertySubmissionWizard'
]
