# -*- coding: utf-8 -*-
"""
Listing Publisher Controllers
=============================
Controller layer between the wizard UI and the remote property API.

Controllers provide:
- Standardized error handling via OperationResult
- Qt signals for UI updates
- Precondition checks before any network call

Usage:
    from controllers import SubmissionController, SubmissionMode

    controller = SubmissionController(api_client)
    result = controller.submit(payload, SubmissionMode.CREATE)
    if result.success:
        print(f"Created: {result.data}")
    else:
        print(f"Error: {result.message}")
"""

from controllers.base_controller import (
    BaseController,
    OperationResult,
)

from controllers.submission_controller import (
    SubmissionController,
    SubmissionMode,
)

__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Submission
    "SubmissionController",
    "SubmissionMode",
]
