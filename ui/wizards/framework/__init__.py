# -*- coding: utf-8 -*-
"""
Wizard Framework - base classes for multi-step wizards.

Provides consistent navigation, validation feedback and state management
for the wizards of the listing publisher.
"""

from services.wizard.step_validator import StepValidationResult

from .base_wizard import BaseWizard
from .base_step import BaseStep
from .wizard_context import WizardContext
from .step_navigator import StepNavigator

__all__ = [
    'BaseWizard',
    'BaseStep',
    'StepValidationResult',
    'WizardContext',
    'StepNavigator'
]
