"""Wizard exports."""

from .session import STEP_LABELS, WizardSession, WizardStep
from .state_machine import ADVICE_FAILED_NOTICE, EXTRACTION_FAILED_NOTICE, CareerWizard

__all__ = [
    "CareerWizard",
    "WizardSession",
    "WizardStep",
    "STEP_LABELS",
    "EXTRACTION_FAILED_NOTICE",
    "ADVICE_FAILED_NOTICE",
]
