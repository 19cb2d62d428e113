"""In-memory state of one wizard session."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from career_path_ai.schemas.advice import CareerAdvice
from career_path_ai.schemas.criteria import JobSearchCriteria
from career_path_ai.schemas.profile import UserProfile, create_empty_profile


class WizardStep(IntEnum):
    UPLOAD = 1
    REFINE = 2
    RESULTS = 3


STEP_LABELS = {
    WizardStep.UPLOAD: "1. Upload",
    WizardStep.REFINE: "2. Refine",
    WizardStep.RESULTS: "3. Plan",
}


@dataclass
class WizardSession:
    """
    Everything the three steps share. Owned by CareerWizard; views read it and
    hand changes back through the wizard's transitions.
    `generation` is bumped on restart so results of calls issued before the
    restart can be recognised and dropped.
    """

    step: WizardStep = WizardStep.UPLOAD
    criteria: Optional[JobSearchCriteria] = None
    profile: UserProfile = field(default_factory=create_empty_profile)
    advice: Optional[CareerAdvice] = None
    busy: bool = False
    notice: Optional[str] = None
    generation: int = 0

    def reset(self) -> None:
        """Back to the zero state, under a new generation."""
        self.step = WizardStep.UPLOAD
        self.criteria = None
        self.profile = create_empty_profile()
        self.advice = None
        self.busy = False
        self.notice = None
        self.generation += 1

    @property
    def has_uploaded_file(self) -> bool:
        return self.criteria is not None
