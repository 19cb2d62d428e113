"""
Wizard State Machine: Upload -> Refine -> Results.

Decides when the AI gateway is called and when a held result is reused.
Extraction is skipped when the submitted criteria equal the held ones; the
advice call always runs. Each submission is only accepted from its own step
(criteria from Upload, profile edits from Refine). A failed call leaves the
step unchanged, clears the busy flag and sets a user-visible notice. Calls
resolving after a restart are discarded.
"""

from typing import Optional

from career_path_ai.errors import GatewayError, InputValidationError, WizardBusyError, WizardStepError
from career_path_ai.schemas.criteria import JobSearchCriteria
from career_path_ai.schemas.profile import UserProfile
from career_path_ai.services.criteria_service import build_criteria
from career_path_ai.utils.logger import get_logger
from career_path_ai.wizard.session import WizardSession, WizardStep

logger = get_logger(__name__)

EXTRACTION_FAILED_NOTICE = "Failed to process resume. Please ensure the API Key is valid and try again."
ADVICE_FAILED_NOTICE = "Failed to generate career advice. Please verify your API Key and try again."


class CareerWizard:
    """
    Single owner of a WizardSession. `gateway` is any object with async
    `extract_profile(resume_file_base64, mime_type, target_job_title, target_country)`
    and `generate_advice(profile, target_job_title, target_country)` methods
    (see agents.gateway.CareerGateway).
    """

    def __init__(self, gateway, session: Optional[WizardSession] = None):
        self.gateway = gateway
        self.session = session if session is not None else WizardSession()

    @property
    def step(self) -> WizardStep:
        return self.session.step

    @property
    def busy(self) -> bool:
        return self.session.busy

    def _ensure_idle(self, action: str) -> None:
        if self.session.busy:
            logger.warning("Rejected %s: a call is already outstanding", action)
            raise WizardBusyError(f"Cannot {action} while a request is in progress.")

    def _ensure_step(self, expected: WizardStep, action: str) -> None:
        if self.session.step != expected:
            logger.warning("Rejected %s from %s: only allowed from %s", action, self.session.step.name, expected.name)
            raise WizardStepError(f"Cannot {action} from the {self.session.step.name.title()} step.")

    def _is_stale(self, generation: int, action: str) -> bool:
        if generation != self.session.generation:
            logger.warning("Discarding %s result from before restart (generation %s)", action, generation)
            return True
        return False

    # ----- Upload -> Refine -----

    async def submit_upload(
        self,
        target_country: str,
        target_job_title: str,
        file_bytes: Optional[bytes] = None,
        mime_type: Optional[str] = None,
    ) -> bool:
        """Validate Upload form input (reusing the held file if none is given) and submit it."""
        self._ensure_idle("submit the resume")
        self._ensure_step(WizardStep.UPLOAD, "submit the resume")
        criteria = build_criteria(
            target_country,
            target_job_title,
            file_bytes=file_bytes,
            mime_type=mime_type,
            previous=self.session.criteria,
        )
        return await self.submit_criteria(criteria)

    async def submit_criteria(self, criteria: JobSearchCriteria) -> bool:
        """
        Move to Refine. Reuses the held profile when criteria are unchanged,
        otherwise runs extraction. Returns False when the call failed or its
        result was discarded.
        """
        self._ensure_idle("submit the resume")
        self._ensure_step(WizardStep.UPLOAD, "submit the resume")
        session = self.session
        if criteria.same_as(session.criteria):
            logger.info("Criteria unchanged; skipping extraction")
            session.notice = None
            session.step = WizardStep.REFINE
            return True

        generation = session.generation
        session.busy = True
        session.notice = None
        try:
            profile = await self.gateway.extract_profile(
                criteria.resume_file_base64,
                criteria.resume_mime_type,
                criteria.target_job_title,
                criteria.target_country,
            )
        except GatewayError as e:
            if self._is_stale(generation, "extraction"):
                return False
            logger.warning("Extraction failed; staying on %s: %s", session.step.name, e)
            session.busy = False
            session.notice = EXTRACTION_FAILED_NOTICE
            return False
        except Exception:
            if generation == session.generation:
                session.busy = False
            raise

        if self._is_stale(generation, "extraction"):
            return False
        session.criteria = criteria
        session.profile = profile
        session.advice = None
        session.busy = False
        session.step = WizardStep.REFINE
        logger.info("Extraction complete; moved to REFINE")
        return True

    # ----- Refine -> Results -----

    async def submit_profile(self, profile: UserProfile) -> bool:
        """
        Store the edited profile and run the advice call; always calls the
        service. Returns False when the call failed or its result was discarded.
        """
        self._ensure_idle("generate advice")
        self._ensure_step(WizardStep.REFINE, "generate advice")
        session = self.session
        if session.criteria is None:
            raise InputValidationError("Upload a resume and set a job title first.")

        criteria = session.criteria
        generation = session.generation
        session.profile = profile
        session.busy = True
        session.notice = None
        try:
            advice = await self.gateway.generate_advice(
                profile,
                criteria.target_job_title,
                criteria.target_country,
            )
        except GatewayError as e:
            if self._is_stale(generation, "advice"):
                return False
            logger.warning("Advice generation failed; staying on %s: %s", session.step.name, e)
            session.busy = False
            session.notice = ADVICE_FAILED_NOTICE
            return False
        except Exception:
            if generation == session.generation:
                session.busy = False
            raise

        if self._is_stale(generation, "advice"):
            return False
        session.advice = advice
        session.busy = False
        session.step = WizardStep.RESULTS
        logger.info("Advice complete; moved to RESULTS")
        return True

    # ----- Navigation -----

    def go_back(self) -> WizardStep:
        """REFINE -> UPLOAD, RESULTS -> REFINE; held data is kept. No AI call."""
        session = self.session
        if session.step == WizardStep.REFINE:
            session.step = WizardStep.UPLOAD
        elif session.step == WizardStep.RESULTS:
            session.step = WizardStep.REFINE
        session.notice = None
        return session.step

    def restart(self) -> None:
        """Discard criteria, profile and advice; return to UPLOAD."""
        self.session.reset()
        logger.info("Wizard restarted (generation %s)", self.session.generation)

    def dismiss_notice(self) -> None:
        self.session.notice = None
