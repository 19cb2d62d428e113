"""Exception hierarchy for the CareerPath AI wizard."""


class CareerPathError(Exception):
    """Base class for all wizard errors."""


class InputValidationError(CareerPathError):
    """Required user input is missing or invalid; raised before any AI call."""


class GatewayError(CareerPathError):
    """An AI service call failed."""


class ExtractionError(GatewayError):
    """The extraction call returned no payload or a non-conforming one."""


class AdviceGenerationError(GatewayError):
    """The advice call returned no payload or a non-conforming one."""


class CredentialError(GatewayError):
    """The AI service credential is missing or was rejected."""


class WizardBusyError(CareerPathError):
    """A step was submitted again while its AI call is still outstanding."""


class WizardStepError(CareerPathError):
    """A transition was requested from a step that does not offer it."""
