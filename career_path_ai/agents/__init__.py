"""Agent exports."""

from .advisor_agent import run_advisor_agent
from .extractor_agent import run_extractor_agent
from .gateway import CareerGateway

__all__ = ["CareerGateway", "run_extractor_agent", "run_advisor_agent"]
