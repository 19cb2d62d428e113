"""Utility exports."""

from .helpers import parse_llm_json, run_async
from .logger import get_logger

__all__ = ["get_logger", "parse_llm_json", "run_async"]
