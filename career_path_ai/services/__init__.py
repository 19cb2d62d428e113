"""Service exports."""

from .criteria_service import build_criteria, encode_resume, is_accepted_mime_type
from .export_service import export_jobs_csv
from .normalizer import clamp_score, normalize_advice, normalize_profile
from .openai_service import build_file_part, collect_citations, create_structured_response, get_client, response_text
from .profile_editor import append_item, remove_item, update_field, update_item, update_link

__all__ = [
    "build_criteria",
    "encode_resume",
    "is_accepted_mime_type",
    "export_jobs_csv",
    "clamp_score",
    "normalize_advice",
    "normalize_profile",
    "build_file_part",
    "collect_citations",
    "create_structured_response",
    "get_client",
    "response_text",
    "append_item",
    "remove_item",
    "update_field",
    "update_item",
    "update_link",
]
