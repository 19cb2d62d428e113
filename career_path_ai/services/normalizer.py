"""
Defaulting pass between raw AI JSON and the typed models.

The service's structured output is treated as untrusted: absent, null or
mistyped fields become the canonical empty values so every string field is
always present (possibly empty) and every list field is always a list.
"""

import math
from typing import Any, List, Optional

from career_path_ai.config import (
    DEFAULT_PROFICIENCY,
    LANGUAGE_PROFICIENCIES,
    RESUME_SCORE_MAX,
    RESUME_SCORE_MIN,
)
from career_path_ai.schemas.advice import CareerAdvice, GroundingSource, JobListing
from career_path_ai.schemas.ai_schemas import RESUME_REQUIRED_FIELDS
from career_path_ai.schemas.profile import (
    Education,
    Language,
    Project,
    UserLinks,
    UserProfile,
    WorkExperience,
)

_PROFICIENCY_LOOKUP = {p.lower(): p for p in LANGUAGE_PROFICIENCIES}


def _as_str(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [_as_str(v) for v in value if isinstance(v, (str, int, float)) and not isinstance(v, bool)]


def _as_dict_list(value: Any) -> List[dict]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def _as_number(value: Any) -> Optional[float]:
    """Finite float from a number or numeric string; None otherwise."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _proficiency(value: Any) -> str:
    return _PROFICIENCY_LOOKUP.get(_as_str(value).strip().lower(), DEFAULT_PROFICIENCY)


def clamp_score(value: Any) -> float:
    """resumeScore clamped into the advertised 0-10 range; non-numeric -> 0."""
    number = _as_number(value)
    if number is None:
        return RESUME_SCORE_MIN
    return max(RESUME_SCORE_MIN, min(RESUME_SCORE_MAX, number))


def normalize_profile(data: dict) -> UserProfile:
    """
    Build a fully-populated UserProfile from extraction JSON.
    Raises ValueError when a hard-required field (fullName, experience) is absent.
    """
    if not isinstance(data, dict):
        raise ValueError("extraction payload is not a JSON object")
    missing = [f for f in RESUME_REQUIRED_FIELDS if data.get(f) is None]
    if missing:
        raise ValueError(f"extraction payload missing required fields: {', '.join(missing)}")

    links = data.get("links") if isinstance(data.get("links"), dict) else {}
    return UserProfile(
        full_name=_as_str(data.get("fullName")),
        email=_as_str(data.get("email")),
        phone=_as_str(data.get("phone")),
        summary=_as_str(data.get("summary")),
        skills=_as_str_list(data.get("skills")),
        experience=[
            WorkExperience(
                company=_as_str(e.get("company")),
                role=_as_str(e.get("role")),
                duration=_as_str(e.get("duration")),
                description=_as_str(e.get("description")),
            )
            for e in _as_dict_list(data.get("experience"))
        ],
        education=[
            Education(
                institution=_as_str(e.get("institution")),
                degree=_as_str(e.get("degree")),
                year=_as_str(e.get("year")),
            )
            for e in _as_dict_list(data.get("education"))
        ],
        certifications=_as_str_list(data.get("certifications")),
        languages=[
            Language(language=_as_str(l.get("language")), proficiency=_proficiency(l.get("proficiency")))
            for l in _as_dict_list(data.get("languages"))
        ],
        projects=[
            Project(
                name=_as_str(p.get("name")),
                description=_as_str(p.get("description")),
                link=_as_str(p.get("link")),
            )
            for p in _as_dict_list(data.get("projects"))
        ],
        links=UserLinks(
            linkedin=_as_str(links.get("linkedin")),
            portfolio=_as_str(links.get("portfolio")),
            github=_as_str(links.get("github")),
            other=_as_str(links.get("other")),
        ),
    )


def normalize_job(data: dict) -> JobListing:
    return JobListing(
        title=_as_str(data.get("title")),
        company=_as_str(data.get("company")),
        location=_as_str(data.get("location")),
        platform=_as_str(data.get("platform")),
        url=_as_str(data.get("url")),
        match_score=_as_number(data.get("matchScore")),
    )


def normalize_advice(data: dict, grounding_urls: Optional[List[GroundingSource]] = None) -> CareerAdvice:
    """Build CareerAdvice from advice JSON; every field is optional and defaulted."""
    if not isinstance(data, dict):
        raise ValueError("advice payload is not a JSON object")
    return CareerAdvice(
        resume_score=clamp_score(data.get("resumeScore")),
        resume_critique=_as_str(data.get("resumeCritique")),
        executive_summary=_as_str(data.get("executiveSummary")),
        skill_gap_analysis=_as_str(data.get("skillGapAnalysis")),
        improvement_suggestion=_as_str(data.get("improvementSuggestion")),
        recommended_role_title=_as_str(data.get("recommendedRoleTitle")),
        jobs=[normalize_job(j) for j in _as_dict_list(data.get("jobs"))],
        grounding_urls=list(grounding_urls or []),
    )
