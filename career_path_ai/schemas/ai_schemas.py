"""JSON Schemas sent with each AI request to constrain its structured output.

Field names and nesting must stay exactly as the service is asked to return them;
the normalizer reads the same names back.
"""

from career_path_ai.config import LANGUAGE_PROFICIENCIES

_STRING = {"type": "string"}
_STRING_LIST = {"type": "array", "items": _STRING}


def _object(properties: dict, required: list = None) -> dict:
    schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = list(required)
    return schema


RESUME_SCHEMA: dict = _object(
    {
        "fullName": _STRING,
        "email": _STRING,
        "phone": _STRING,
        "summary": _STRING,
        "skills": _STRING_LIST,
        "experience": {
            "type": "array",
            "items": _object(
                {
                    "company": _STRING,
                    "role": _STRING,
                    "duration": _STRING,
                    "description": _STRING,
                }
            ),
        },
        "education": {
            "type": "array",
            "items": _object(
                {
                    "institution": _STRING,
                    "degree": _STRING,
                    "year": _STRING,
                }
            ),
        },
        "certifications": _STRING_LIST,
        "languages": {
            "type": "array",
            "items": _object(
                {
                    "language": _STRING,
                    "proficiency": {"type": "string", "enum": list(LANGUAGE_PROFICIENCIES)},
                }
            ),
        },
        "projects": {
            "type": "array",
            "items": _object(
                {
                    "name": _STRING,
                    "description": _STRING,
                    "link": _STRING,
                }
            ),
        },
        "links": _object(
            {
                "linkedin": _STRING,
                "portfolio": _STRING,
                "github": _STRING,
                "other": _STRING,
            }
        ),
    },
    required=["fullName", "experience"],
)

# No required fields: every advice field is optional and defaulted by the normalizer
ADVICE_SCHEMA: dict = _object(
    {
        "resumeScore": {
            "type": "number",
            "description": "Score out of 10 based on quality and relevance to target role.",
        },
        "resumeCritique": {
            "type": "string",
            "description": "Detailed critique of the resume structure and content.",
        },
        "executiveSummary": _STRING,
        "skillGapAnalysis": _STRING,
        "improvementSuggestion": _STRING,
        "recommendedRoleTitle": _STRING,
        "jobs": {
            "type": "array",
            "items": _object(
                {
                    "title": _STRING,
                    "company": _STRING,
                    "location": _STRING,
                    "platform": _STRING,
                    "url": _STRING,
                    "matchScore": {"type": "number"},
                }
            ),
        },
    }
)

RESUME_REQUIRED_FIELDS: tuple = tuple(RESUME_SCHEMA["required"])
