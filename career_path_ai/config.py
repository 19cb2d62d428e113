"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4.1-mini")

# Request settings
REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "120"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Resume uploads: MIME type -> display label
ACCEPTED_MIME_TYPES: dict = {
    "application/pdf": "PDF",
    "image/jpeg": "JPG",
    "image/png": "PNG",
    "image/webp": "WEBP",
}

# Target countries offered on the Upload step
AVAILABLE_COUNTRIES: list = [
    "United States",
    "United Kingdom",
    "Canada",
    "Australia",
    "Germany",
    "Singapore",
    "Japan",
    "India",
    "France",
    "Netherlands",
]
DEFAULT_COUNTRY: str = "United States"

# Advice scoring range (resumeScore is clamped into it)
RESUME_SCORE_MIN: float = 0.0
RESUME_SCORE_MAX: float = 10.0

LANGUAGE_PROFICIENCIES: list = ["Basic", "Intermediate", "Advanced", "Native"]
DEFAULT_PROFICIENCY: str = "Intermediate"
