"""Export job listings from the Results step."""

import csv
import io
from typing import List

from career_path_ai.schemas.advice import JobListing

CSV_HEADERS = ["title", "company", "location", "platform", "url", "match_score"]


def export_jobs_csv(jobs: List[JobListing]) -> bytes:
    """Export jobs to CSV bytes."""
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(CSV_HEADERS)
    for j in jobs:
        writer.writerow([
            j.title,
            j.company,
            j.location,
            j.platform,
            j.url,
            "" if j.match_score is None else f"{j.match_score:g}",
        ])
    return out.getvalue().encode("utf-8")
