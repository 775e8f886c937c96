"""Wire shape of the external matcher's /resume/match response."""

from typing import Any

from pydantic import BaseModel


class ExternalMatchResponse(BaseModel):
    """Response body returned by the external resume matching backend.

    missing_keywords arrives grouped as a list of lists; the grouping carries
    no meaning and is flattened during normalization. Fields are typed
    loosely because upstream responses may be partial.
    """
    match_score: Any = 0.0
    keyword_coverage: Any = 0.0
    similarity_details: Any = []
    missing_keywords: Any = []
    resume_keywords: Any = []
    job_keywords: Any = []
