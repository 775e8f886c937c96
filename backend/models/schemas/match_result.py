"""Normalized match result held by the Match Aggregator."""

from enum import Enum

from pydantic import BaseModel


class ScoreBand(str, Enum):
    """Three-band classification used for color-coding scores."""
    STRONG = "strong"
    PARTIAL = "partial"
    WEAK = "weak"


class KeywordFilter(str, Enum):
    ALL = "all"
    MATCHED = "matched"
    MISSING = "missing"


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class MatchedKeyword(BaseModel):
    """A keyword found in the resume with its externally computed strength."""
    keyword: str
    score: float = 0.0  # 0.0-1.0


class MatchResult(BaseModel):
    """Aggregate match between one resume and one job description.

    overall_score is supplied by the external matcher (whole-document
    similarity) and is not derived from the per-keyword scores.
    keyword_coverage is always len(matched) / (len(matched) + len(missing)).
    """
    overall_score: float = 0.0
    keyword_coverage: float = 0.0
    matched: list[MatchedKeyword] = []
    missing: list[str] = []  # flat, de-duplicated
    resume_keywords: list[str] = []
    job_keywords: list[str] = []


class KeywordRow(BaseModel):
    """One entry of a keyword listing view."""
    keyword: str
    matched: bool
    score: float = 0.0


class ExportRow(BaseModel):
    keyword: str
    score: float = 0.0
    status: str  # "Matched" | "Missing"
