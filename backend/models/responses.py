from pydantic import BaseModel

from models.schemas.match_result import ScoreBand


class CoverageResponse(BaseModel):
    coverage: float = 0.0
    percent: float = 0.0
    band: ScoreBand = ScoreBand.WEAK
    matched_skills: list[str] = []


class JobCoverage(BaseModel):
    id: str
    title: str = ""
    coverage: float = 0.0
    percent: float = 0.0
    band: ScoreBand = ScoreBand.WEAK


class RankedJobsResponse(BaseModel):
    jobs: list[JobCoverage] = []


class KeywordView(BaseModel):
    keyword: str
    matched: bool
    score: float = 0.0
    percent: float = 0.0
    band: ScoreBand = ScoreBand.WEAK


class KeywordSuggestions(BaseModel):
    keyword: str
    suggestions: list[str] = []


class MatchReport(BaseModel):
    overall_score: float = 0.0
    overall_percent: float = 0.0
    overall_band: ScoreBand = ScoreBand.WEAK
    keyword_coverage: float = 0.0
    coverage_percent: float = 0.0
    matched_count: int = 0
    missing_count: int = 0
    keywords: list[KeywordView] = []
    suggestions: list[KeywordSuggestions] = []
    resume_keywords: list[str] = []
    job_keywords: list[str] = []


class ResumeKeywordsResponse(BaseModel):
    keywords: list[str] = []
