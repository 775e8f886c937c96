from fastapi import APIRouter, File, Form, Header, HTTPException, Query, Request, Response, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import CoverageRequest, RankJobsRequest
from models.responses import CoverageResponse, MatchReport, RankedJobsResponse, ResumeKeywordsResponse
from models.schemas.external_match import ExternalMatchResponse
from models.schemas.match_result import KeywordFilter, SortOrder
from services import coverage, matcher_client
from services.match_aggregator import MatchAggregator
from services.scoring import score_band, to_percent

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

EXPORT_FILENAME = "match_results.csv"


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "matcher_configured": matcher_client.is_configured(),
    }


@router.post("/coverage", response_model=CoverageResponse)
async def score_coverage(body: CoverageRequest):
    score = coverage.compute_coverage(body.resume_keywords, body.job_skills)
    return CoverageResponse(
        coverage=round(score, 4),
        percent=to_percent(score, digits=0),
        band=score_band(score),
        matched_skills=coverage.matched_skills(body.resume_keywords, body.job_skills),
    )


@router.post("/coverage/jobs", response_model=RankedJobsResponse)
async def rank_jobs(body: RankJobsRequest):
    return RankedJobsResponse(jobs=coverage.rank_jobs(body.resume_keywords, body.jobs))


@router.post("/match", response_model=MatchReport)
@limiter.limit("10/minute")
async def match(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(...),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    if not job_description.strip():
        raise HTTPException(status_code=400, detail="Job description is required")
    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    data = await matcher_client.match_resume(resume_file.filename, content, job_description)
    if data is None:
        raise HTTPException(status_code=502, detail="Resume matching service unavailable")

    return MatchAggregator(data).report()


@router.post("/match/report", response_model=MatchReport)
async def match_report(
    body: ExternalMatchResponse,
    keyword_filter: KeywordFilter = Query(KeywordFilter.ALL, alias="filter"),
    order: SortOrder = Query(SortOrder.DESCENDING),
    q: str = Query("", max_length=200),
):
    return MatchAggregator(body).report(keyword_filter, order, q)


@router.post("/match/export")
async def match_export(body: ExternalMatchResponse):
    return Response(
        content=MatchAggregator(body).to_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.get("/resume/keywords", response_model=ResumeKeywordsResponse)
@limiter.limit("10/minute")
async def resume_keywords(
    request: Request,
    authorization: str | None = Header(default=None),
):
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing Authorization token")

    try:
        keywords = await matcher_client.fetch_resume_keywords(authorization)
    except matcher_client.BackendRejected as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail or "Request rejected by resume service")
    if keywords is None:
        raise HTTPException(status_code=502, detail="Resume service unavailable")
    return ResumeKeywordsResponse(keywords=keywords)
