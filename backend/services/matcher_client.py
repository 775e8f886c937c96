"""HTTP client for the external resume backend.

The backend owns resume parsing, keyword extraction and embedding-based
similarity. This service only forwards requests and hands the raw JSON to
the match aggregator.
"""

import logging

import httpx

from config import settings

logger = logging.getLogger(__name__)


class BackendRejected(Exception):
    """The backend answered with a 4xx; callers pass the status on to the client."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        super().__init__(f"Backend rejected request with status {status_code}")
        self.status_code = status_code
        self.detail = detail


def is_configured() -> bool:
    return bool(settings.api_url)


def _url(path: str) -> str:
    return f"{settings.api_url.rstrip('/')}{path}"


def _error_detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict):
        return str(body.get("error") or body.get("detail") or "")
    return ""


async def match_resume(filename: str, content: bytes, job_description: str) -> dict | None:
    """Send a resume PDF and a job description to /resume/match.

    Returns the decoded JSON body, or None if the backend is unreachable,
    answers with an error status, or returns something other than an object.
    """
    if not is_configured():
        logger.warning("No API_URL set - resume matching disabled")
        return None

    try:
        async with httpx.AsyncClient(timeout=settings.matcher_timeout_seconds) as client:
            resp = await client.post(
                _url("/resume/match"),
                files={"resumeFile": (filename, content, "application/pdf")},
                data={"jobDescription": job_description},
            )
            resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPStatusError as e:
        logger.error("Resume match failed with status %s", e.response.status_code)
        return None
    except httpx.HTTPError as e:
        logger.error("Resume match request error: %s", e)
        return None
    except ValueError as e:
        logger.error("Resume match returned invalid JSON: %s", e)
        return None

    if not isinstance(data, dict):
        logger.error("Resume match returned %s instead of an object", type(data).__name__)
        return None
    return data


async def fetch_resume_keywords(authorization: str) -> list[str] | None:
    """Fetch the signed-in user's resume keywords from /resume/keywords.

    Raises BackendRejected on 4xx so an expired token surfaces as 401 rather
    than as an outage. Returns None when the backend is unreachable or fails.
    """
    if not is_configured():
        logger.warning("No API_URL set - resume keyword lookup disabled")
        return None

    try:
        async with httpx.AsyncClient(timeout=settings.matcher_timeout_seconds) as client:
            resp = await client.get(
                _url("/resume/keywords"),
                headers={"Authorization": authorization},
            )
            resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        if 400 <= status < 500:
            logger.warning("Resume keyword lookup rejected with status %s", status)
            raise BackendRejected(status, _error_detail(e.response)) from e
        logger.error("Resume keyword lookup failed with status %s", status)
        return None
    except httpx.HTTPError as e:
        logger.error("Resume keyword lookup request error: %s", e)
        return None
    except ValueError as e:
        logger.error("Resume keyword lookup returned invalid JSON: %s", e)
        return None

    keywords = data.get("keywords") if isinstance(data, dict) else None
    if not isinstance(keywords, list):
        return []
    return [kw for kw in keywords if isinstance(kw, str)]
