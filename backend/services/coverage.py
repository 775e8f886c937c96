"""Coverage scoring: how much of a job's skill list a resume's keywords cover.

Matching is substring containment of each normalized resume keyword in the
lower-cased skill string, so "python" covers "Senior Python Developer" and
"react" covers "React.js". This is recall-biased on purpose; the score bands
used to color compatibility badges assume it.
"""

import logging
from collections.abc import Iterable, Sequence

from models.requests import JobSkills
from models.responses import JobCoverage
from services.scoring import score_band, to_percent

logger = logging.getLogger(__name__)


def _as_text(value) -> str:
    """None and other bad entries become strings so one entry can't abort scoring."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _normalize_keywords(keyword_profile: Iterable) -> list[str]:
    """Trim and lower-case resume keywords.

    Blank entries are kept. An empty keyword is contained in every skill,
    the same as any other containment test.
    """
    return [_as_text(kw).strip().lower() for kw in keyword_profile]


def _skill_is_covered(skill, keywords: list[str]) -> bool:
    skill_lower = _as_text(skill).lower()
    return any(kw in skill_lower for kw in keywords)


def matched_skills(keyword_profile: Sequence, skill_set: Sequence) -> list[str]:
    """Return the job skills covered by at least one resume keyword, in input order."""
    if not keyword_profile or not skill_set:
        return []
    keywords = _normalize_keywords(keyword_profile)
    return [_as_text(s) for s in skill_set if _skill_is_covered(s, keywords)]


def compute_coverage(keyword_profile: Sequence, skill_set: Sequence) -> float:
    """Fraction of skill_set covered by keyword_profile, 0.0-1.0.

    Either list being empty yields 0.0 rather than an error.
    """
    if not keyword_profile or not skill_set:
        return 0.0
    keywords = _normalize_keywords(keyword_profile)
    n_matched = sum(1 for s in skill_set if _skill_is_covered(s, keywords))
    return n_matched / len(skill_set)


def rank_jobs(keyword_profile: Sequence, jobs: Sequence[JobSkills]) -> list[JobCoverage]:
    """Score every job against the profile, best coverage first.

    Jobs with equal coverage keep their input order.
    """
    scored = []
    for job in jobs:
        coverage = compute_coverage(keyword_profile, job.skills)
        scored.append(JobCoverage(
            id=job.id,
            title=job.title,
            coverage=round(coverage, 4),
            percent=to_percent(coverage, digits=0),
            band=score_band(coverage),
        ))
    logger.debug("Scored %d jobs against %d resume keywords", len(scored), len(keyword_profile))
    return sorted(scored, key=lambda j: j.coverage, reverse=True)
