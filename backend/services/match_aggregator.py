"""Match Aggregator: derived views over an external resume/JD match result.

The external matcher returns an overall similarity, per-keyword similarity
details and grouped missing keywords. Everything here is a pure read over
that result: keyword listings with filter/sort/search, score bands,
remediation suggestions for missing keywords, and CSV export rows.

Malformed upstream payloads never raise. They normalize to an empty
result and every view degrades to "no keywords / 0%".
"""

import csv
import io
import logging
from typing import Any

from pydantic import BaseModel

from models.responses import KeywordSuggestions, KeywordView, MatchReport
from models.schemas.match_result import (
    ExportRow,
    KeywordFilter,
    KeywordRow,
    MatchedKeyword,
    MatchResult,
    SortOrder,
)
from services.scoring import clamp_score, score_band, to_percent

logger = logging.getLogger(__name__)

EXPORT_HEADER = ["Keyword", "Match Score", "Status"]
STATUS_MATCHED = "Matched"
STATUS_MISSING = "Missing"

_SUGGESTION_TEMPLATES = (
    'Add "{kw}" to your skills section if you have experience with it',
    'Incorporate "{kw}" into your experience bullet points',
    "Highlight any related experience that demonstrates {kw}",
    "Consider adding a project that showcases {kw}",
)


# ---------------------------------------------------------------------------
# Boundary normalization
# ---------------------------------------------------------------------------

def _clean_keyword(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


def _flatten_missing(value: Any) -> list[str]:
    """Flatten grouped missing keywords into an ordered, de-duplicated list.

    Missing keywords are a set: a keyword repeated across groups is listed
    once, so the missing count can be lower than the raw flattened length.
    """
    flat: list[str] = []
    seen: set[str] = set()

    def _walk(item: Any) -> None:
        if isinstance(item, (list, tuple)):
            for sub in item:
                _walk(sub)
            return
        kw = _clean_keyword(item)
        if kw and kw not in seen:
            seen.add(kw)
            flat.append(kw)

    if isinstance(value, (list, tuple)):
        _walk(value)
    return flat


def _parse_details(value: Any) -> list[MatchedKeyword]:
    if not isinstance(value, (list, tuple)):
        return []
    matched = []
    for entry in value:
        if not isinstance(entry, dict):
            continue
        kw = _clean_keyword(entry.get("keyword"))
        if not kw:
            continue
        raw_score = entry.get("match_score", entry.get("score"))
        matched.append(MatchedKeyword(keyword=kw, score=clamp_score(raw_score)))
    return matched


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [kw for kw in (_clean_keyword(v) for v in value) if kw]


def compute_keyword_coverage(n_matched: int, n_missing: int) -> float:
    total = n_matched + n_missing
    if total == 0:
        return 0.0
    return n_matched / total


def normalize_match_result(payload: Any) -> MatchResult:
    """Build a well-formed MatchResult from an external matcher response.

    Accepts the raw JSON dict, a pydantic model, an existing MatchResult or
    None. Missing or mistyped fields fall back to empty defaults.
    """
    if isinstance(payload, MatchResult):
        return payload.model_copy(
            deep=True,
            update={"keyword_coverage": compute_keyword_coverage(
                len(payload.matched), len(payload.missing)
            )},
        )
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    if not isinstance(payload, dict):
        if payload is not None:
            logger.warning("Ignoring malformed match payload of type %s", type(payload).__name__)
        return MatchResult()

    matched = _parse_details(payload.get("similarity_details"))
    missing = _flatten_missing(payload.get("missing_keywords"))
    coverage = compute_keyword_coverage(len(matched), len(missing))

    upstream_coverage = payload.get("keyword_coverage")
    if upstream_coverage is not None and abs(clamp_score(upstream_coverage) - coverage) > 1e-6:
        logger.debug(
            "Upstream keyword_coverage %s differs from derived %.4f",
            upstream_coverage, coverage,
        )

    return MatchResult(
        overall_score=clamp_score(payload.get("match_score")),
        keyword_coverage=coverage,
        matched=matched,
        missing=missing,
        resume_keywords=_string_list(payload.get("resume_keywords")),
        job_keywords=_string_list(payload.get("job_keywords")),
    )


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------

class MatchAggregator:
    """Read-only views over a single MatchResult."""

    score_band = staticmethod(score_band)

    def __init__(self, result: Any = None) -> None:
        self._result = normalize_match_result(result)

    @property
    def result(self) -> MatchResult:
        return self._result.model_copy(deep=True)

    @property
    def overall_score(self) -> float:
        return self._result.overall_score

    @property
    def keyword_coverage(self) -> float:
        return self._result.keyword_coverage

    @property
    def overall_percent(self) -> float:
        return to_percent(self._result.overall_score)

    @property
    def coverage_percent(self) -> float:
        return to_percent(self._result.keyword_coverage)

    def list_keywords(
        self,
        keyword_filter: KeywordFilter | str = KeywordFilter.ALL,
        order: SortOrder | str = SortOrder.DESCENDING,
        query: str | None = "",
    ) -> list[KeywordRow]:
        """List matched and/or missing keywords sorted by score.

        Missing keywords score 0. The sort is stable so equal scores keep
        matched-then-missing input order across calls.
        """
        keyword_filter = KeywordFilter(keyword_filter)
        order = SortOrder(order)

        rows: list[KeywordRow] = []
        if keyword_filter != KeywordFilter.MISSING:
            rows.extend(
                KeywordRow(keyword=m.keyword, matched=True, score=m.score)
                for m in self._result.matched
            )
        if keyword_filter != KeywordFilter.MATCHED:
            rows.extend(
                KeywordRow(keyword=kw, matched=False, score=0.0)
                for kw in self._result.missing
            )

        needle = (query or "").strip().lower()
        if needle:
            rows = [r for r in rows if needle in r.keyword.lower()]

        return sorted(rows, key=lambda r: r.score, reverse=order == SortOrder.DESCENDING)

    @staticmethod
    def suggestions_for(missing_keyword: str) -> list[str]:
        """Templated advice for adding a missing keyword to the resume."""
        kw = _clean_keyword(missing_keyword)
        if not kw:
            return []
        return [template.format(kw=kw) for template in _SUGGESTION_TEMPLATES]

    def export_rows(self) -> list[ExportRow]:
        """Matched keywords then missing keywords, each in stored order."""
        rows = [
            ExportRow(keyword=m.keyword, score=m.score, status=STATUS_MATCHED)
            for m in self._result.matched
        ]
        rows.extend(
            ExportRow(keyword=kw, score=0.0, status=STATUS_MISSING)
            for kw in self._result.missing
        )
        return rows

    def to_csv(self) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(EXPORT_HEADER)
        for row in self.export_rows():
            writer.writerow([row.keyword, row.score, row.status])
        return buf.getvalue()

    def report(
        self,
        keyword_filter: KeywordFilter | str = KeywordFilter.ALL,
        order: SortOrder | str = SortOrder.DESCENDING,
        query: str | None = "",
    ) -> MatchReport:
        """Bundle every derived view for the results page."""
        keywords = [
            KeywordView(
                keyword=row.keyword,
                matched=row.matched,
                score=row.score,
                percent=to_percent(row.score),
                band=score_band(row.score),
            )
            for row in self.list_keywords(keyword_filter, order, query)
        ]
        suggestions = [
            KeywordSuggestions(keyword=kw, suggestions=self.suggestions_for(kw))
            for kw in self._result.missing
        ]
        return MatchReport(
            overall_score=self._result.overall_score,
            overall_percent=self.overall_percent,
            overall_band=score_band(self._result.overall_score),
            keyword_coverage=round(self._result.keyword_coverage, 4),
            coverage_percent=self.coverage_percent,
            matched_count=len(self._result.matched),
            missing_count=len(self._result.missing),
            keywords=keywords,
            suggestions=suggestions,
            resume_keywords=list(self._result.resume_keywords),
            job_keywords=list(self._result.job_keywords),
        )
