"""Pydantic contracts shared by the matching services and the API."""

from models.schemas.external_match import ExternalMatchResponse
from models.schemas.match_result import (
    ExportRow,
    KeywordFilter,
    KeywordRow,
    MatchedKeyword,
    MatchResult,
    ScoreBand,
    SortOrder,
)

__all__ = [
    "ExternalMatchResponse",
    "ExportRow",
    "KeywordFilter",
    "KeywordRow",
    "MatchedKeyword",
    "MatchResult",
    "ScoreBand",
    "SortOrder",
]
