"""Shared test fixtures: sample external matcher payloads."""

import pytest


@pytest.fixture
def matcher_payload():
    """Response shape returned by the external /resume/match endpoint."""
    return {
        "match_score": 0.72,
        "keyword_coverage": 0.6667,
        "similarity_details": [
            {"keyword": "sql", "match_score": 0.9},
            {"keyword": "docker", "match_score": 0.65},
        ],
        "missing_keywords": [["kubernetes"]],
        "resume_keywords": ["sql", "docker", "python"],
        "job_keywords": ["sql", "docker", "kubernetes"],
    }
