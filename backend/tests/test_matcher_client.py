"""Tests for the external resume backend client (network mocked)."""

from unittest.mock import patch

import httpx
import pytest

from services import matcher_client

_RealAsyncClient = httpx.AsyncClient


def _mock_client(handler):
    """AsyncClient factory that routes every request through handler."""
    def factory(**kwargs):
        return _RealAsyncClient(transport=httpx.MockTransport(handler), **kwargs)
    return factory


@pytest.fixture(autouse=True)
def _api_url(monkeypatch):
    monkeypatch.setattr(matcher_client.settings, "api_url", "http://backend.test/")


class TestMatchResume:
    @pytest.mark.asyncio
    async def test_posts_form_and_returns_json(self, matcher_payload):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = request.content
            return httpx.Response(200, json=matcher_payload)

        with patch("services.matcher_client.httpx.AsyncClient", _mock_client(handler)):
            data = await matcher_client.match_resume("cv.pdf", b"%PDF-1.4", "Python developer")

        assert data == matcher_payload
        assert seen["url"] == "http://backend.test/resume/match"
        assert b'name="jobDescription"' in seen["body"]
        assert b'name="resumeFile"; filename="cv.pdf"' in seen["body"]

    @pytest.mark.asyncio
    async def test_error_status_returns_none(self):
        def handler(request):
            return httpx.Response(500, json={"error": "boom"})

        with patch("services.matcher_client.httpx.AsyncClient", _mock_client(handler)):
            assert await matcher_client.match_resume("cv.pdf", b"x", "jd") is None

    @pytest.mark.asyncio
    async def test_transport_error_returns_none(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with patch("services.matcher_client.httpx.AsyncClient", _mock_client(handler)):
            assert await matcher_client.match_resume("cv.pdf", b"x", "jd") is None

    @pytest.mark.asyncio
    async def test_non_object_body_returns_none(self):
        def handler(request):
            return httpx.Response(200, json=["not", "an", "object"])

        with patch("services.matcher_client.httpx.AsyncClient", _mock_client(handler)):
            assert await matcher_client.match_resume("cv.pdf", b"x", "jd") is None

    @pytest.mark.asyncio
    async def test_unconfigured_returns_none(self, monkeypatch):
        monkeypatch.setattr(matcher_client.settings, "api_url", "")
        assert await matcher_client.match_resume("cv.pdf", b"x", "jd") is None


class TestFetchResumeKeywords:
    @pytest.mark.asyncio
    async def test_forwards_authorization(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"keywords": ["python", 3, "sql"]})

        with patch("services.matcher_client.httpx.AsyncClient", _mock_client(handler)):
            keywords = await matcher_client.fetch_resume_keywords("Bearer abc")

        assert keywords == ["python", "sql"]
        assert seen["auth"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_missing_keywords_field_is_empty(self):
        def handler(request):
            return httpx.Response(200, json={})

        with patch("services.matcher_client.httpx.AsyncClient", _mock_client(handler)):
            assert await matcher_client.fetch_resume_keywords("Bearer abc") == []

    @pytest.mark.asyncio
    async def test_unauthorized_raises_with_status(self):
        def handler(request):
            return httpx.Response(401, json={"error": "bad token"})

        with patch("services.matcher_client.httpx.AsyncClient", _mock_client(handler)):
            with pytest.raises(matcher_client.BackendRejected) as exc_info:
                await matcher_client.fetch_resume_keywords("Bearer nope")

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "bad token"

    @pytest.mark.asyncio
    async def test_server_error_returns_none(self):
        def handler(request):
            return httpx.Response(503, text="maintenance")

        with patch("services.matcher_client.httpx.AsyncClient", _mock_client(handler)):
            assert await matcher_client.fetch_resume_keywords("Bearer abc") is None
