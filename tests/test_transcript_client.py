"""Tests for the transcript service client"""

import httpx
import pytest

from clario.utils.transcript_client import TranscriptClient


def _client(handler):
    transport = httpx.MockTransport(handler)
    return TranscriptClient(
        base_url="http://transcripts.test/",
        client=httpx.AsyncClient(transport=transport)
    )


class TestTranscriptClient:
    """Test TranscriptClient.fetch_transcript"""

    @pytest.mark.asyncio
    async def test_returns_transcript(self):
        def handler(request):
            assert request.url.path == "/transcripts/abc123"
            return httpx.Response(200, json={"transcript": "hello there"})

        async with _client(handler) as client:
            assert await client.fetch_transcript("abc123") == "hello there"

    @pytest.mark.asyncio
    async def test_not_found_is_unavailable(self):
        async with _client(lambda request: httpx.Response(404)) as client:
            assert await client.fetch_transcript("missing") is None

    @pytest.mark.asyncio
    async def test_blank_transcript_is_unavailable(self):
        handler = lambda request: httpx.Response(200, json={"transcript": "   "})

        async with _client(handler) as client:
            assert await client.fetch_transcript("blank") is None

    @pytest.mark.asyncio
    async def test_server_error_propagates(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(500)

        async with _client(handler) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await client.fetch_transcript("boom")

        assert len(calls) == 1
