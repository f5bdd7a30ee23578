"""Transcript service API client"""

from typing import Optional
import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential
import structlog

from clario.config import settings

logger = structlog.get_logger()


class TranscriptClient:
    """
    Client for the external transcript service.

    The service answers GET /transcripts/{external_id} with
    {"transcript": "..."} or 404 when no transcript exists.
    """

    def __init__(self, base_url: str = None, timeout: float = None, client: httpx.AsyncClient = None):
        self.base_url = (base_url or settings.transcript_service_url).rstrip("/")
        self.client = client or httpx.AsyncClient(
            timeout=timeout or settings.transcript_service_timeout
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.aclose()

    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(min=1, max=10),
        reraise=True
    )
    async def fetch_transcript(self, external_id: str) -> Optional[str]:
        """Fetch transcript text; None when the service has none."""
        response = await self.client.get(f"{self.base_url}/transcripts/{external_id}")

        if response.status_code == 404:
            logger.info("Transcript unavailable", external_id=external_id)
            return None

        response.raise_for_status()
        transcript = (response.json() or {}).get("transcript")

        if not transcript or not transcript.strip():
            logger.info("Transcript empty", external_id=external_id)
            return None

        logger.info(
            "Transcript fetched",
            external_id=external_id,
            length=len(transcript)
        )
        return transcript
