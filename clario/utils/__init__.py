"""Utility functions package"""

from clario.utils.async_utils import run_async
from clario.utils.transcript_client import TranscriptClient

__all__ = [
    "run_async",
    "TranscriptClient"
]
