"""API routes package"""

from clario.api import categories, scoring, videos

__all__ = ["categories", "scoring", "videos"]
