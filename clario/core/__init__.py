"""Core business logic package"""

from clario.core.database import engine, Base, get_db, async_session_maker

__all__ = [
    "engine",
    "Base",
    "get_db",
    "async_session_maker"
]
