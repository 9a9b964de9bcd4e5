"""Session store factory."""

from omnicode.core.config import settings
from omnicode.services.sessions.base import BaseSessionStore


def get_session_store() -> BaseSessionStore:
    """Returns the configured session store backend."""
    if settings.session_backend == "firestore":
        from omnicode.services.sessions.firestore import FirestoreSessionStore
        return FirestoreSessionStore()
    elif settings.session_backend == "sqlite":
        from omnicode.services.sessions.sqlite import SqliteSessionStore
        return SqliteSessionStore()
    else:
        raise ValueError(f"Unknown session backend: {settings.session_backend}")
