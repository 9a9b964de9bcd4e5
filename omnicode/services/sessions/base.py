"""Abstract chat session store. One record per user, keyed by uid."""

from abc import ABC, abstractmethod
from typing import Any

from omnicode.models.session import ChatSession


class BaseSessionStore(ABC):
    @abstractmethod
    async def get(self, uid: str) -> ChatSession | None:
        """Return the user's session, or None if it was never created."""
        ...

    @abstractmethod
    async def initialize(self, uid: str) -> ChatSession:
        """Create (or overwrite) the user's session with an empty history."""
        ...

    @abstractmethod
    async def put(self, uid: str, history: list[dict[str, Any]]) -> None:
        """Merge-write ``history`` and a fresh server timestamp.

        Fields other than history and updatedAt are left untouched; the
        record is created if it does not exist yet.
        """
        ...
