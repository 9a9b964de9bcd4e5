"""Cloud Firestore session store (``chatSessions/{uid}`` documents)."""

import logging
from typing import Any

from firebase_admin import firestore, firestore_async

from omnicode.core.config import settings
from omnicode.core.firebase import get_firebase_app
from omnicode.models.session import ChatSession
from omnicode.services.sessions.base import BaseSessionStore

logger = logging.getLogger(__name__)


class FirestoreSessionStore(BaseSessionStore):
    def __init__(self, client=None, collection: str | None = None):
        self._client = client
        self.collection = collection or settings.session_collection

    @property
    def client(self):
        if self._client is None:
            self._client = firestore_async.client(app=get_firebase_app())
        return self._client

    def _doc(self, uid: str):
        return self.client.collection(self.collection).document(uid)

    async def get(self, uid: str) -> ChatSession | None:
        snapshot = await self._doc(uid).get()
        if not snapshot.exists:
            return None
        data = snapshot.to_dict() or {}
        return ChatSession(
            user_id=data.get("userId", uid),
            history=data.get("history", []),
            updated_at=data.get("updatedAt"),
        )

    async def initialize(self, uid: str) -> ChatSession:
        await self._doc(uid).set({
            "userId": uid,
            "history": [],
            "updatedAt": firestore.SERVER_TIMESTAMP,
        })
        logger.info(f"Initialized chat session for {uid}")
        # The server timestamp is only resolved on read
        return ChatSession(user_id=uid, history=[])

    async def put(self, uid: str, history: list[dict[str, Any]]) -> None:
        await self._doc(uid).set(
            {
                "history": history,
                "updatedAt": firestore.SERVER_TIMESTAMP,
            },
            merge=True,
        )
        logger.debug(f"Wrote {len(history)} messages for {uid}")
