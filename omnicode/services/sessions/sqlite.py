"""SQLite session store for local development, built on SQLModel."""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.engine import Engine
from sqlmodel import Session

from omnicode.models.session import ChatSession, ChatSessionRecord
from omnicode.services.sessions.base import BaseSessionStore

logger = logging.getLogger(__name__)


class SqliteSessionStore(BaseSessionStore):
    def __init__(self, engine: Engine | None = None):
        if engine is None:
            from omnicode.core.database import engine as default_engine
            engine = default_engine
        self.engine = engine

    async def get(self, uid: str) -> ChatSession | None:
        with Session(self.engine) as session:
            record = session.get(ChatSessionRecord, uid)
            return record.to_session() if record else None

    async def initialize(self, uid: str) -> ChatSession:
        with Session(self.engine) as session:
            record = session.get(ChatSessionRecord, uid)
            if record is None:
                record = ChatSessionRecord(user_id=uid)
            record.history = []
            record.updated_at = datetime.now(timezone.utc)
            session.add(record)
            session.commit()
            session.refresh(record)
            logger.info(f"Initialized chat session for {uid}")
            return record.to_session()

    async def put(self, uid: str, history: list[dict[str, Any]]) -> None:
        with Session(self.engine) as session:
            record = session.get(ChatSessionRecord, uid)
            if record is None:
                record = ChatSessionRecord(user_id=uid)
            record.history = list(history)
            record.updated_at = datetime.now(timezone.utc)
            session.add(record)
            session.commit()
            logger.debug(f"Wrote {len(history)} messages for {uid}")
