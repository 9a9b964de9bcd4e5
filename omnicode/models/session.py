"""Chat session models: the stored record and its API view."""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField
from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class ChatSession(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = PydanticField(alias="userId")
    history: list[dict[str, Any]] = PydanticField(default_factory=list)
    updated_at: Optional[datetime] = PydanticField(default=None, alias="updatedAt")

    def to_response(self) -> dict:
        updated_at = self.updated_at
        # SQLite drops tzinfo; stored values are always UTC
        if updated_at is not None and updated_at.tzinfo is None:
            updated_at = updated_at.replace(tzinfo=timezone.utc)
        return {
            "userId": self.user_id,
            "history": self.history,
            "updatedAt": updated_at.isoformat() if updated_at else None,
        }


class ChatSessionRecord(SQLModel, table=True):
    """Local SQLite row mirroring the Firestore ``chatSessions/{uid}`` document."""

    user_id: str = Field(primary_key=True)
    history: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_session(self) -> ChatSession:
        return ChatSession(user_id=self.user_id, history=list(self.history), updated_at=self.updated_at)
