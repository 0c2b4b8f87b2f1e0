"""
Entity models - the five record types held by Storage.

Attributes are snake_case in Python and camelCase on the wire
(``conversation_id`` <-> ``conversationId``). Both spellings are accepted
on input.
"""
import uuid
from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate an opaque unique entity id."""
    return str(uuid.uuid4())


class APIModel(BaseModel):
    """Base model with camelCase aliases for JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Conversation(APIModel):
    """A chat session. updated_at moves on every new message."""
    id: str
    title: str
    created_at: datetime
    updated_at: datetime


class Message(APIModel):
    """A single chat turn inside a conversation."""
    id: str
    conversation_id: str
    role: Literal["user", "assistant"]
    content: str
    created_at: datetime

    def to_turn(self) -> dict:
        """Role + content only, the shape the AI gateway expects."""
        return {"role": self.role, "content": self.content}


class Goal(APIModel):
    """
    A tracked goal.

    progress and completed are independent: completing a goal does not
    move progress and vice versa.
    """
    id: str
    title: str
    description: Optional[str] = None
    category: str
    progress: int = 0
    target_date: Optional[datetime] = None
    completed: bool = False
    created_at: datetime
    updated_at: datetime


class Note(APIModel):
    id: str
    title: str
    content: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class Activity(APIModel):
    """Append-only activity log entry. Never updated or deleted."""
    id: str
    type: str
    description: str
    created_at: datetime
