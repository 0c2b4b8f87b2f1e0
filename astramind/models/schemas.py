"""
Create and update payloads.

Create payloads carry the caller-supplied fields of a new entity; Storage
stamps id and timestamps and fills declared defaults. Update payloads are
partial: only fields the caller actually sent end up in the patch.
"""
from datetime import datetime
from typing import ClassVar, FrozenSet, List, Literal, Optional

from pydantic import Field, field_validator

from astramind.core.validators import clamp_progress
from astramind.models.entities import APIModel


class PatchModel(APIModel):
    """
    Base for partial-update payloads.

    Fields listed in ``nullable_fields`` may be cleared by sending null;
    a null for any other field is treated as "not sent".
    """
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    def to_patch(self) -> dict:
        """Return only the fields the caller set, keyed by attribute name."""
        patch = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in patch.items()
            if value is not None or key in self.nullable_fields
        }


# ============================================================
# Conversations & Messages
# ============================================================

class ConversationCreate(APIModel):
    title: str = Field(..., min_length=1)


class ConversationUpdate(PatchModel):
    title: Optional[str] = Field(default=None, min_length=1)


class MessageCreate(APIModel):
    conversation_id: str
    role: Literal["user", "assistant"]
    content: str


# ============================================================
# Goals
# ============================================================

class GoalCreate(APIModel):
    """
    Payload for a new goal.

    progress and completed default to 0 / False in Storage when omitted.
    """
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: str = Field(..., min_length=1)
    progress: Optional[int] = None
    target_date: Optional[datetime] = None
    completed: Optional[bool] = None

    @field_validator("progress")
    @classmethod
    def _clamp_progress(cls, value: Optional[int]) -> Optional[int]:
        return None if value is None else clamp_progress(value)


class GoalUpdate(PatchModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"description", "target_date"})

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, min_length=1)
    progress: Optional[int] = None
    target_date: Optional[datetime] = None
    completed: Optional[bool] = None

    @field_validator("progress")
    @classmethod
    def _clamp_progress(cls, value: Optional[int]) -> Optional[int]:
        return None if value is None else clamp_progress(value)


# ============================================================
# Notes
# ============================================================

class NoteCreate(APIModel):
    title: str = Field(..., min_length=1)
    content: str
    tags: Optional[List[str]] = None


class NoteUpdate(PatchModel):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    tags: Optional[List[str]] = None


# ============================================================
# Activities
# ============================================================

class ActivityCreate(APIModel):
    type: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
