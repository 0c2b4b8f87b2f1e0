"""
Models module - Pydantic schemas for data validation.

This module defines:
- Entity models: Conversation, Message, Goal, Note, Activity
- Payloads: create/update input for each entity
- Request/response models for API endpoints
"""
from astramind.models.entities import (
    APIModel,
    Conversation,
    Message,
    Goal,
    Note,
    Activity,
    new_id,
    utc_now,
)
from astramind.models.schemas import (
    ConversationCreate,
    ConversationUpdate,
    MessageCreate,
    GoalCreate,
    GoalUpdate,
    NoteCreate,
    NoteUpdate,
    ActivityCreate,
)
from astramind.models.chat import (
    ChatRequest,
    ChatResponse,
    DailySummary,
    DeleteResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "APIModel",
    "Conversation",
    "Message",
    "Goal",
    "Note",
    "Activity",
    "new_id",
    "utc_now",
    "ConversationCreate",
    "ConversationUpdate",
    "MessageCreate",
    "GoalCreate",
    "GoalUpdate",
    "NoteCreate",
    "NoteUpdate",
    "ActivityCreate",
    "ChatRequest",
    "ChatResponse",
    "DailySummary",
    "DeleteResponse",
    "HealthResponse",
    "ErrorResponse",
]
