"""
Request and Response models for the API.

These Pydantic models define the contract between client and server.
They provide:
- Type validation
- Automatic documentation
- Request/response serialization
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from astramind.models.entities import APIModel, Message, utc_now


class ChatRequest(APIModel):
    """
    Request model for the /api/chat endpoint.

    Attributes:
        message: The user's message.
        conversation_id: Existing conversation to continue. Omit to start
            a new conversation titled after the message.
    """
    message: str = Field(
        ...,
        min_length=1,
        description="The user's message",
        examples=["Help me plan my week"],
    )
    conversation_id: Optional[str] = Field(
        default=None,
        description="Conversation to continue; a new one is created when omitted",
    )


class ChatResponse(APIModel):
    """Response model for the /api/chat endpoint."""
    message: Message = Field(..., description="The assistant's stored reply")
    conversation_id: str = Field(..., description="Conversation the reply belongs to")


class DailySummary(APIModel):
    """Today's activity counts plus generated insights."""
    date: str = Field(..., description="Local calendar date, YYYY-MM-DD")
    total_chats: int
    goals_completed: int
    notes_created: int
    insights: List[str]


class DeleteResponse(APIModel):
    success: bool = True


class HealthResponse(APIModel):
    """Response model for the /health endpoint."""
    status: str = Field(default="healthy")
    version: str
    provider: Optional[str] = None
    store: Optional[Dict[str, int]] = None
    timestamp: datetime = Field(default_factory=utc_now)


class ErrorResponse(APIModel):
    """Standard error response model."""
    error: str
    code: str
    details: Optional[str] = None
    timestamp: datetime = Field(default_factory=utc_now)
