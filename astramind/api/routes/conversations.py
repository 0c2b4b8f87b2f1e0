"""
Conversation Routes - conversation CRUD and message listing.

Endpoints:
- GET    /api/conversations
- GET    /api/conversations/{id}
- POST   /api/conversations
- PATCH  /api/conversations/{id}
- DELETE /api/conversations/{id}
- GET    /api/conversations/{conversation_id}/messages
"""
from typing import List

from fastapi import APIRouter, Depends

from astramind.api.dependencies import get_services
from astramind.core.logging_config import get_logger
from astramind.models import (
    Conversation,
    ConversationCreate,
    ConversationUpdate,
    DeleteResponse,
    ErrorResponse,
    Message,
)
from astramind.services.container import ServiceContainer

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/conversations",
    tags=["Conversations"],
    responses={
        404: {"model": ErrorResponse, "description": "Conversation not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)


@router.get("", response_model=List[Conversation], summary="List conversations, newest first")
async def list_conversations(services: ServiceContainer = Depends(get_services)):
    return services.conversations.list()


@router.get("/{conversation_id}", response_model=Conversation, summary="Get a conversation")
async def get_conversation(conversation_id: str, services: ServiceContainer = Depends(get_services)):
    return services.conversations.get(conversation_id)


@router.post("", response_model=Conversation, summary="Create a conversation")
async def create_conversation(data: ConversationCreate, services: ServiceContainer = Depends(get_services)):
    return services.conversations.create(data)


@router.patch("/{conversation_id}", response_model=Conversation, summary="Update a conversation")
async def update_conversation(
    conversation_id: str,
    data: ConversationUpdate,
    services: ServiceContainer = Depends(get_services),
):
    return services.conversations.update(conversation_id, data)


@router.delete(
    "/{conversation_id}",
    response_model=DeleteResponse,
    summary="Delete a conversation and its messages",
)
async def delete_conversation(conversation_id: str, services: ServiceContainer = Depends(get_services)):
    services.conversations.delete(conversation_id)
    return DeleteResponse(success=True)


@router.get(
    "/{conversation_id}/messages",
    response_model=List[Message],
    summary="List a conversation's messages, oldest first",
)
async def list_messages(conversation_id: str, services: ServiceContainer = Depends(get_services)):
    return services.conversations.list_messages(conversation_id)
