"""
Chat Routes - API endpoint for conversational interactions.

POST /api/chat sends a message, optionally continuing a conversation,
and returns the stored assistant reply.
"""
from fastapi import APIRouter, Depends

from astramind.api.dependencies import get_services
from astramind.core.logging_config import get_logger
from astramind.models import ChatRequest, ChatResponse, ErrorResponse
from astramind.services.container import ServiceContainer

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/chat",
    tags=["Chat"],
    responses={
        400: {"model": ErrorResponse, "description": "Message missing or invalid"},
        404: {"model": ErrorResponse, "description": "Conversation not found"},
        500: {"model": ErrorResponse, "description": "AI response failed"},
    },
)


# Plain def: FastAPI runs it in the worker thread pool, so a slow
# provider call holds up only this request.
@router.post(
    "",
    response_model=ChatResponse,
    summary="Send a message to the assistant",
    description="""
    Send a message to AstraMind.

    Omit `conversationId` to start a new conversation; its title is the
    first 50 characters of the message. Include it to continue an existing
    conversation with its earlier turns as context.

    The user's message is stored before the model is called, so it is kept
    even if the model call fails.
    """,
)
def send_message(request: ChatRequest, services: ServiceContainer = Depends(get_services)) -> ChatResponse:
    logger.info(
        f"Chat request: conversation={request.conversation_id or 'new'}, "
        f"message={request.message[:50]}"
    )
    return services.chat.send_message(request.message, request.conversation_id)
