"""
Pydantic request and response schemas for API endpoints.
"""
from routes.schemes.schemes import (
    ErrorBody,
    ErrorResponse,
    HealthResponse,
    ChatRequest,
    UsageResponse,
    ChatResponse,
    CreateSessionRequest,
    CreateSessionResponse,
    SessionResponse,
    MessageResponse,
    SessionWithMessagesResponse,
    SessionChatRequest,
    SessionChatResponse,
)

__all__ = [
    "ErrorBody",
    "ErrorResponse",
    "HealthResponse",
    "ChatRequest",
    "UsageResponse",
    "ChatResponse",
    "CreateSessionRequest",
    "CreateSessionResponse",
    "SessionResponse",
    "MessageResponse",
    "SessionWithMessagesResponse",
    "SessionChatRequest",
    "SessionChatResponse",
]
