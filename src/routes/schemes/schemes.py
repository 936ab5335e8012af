"""
Pydantic request and response schemas for API endpoints (single module).
"""
import uuid

from pydantic import BaseModel


# ----- Error -----


class ErrorBody(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Envelope for every error returned by the API."""

    error: ErrorBody


# ----- Health -----


class HealthResponse(BaseModel):
    status: str
    version: str


# ----- Chat -----


class ChatRequest(BaseModel):
    """Request body for one-shot chat."""

    message: str
    system_prompt: str | None = None


class UsageResponse(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatResponse(BaseModel):
    response: str
    model: str
    usage: UsageResponse


# ----- Sessions -----


class CreateSessionRequest(BaseModel):
    """Request body for creating a session (all fields optional)."""

    system_prompt: str | None = None


class CreateSessionResponse(BaseModel):
    id: uuid.UUID
    system_prompt: str | None
    created_at: str | None


class SessionResponse(BaseModel):
    id: uuid.UUID
    system_prompt: str | None
    created_at: str | None
    updated_at: str | None


class MessageResponse(BaseModel):
    """One stored message of a session's history."""

    id: int
    session_id: uuid.UUID
    role: str
    content: str
    created_at: str | None


class SessionWithMessagesResponse(BaseModel):
    session: SessionResponse
    messages: list[MessageResponse]


class SessionChatRequest(BaseModel):
    message: str


class SessionChatResponse(BaseModel):
    response: str
    model: str
    session_id: uuid.UUID
    message_count: int
