"""
Chat endpoints: one-shot chat and chat within a session.
"""
import uuid

from fastapi import APIRouter, Request

from controllers import conversation
from routes.schemes import (
    ChatRequest,
    ChatResponse,
    SessionChatRequest,
    SessionChatResponse,
    ErrorResponse,
)

chat_router = APIRouter()


def get_db(request: Request):
    return request.app.db_client


def get_openai_provider(request: Request):
    return request.app.openai_provider


@chat_router.post(
    "/chat",
    summary="One-shot chat without history",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def chat(request: Request, body: ChatRequest):
    return await conversation.chat(get_openai_provider(request), body.message, body.system_prompt)


@chat_router.post(
    "/sessions/{session_id}/chat",
    summary="Chat within a session; history and reply are stored",
    response_model=SessionChatResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def session_chat(request: Request, session_id: uuid.UUID, body: SessionChatRequest):
    return await conversation.session_chat(
        get_db(request), get_openai_provider(request), session_id, body.message
    )
