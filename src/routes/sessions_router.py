"""
Session endpoints: create, get (with history), delete.
"""
import uuid

from fastapi import APIRouter, Request, Response

from controllers import sessions
from routes.schemes import (
    CreateSessionRequest,
    CreateSessionResponse,
    SessionWithMessagesResponse,
    ErrorResponse,
)

sessions_router = APIRouter()


def get_db(request: Request):
    return request.app.db_client


@sessions_router.post("", summary="Create a new chat session", response_model=CreateSessionResponse, responses={500: {"model": ErrorResponse}})
async def create_session(request: Request, body: CreateSessionRequest | None = None):
    system_prompt = body.system_prompt if body else None
    return await sessions.create_session(get_db(request), system_prompt)


@sessions_router.get("/{session_id}", summary="Get session with its messages", response_model=SessionWithMessagesResponse, responses={404: {"model": ErrorResponse}})
async def get_session(request: Request, session_id: uuid.UUID):
    return await sessions.get_session_with_messages(get_db(request), session_id)


@sessions_router.delete("/{session_id}", summary="Delete session and its messages", status_code=204, responses={404: {"model": ErrorResponse}})
async def delete_session(request: Request, session_id: uuid.UUID):
    await sessions.delete_session(get_db(request), session_id)
    return Response(status_code=204)
