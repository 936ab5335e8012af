"""
API router: health, chat, sessions.
Mounts under /api/v1 in main.py.
"""
from fastapi import APIRouter, Request

from routes.chat_router import chat_router
from routes.sessions_router import sessions_router
from routes.schemes import HealthResponse

api_router = APIRouter(tags=["Session Chat"])


@api_router.get("/health", summary="Health check", response_model=HealthResponse)
async def health_check(request: Request):
    return HealthResponse(status="ok", version=request.app.version)


api_router.include_router(chat_router, tags=["Chat"])
api_router.include_router(sessions_router, prefix="/sessions", tags=["Sessions"])
