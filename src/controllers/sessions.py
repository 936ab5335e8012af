"""
Session resource: create, read with history, delete.
"""
import logging
import uuid
from datetime import timezone

from helpers.errors import StoreError, NotFoundError, translate_error
from models.SessionModel import SessionModel
from models.MessageModel import MessageModel

logger = logging.getLogger(__name__)


def _iso(value):
    if value is None:
        return None
    # SQLite hands back naive datetimes; all stored values are UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def session_to_dict(s) -> dict:
    return {
        "id": s.id,
        "system_prompt": s.system_prompt,
        "created_at": _iso(s.created_at),
        "updated_at": _iso(s.updated_at),
    }


def message_to_dict(m) -> dict:
    return {
        "id": m.id,
        "session_id": m.session_id,
        "role": m.role,
        "content": m.content,
        "created_at": _iso(m.created_at),
    }


async def create_session(db_client, system_prompt: str | None = None) -> dict:
    try:
        session = await SessionModel(db_client).create_session(system_prompt)
    except StoreError as e:
        raise translate_error(e) from e
    logger.info("Session created: %s", session.id)
    return session_to_dict(session)


async def get_session_with_messages(db_client, session_id: uuid.UUID) -> dict:
    try:
        session = await SessionModel(db_client).get_by_id(session_id)
        if session is None:
            raise NotFoundError("Session")
        messages = await MessageModel(db_client).list_by_session(session_id)
    except StoreError as e:
        raise translate_error(e) from e
    return {
        "session": session_to_dict(session),
        "messages": [message_to_dict(m) for m in messages],
    }


async def delete_session(db_client, session_id: uuid.UUID) -> None:
    try:
        deleted = await SessionModel(db_client).delete_session(session_id)
    except StoreError as e:
        raise translate_error(e) from e
    if not deleted:
        raise NotFoundError("Session")
    logger.info("Session deleted: %s", session_id)
