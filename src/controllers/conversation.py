"""
Conversation: one-shot chat and chat within a stored session.

Session chat sequences the store and the LLM provider: read history, call the
provider, then persist the user turn followed by the assistant turn. Nothing is
persisted when the provider call fails.
"""
import logging
import uuid

from helpers.errors import ProviderError, StoreError, NotFoundError, ValidationError, translate_error
from models.SessionModel import SessionModel
from models.MessageModel import MessageModel
from stores.LLMEnums import OpenAIEnums
from stores.LLM.schemes import ChatTurn, build_user_turn

logger = logging.getLogger(__name__)


def _require_message(message: str) -> str:
    if not message or not message.strip():
        raise ValidationError("message must not be empty")
    return message


async def chat(openai_provider, message: str, system_prompt: str | None = None) -> dict:
    """Single-turn chat with no history and no persistence."""
    _require_message(message)
    try:
        answer = await openai_provider.send([build_user_turn(message)], instructions=system_prompt)
    except ProviderError as e:
        raise translate_error(e) from e

    logger.info("Chat response sent (tokens: %s)", answer.total_tokens)
    return {
        "response": answer.text,
        "model": answer.model,
        "usage": {
            "prompt_tokens": answer.prompt_tokens,
            "completion_tokens": answer.completion_tokens,
            "total_tokens": answer.total_tokens,
        },
    }


async def session_chat(db_client, openai_provider, session_id: uuid.UUID, message: str) -> dict:
    """
    Chat inside a session: history + new user turn go to the provider with the
    session's system prompt as instructions; on success both turns are stored.
    """
    _require_message(message)
    session_model = SessionModel(db_client)
    message_model = MessageModel(db_client)

    try:
        session = await session_model.get_by_id(session_id)
        if session is None:
            raise NotFoundError("Session")

        history = await message_model.list_by_session(session_id)
        turns = [ChatTurn.from_stored(m) for m in history]
        turns.append(build_user_turn(message))

        answer = await openai_provider.send(turns, instructions=session.system_prompt)

        await message_model.append_message(session_id, OpenAIEnums.ROLE_USER.value, message)
        await message_model.append_message(session_id, OpenAIEnums.ROLE_ASSISTANT.value, answer.text)

        message_count = await message_model.count_by_session(session_id)
    except (StoreError, ProviderError) as e:
        raise translate_error(e) from e

    logger.info("Session chat completed: %s - messages: %s", session_id, message_count)
    return {
        "response": answer.text,
        "model": answer.model,
        "session_id": session_id,
        "message_count": message_count,
    }
