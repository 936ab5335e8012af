"""
Tests for the session store: SessionModel and MessageModel against SQLite.
"""
import asyncio
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone

import pytest

import models.MessageModel as message_model_module

from helpers.errors import StoreError
from models.SessionModel import SessionModel
from models.MessageModel import MessageModel


@pytest.mark.asyncio
async def test_create_and_get_session(db_session_factory):
    model = SessionModel(db_session_factory)
    created = await model.create_session("You are terse.")

    fetched = await model.get_by_id(created.id)
    assert fetched is not None
    assert fetched.system_prompt == "You are terse."
    assert fetched.created_at == fetched.updated_at
    assert await MessageModel(db_session_factory).list_by_session(created.id) == []


@pytest.mark.asyncio
async def test_get_unknown_session_is_none(db_session_factory):
    assert await SessionModel(db_session_factory).get_by_id(uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_messages_are_returned_in_insertion_order(db_session_factory):
    session = await SessionModel(db_session_factory).create_session()
    model = MessageModel(db_session_factory)
    contents = [f"turn {i}" for i in range(6)]
    for i, content in enumerate(contents):
        await model.append_message(session.id, "user" if i % 2 == 0 else "assistant", content)

    messages = await model.list_by_session(session.id)
    assert [m.content for m in messages] == contents
    assert all(a.created_at <= b.created_at for a, b in zip(messages, messages[1:]))
    assert await model.count_by_session(session.id) == 6


@pytest.mark.asyncio
async def test_append_bumps_updated_at(db_session_factory):
    session_model = SessionModel(db_session_factory)
    message_model = MessageModel(db_session_factory)
    session = await session_model.create_session()

    previous = (await session_model.get_by_id(session.id)).updated_at
    for content in ("a", "b"):
        message = await message_model.append_message(session.id, "user", content)
        current = (await session_model.get_by_id(session.id)).updated_at
        assert current >= previous
        assert current >= session.created_at.replace(tzinfo=None)
        assert message.id is not None
        previous = current


@pytest.mark.asyncio
async def test_append_to_missing_session_fails(db_session_factory):
    model = MessageModel(db_session_factory)
    missing = uuid.uuid4()
    with pytest.raises(StoreError):
        await model.append_message(missing, "user", "orphan")
    assert await model.list_by_session(missing) == []


@pytest.mark.asyncio
async def test_delete_session_cascades(db_session_factory):
    session_model = SessionModel(db_session_factory)
    message_model = MessageModel(db_session_factory)
    session = await session_model.create_session()
    await message_model.append_message(session.id, "user", "hi")
    await message_model.append_message(session.id, "assistant", "hello")

    assert await session_model.delete_session(session.id) is True
    assert await session_model.get_by_id(session.id) is None
    # deleted sessions read back as an empty history, not an error
    assert await message_model.list_by_session(session.id) == []
    assert await message_model.count_by_session(session.id) == 0


@pytest.mark.asyncio
async def test_delete_unknown_session(db_session_factory):
    assert await SessionModel(db_session_factory).delete_session(uuid.uuid4()) is False


def _delay_first_connection(db_client, delay):
    calls = []

    @asynccontextmanager
    async def delayed_client():
        if not calls:
            calls.append(delay)
            await asyncio.sleep(delay)
        async with db_client() as db_session:
            yield db_session

    return delayed_client


async def _assert_updated_at_covers_messages(db_session_factory, session_id):
    session = await SessionModel(db_session_factory).get_by_id(session_id)
    messages = await MessageModel(db_session_factory).list_by_session(session_id)
    assert session.updated_at >= session.created_at
    assert all(session.updated_at >= m.created_at for m in messages)


@pytest.mark.asyncio
async def test_concurrent_appends_keep_updated_at_ahead(db_session_factory):
    session = await SessionModel(db_session_factory).create_session()
    slow = MessageModel(_delay_first_connection(db_session_factory, 0.2))
    fast = MessageModel(db_session_factory)

    await asyncio.gather(
        slow.append_message(session.id, "user", "slow"),
        fast.append_message(session.id, "user", "fast"),
    )

    assert await fast.count_by_session(session.id) == 2
    await _assert_updated_at_covers_messages(db_session_factory, session.id)


class _SteppedClock:
    """Stands in for datetime in MessageModel; returns a fixed instant."""

    value = None

    @classmethod
    def now(cls, tz=None):
        return cls.value


@pytest.mark.asyncio
async def test_clock_step_back_never_lowers_updated_at(db_session_factory, monkeypatch):
    session_model = SessionModel(db_session_factory)
    message_model = MessageModel(db_session_factory)
    session = await session_model.create_session()
    await message_model.append_message(session.id, "user", "first")
    before = (await session_model.get_by_id(session.id)).updated_at

    _SteppedClock.value = datetime.now(timezone.utc) - timedelta(hours=1)
    monkeypatch.setattr(message_model_module, "datetime", _SteppedClock)
    await message_model.append_message(session.id, "assistant", "second")

    after = (await session_model.get_by_id(session.id)).updated_at
    assert after == before
    await _assert_updated_at_covers_messages(db_session_factory, session.id)
