"""
Shared pytest fixtures: in-memory SQLite database, FastAPI test client, mock OpenAI provider.
"""
import sys
from pathlib import Path
from unittest.mock import MagicMock, AsyncMock

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

src_dir = Path(__file__).resolve().parent.parent
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from helpers.database import create_db_engine, create_db_client
from models.session_chat_DB.schemes import SQLAlchemyBase
from stores.LLM.schemes import Answer


@pytest_asyncio.fixture()
async def db_engine():
    engine = create_db_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(SQLAlchemyBase.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLAlchemyBase.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture()
async def db_session_factory(db_engine):
    return create_db_client(db_engine)


def make_answer(text="Hello from the assistant!", **overrides):
    fields = {
        "text": text,
        "model": "gpt-test",
        "prompt_tokens": 10,
        "completion_tokens": 5,
        "total_tokens": 15,
    }
    fields.update(overrides)
    return Answer(**fields)


def _make_mock_openai_provider():
    provider = MagicMock()
    provider.send = AsyncMock(return_value=make_answer())
    return provider


@pytest_asyncio.fixture()
async def openai_provider():
    return _make_mock_openai_provider()


@pytest_asyncio.fixture()
async def app(db_session_factory, openai_provider):
    from main import app as fastapi_app

    fastapi_app.db_client = db_session_factory
    fastapi_app.openai_provider = openai_provider
    return fastapi_app


@pytest_asyncio.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
