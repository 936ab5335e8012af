import uuid
from datetime import datetime, timezone

from .BaseDatamodel import BaseDatamodel
from .session_chat_DB.schemes import Message, Session
from helpers.errors import StoreError
from sqlalchemy import select, update, func, case


class MessageModel(BaseDatamodel):
    def __init__(self, db_client: object):
        super().__init__(db_client=db_client)
        self.db_client = db_client

    async def list_by_session(self, session_id: uuid.UUID) -> list[Message]:
        """List messages in a session in chronological order. Unknown sessions yield []."""
        with self.store_errors("list messages"):
            async with self.db_client() as db_session:
                result = await db_session.execute(
                    select(Message)
                    .where(Message.session_id == session_id)
                    .order_by(Message.created_at.asc(), Message.id.asc())
                )
                return list(result.scalars().all())

    async def count_by_session(self, session_id: uuid.UUID) -> int:
        with self.store_errors("count messages"):
            async with self.db_client() as db_session:
                result = await db_session.execute(
                    select(func.count()).select_from(Message).where(Message.session_id == session_id)
                )
                return result.scalar_one()

    async def append_message(self, session_id: uuid.UUID, role: str, content: str) -> Message:
        """
        Store one message and bump the parent session's updated_at, in one transaction.
        updated_at never moves backwards, even when appends to one session race or
        the clock steps back. Raises StoreError when the session does not exist;
        nothing is written in that case.
        """
        with self.store_errors("append message"):
            async with self.db_client() as db_session:
                async with db_session.begin():
                    now = datetime.now(timezone.utc)
                    result = await db_session.execute(
                        update(Session)
                        .where(Session.id == session_id)
                        .values(updated_at=case((Session.updated_at < now, now), else_=Session.updated_at))
                        .execution_options(synchronize_session=False)
                    )
                    if result.rowcount == 0:
                        raise StoreError(f"session {session_id} does not exist")
                    # created_at stays <= the session's updated_at, which is max(previous, now)
                    message = Message(session_id=session_id, role=role, content=content, created_at=now)
                    db_session.add(message)
        return message
