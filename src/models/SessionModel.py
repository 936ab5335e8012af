import uuid
from datetime import datetime, timezone

from .BaseDatamodel import BaseDatamodel
from .session_chat_DB.schemes import Session, Message
from sqlalchemy import select, delete


class SessionModel(BaseDatamodel):
    def __init__(self, db_client: object):
        super().__init__(db_client=db_client)
        self.db_client = db_client

    async def get_by_id(self, session_id: uuid.UUID) -> Session | None:
        """Get one session by id, or None when it does not exist."""
        with self.store_errors("get session"):
            async with self.db_client() as db_session:
                result = await db_session.execute(
                    select(Session).where(Session.id == session_id)
                )
                return result.scalar_one_or_none()

    async def create_session(self, system_prompt: str | None = None) -> Session:
        """Start a new, empty chat session."""
        now = datetime.now(timezone.utc)
        session = Session(
            id=uuid.uuid4(),
            system_prompt=system_prompt,
            created_at=now,
            updated_at=now,
        )
        with self.store_errors("create session"):
            async with self.db_client() as db_session:
                async with db_session.begin():
                    db_session.add(session)
        return session

    async def delete_session(self, session_id: uuid.UUID) -> bool:
        """Delete a session and all of its messages. Returns True if a session was deleted."""
        with self.store_errors("delete session"):
            async with self.db_client() as db_session:
                async with db_session.begin():
                    await db_session.execute(
                        delete(Message).where(Message.session_id == session_id)
                    )
                    result = await db_session.execute(
                        delete(Session).where(Session.id == session_id)
                    )
                    deleted = result.rowcount > 0
        return deleted
