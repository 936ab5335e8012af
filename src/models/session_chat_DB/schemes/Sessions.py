import uuid

from .session_chat_base import SQLAlchemyBase
from sqlalchemy import Column, Text, DateTime, Uuid
from sqlalchemy.orm import relationship


class Session(SQLAlchemyBase):
    __tablename__ = "sessions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    system_prompt = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    messages = relationship(
        "Message",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
