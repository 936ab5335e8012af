from .session_chat_base import SQLAlchemyBase
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy import Index

class Message(SQLAlchemyBase):
    __tablename__ = "messages"

    # autoincrement id breaks created_at ties in insertion order
    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(Uuid, ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False)
    role = Column(String(32), nullable=False)  # "user" | "assistant"
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    session = relationship("Session", back_populates="messages")

    __table_args__ = (
        Index("idx_message_session_id", "session_id"),
    )
