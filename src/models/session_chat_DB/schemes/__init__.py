from .session_chat_base import SQLAlchemyBase
from .Sessions import Session
from .Messages import Message

__all__ = ["SQLAlchemyBase", "Session", "Message"]
