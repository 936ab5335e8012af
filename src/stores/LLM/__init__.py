from .OpenAIProvider import OpenAIProvider
from .schemes import ChatTurn, Answer

__all__ = ["OpenAIProvider", "ChatTurn", "Answer"]
