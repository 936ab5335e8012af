from enum import Enum


class OpenAIEnums(str, Enum):
    ROLE_SYSTEM = "system"
    ROLE_USER = "user"
    ROLE_ASSISTANT = "assistant"


class OutputItemEnums(str, Enum):
    # only MESSAGE items carry text that may be shown to the user
    MESSAGE = "message"
    REASONING = "reasoning"
