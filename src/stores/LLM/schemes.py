"""
Turn model and provider wire shapes (Responses API).
"""
from pydantic import BaseModel, ConfigDict

from ..LLMEnums import OpenAIEnums, OutputItemEnums


class ChatTurn(BaseModel):
    """One role-tagged utterance. Role is kept verbatim, never inferred."""

    model_config = ConfigDict(frozen=True)

    role: str
    content: str

    @classmethod
    def from_stored(cls, message) -> "ChatTurn":
        return cls(role=message.role, content=message.content)

    def to_provider(self) -> dict:
        return {"role": self.role, "content": self.content}


class Answer(BaseModel):
    text: str
    model: str
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


# ----- Provider response -----


class OutputContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    text: str | None = None


class OutputItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str
    content: list[OutputContent] | None = None


class ProviderUsage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


class ProviderResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    model: str
    output: list[OutputItem] = []
    usage: ProviderUsage = ProviderUsage()


def extract_answer_text(output: list[OutputItem]) -> str:
    """
    Return the first text of the first "message" item that has one.
    Reasoning and unknown item types are skipped; no text at all gives "".
    """
    for item in output:
        if item.type != OutputItemEnums.MESSAGE.value:
            continue
        for part in item.content or []:
            if part.text is not None:
                return part.text
    return ""


def build_user_turn(message: str) -> ChatTurn:
    return ChatTurn(role=OpenAIEnums.ROLE_USER.value, content=message)
