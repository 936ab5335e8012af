import logging

import openai
from openai import AsyncOpenAI
from pydantic import ValidationError

from helpers.errors import ProviderTransportError, ProviderRejectedError, ProviderConfigurationError
from ..LLMEnums import OpenAIEnums
from .schemes import ChatTurn, Answer, ProviderResponse, extract_answer_text

class OpenAIProvider():

    def __init__(self, api_key: str,
                base_url: str = None,
                timeout: float = 60.0,
                http_client=None):
        self.api_key = api_key
        self.generation_model_id = None

        # retries are the caller's business: exactly one request per send()
        self.client = AsyncOpenAI(
            api_key=api_key or "",
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )

        self.logger = logging.getLogger(__name__)

    def set_generation_model(self, model_id: str):
        self.generation_model_id = model_id

    def build_payload(self, turns: list[ChatTurn], instructions: str | None = None) -> dict:
        """Request body for the Responses API; instructions are left out entirely when absent."""
        if not turns:
            raise ValueError("at least one turn is required")
        if not any(t.role == OpenAIEnums.ROLE_USER.value for t in turns):
            raise ValueError("turns must contain a user turn")
        if not self.generation_model_id:
            raise ProviderConfigurationError("Generation model for OpenAI was not set.")

        payload = {
            "model": self.generation_model_id,
            "input": [t.to_provider() for t in turns],
        }
        if instructions:
            payload["instructions"] = instructions
        return payload

    async def send(self, turns: list[ChatTurn], instructions: str | None = None) -> Answer:
        """
        Send the conversation to the provider and return the public answer.

        Raises ProviderTransportError when no usable response came back and
        ProviderRejectedError (with the body verbatim) on a non-success status.
        """
        payload = self.build_payload(turns, instructions)

        try:
            raw = await self.client.responses.with_raw_response.create(**payload)
        except openai.APIStatusError as e:
            raise ProviderRejectedError(e.status_code, e.response.text) from e
        except openai.APIConnectionError as e:
            raise ProviderTransportError(f"request to OpenAI failed: {e}") from e

        try:
            response = ProviderResponse.model_validate_json(raw.http_response.text)
        except ValidationError as e:
            raise ProviderTransportError("OpenAI returned an undecodable response body") from e

        text = extract_answer_text(response.output)
        if not text:
            self.logger.warning("OpenAI response %s contained no public answer text.", response.id)

        return Answer(
            text=text,
            model=response.model,
            prompt_tokens=response.usage.input_tokens,
            completion_tokens=response.usage.output_tokens,
            total_tokens=response.usage.total_tokens,
        )

    async def close(self):
        await self.client.close()
