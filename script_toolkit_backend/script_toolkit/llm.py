import logging
from typing import Any, Dict, Optional

from openai import AsyncOpenAI

from . import settings

logger = logging.getLogger(__name__)

_client = None


class LLMClient:
    """
    Thin async wrapper over the generative-language service.

    Gemini is reached through its OpenAI-compatible endpoint, so the openai SDK
    is the transport. The instruction goes out as the system message and the
    user's text as the user message; the reply text is returned untouched.
    """

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.api_key = api_key or settings.require_api_key()
        self.base_url = base_url or settings.GEMINI_BASE_URL
        self._client: Optional[AsyncOpenAI] = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)
        return self._client

    async def generate(
        self,
        model: str,
        input_text: str,
        *,
        instruction: str,
        output_schema: Optional[Dict[str, Any]] = None,
        schema_name: str = "response",
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        thinking_budget: Optional[int] = None,
    ) -> str:
        messages = [
            {"role": "system", "content": instruction},
            {"role": "user", "content": input_text},
        ]
        kwargs: Dict[str, Any] = {}
        if output_schema is not None:
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {"name": schema_name, "schema": output_schema},
            }
        if temperature is not None:
            kwargs["temperature"] = temperature
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        if thinking_budget is not None:
            # Gemini-specific option, tunnelled through the compatibility layer.
            kwargs["extra_body"] = {"extra_body": {"google": {"thinking_config": {"thinking_budget": thinking_budget}}}}

        mode = "structured" if output_schema is not None else "text"
        logger.info(f"Calling {model} ({mode} mode, {len(input_text)} chars of input)")
        try:
            resp = await self._get_client().chat.completions.create(model=model, messages=messages, **kwargs)
            content = resp.choices[0].message.content or ""
            logger.info(f"Received {len(content)} chars from {model}")
            return content
        except Exception as e:
            logger.error(f"Remote generation call failed: {str(e)}")
            raise


def get_llm_client() -> LLMClient:
    """Process-wide client, created on first use."""
    global _client
    if _client is None:
        _client = LLMClient()
    return _client
