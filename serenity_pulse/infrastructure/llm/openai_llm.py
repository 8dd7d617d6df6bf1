"""OpenAI chat-completions adapter for the LLMService port."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

from serenity_pulse.domain.ports.llm import LLMService

logger = logging.getLogger(__name__)


class LLMNotConfiguredError(RuntimeError):
    """Raised when a call is attempted without an API key."""


class EmptyCompletionError(RuntimeError):
    """Raised when the upstream reply carries no content."""


class OpenAILLM(LLMService):
    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        timeout: float = 30.0,
    ) -> None:
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        # the client refuses to build without a key, so defer the failure to call time
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout) if api_key else None

    @property
    def model(self) -> str:
        return self._model

    def _require_client(self) -> AsyncOpenAI:
        if self._client is None:
            raise LLMNotConfiguredError("OpenAI API key not configured")
        return self._client

    def _request_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"model": self._model}
        if self._max_tokens is not None:
            kwargs["max_tokens"] = self._max_tokens
        if self._temperature is not None:
            kwargs["temperature"] = self._temperature
        return kwargs

    async def generate_structured_response(
        self,
        messages: List[Dict[str, str]],
        response_format: Dict[str, Any],
        json_schema: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        client = self._require_client()
        if json_schema and response_format.get("type") == "json_schema":
            response_format = {
                "type": "json_schema",
                "json_schema": {"name": "response", "schema": json_schema},
            }

        completion = await client.chat.completions.create(
            messages=messages,
            response_format=response_format,
            **self._request_kwargs(),
        )
        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise EmptyCompletionError("No content received from OpenAI")

        parsed = json.loads(content)
        if not isinstance(parsed, dict):
            raise ValueError(f"Expected a JSON object from {self._model}, got {type(parsed).__name__}")
        logger.debug(f"Structured response from {self._model}: keys={list(parsed)}")
        return parsed
