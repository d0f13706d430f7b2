"""Anthropic (Claude) chat-completion provider."""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

import anthropic

from chat_completion import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    VendorCallError,
)

from .anthropic_converter import translate_request, translate_response
from .base import ChatCompletion

log = logging.getLogger("anthropic-chat")

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 2048


def _client_kwargs() -> Dict[str, Any]:
    """SDK client options from the environment; unset values keep SDK defaults."""
    kwargs: Dict[str, Any] = {"api_key": os.getenv("ANTHROPIC_API_KEY")}
    base_url = os.getenv("ANTHROPIC_BASE_URL")
    max_retries = os.getenv("ANTHROPIC_MAX_RETRIES")
    timeout = os.getenv("ANTHROPIC_TIMEOUT_SECONDS")
    if base_url:
        kwargs["base_url"] = base_url
    if max_retries:
        kwargs["max_retries"] = int(max_retries)
    if timeout:
        kwargs["timeout"] = float(timeout)
    return kwargs


class AnthropicProvider(ChatCompletion):
    """Completes chat requests against the Anthropic Messages API.

    Transport, auth and retry policy live on the SDK client; this class only
    translates and makes one ``messages.create`` call per request.
    """

    def __init__(
        self,
        client: Optional[anthropic.AsyncAnthropic] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ):
        self.client = client if client is not None else anthropic.AsyncAnthropic(**_client_kwargs())
        self.model = model if model is not None else os.getenv("ANTHROPIC_MODEL", DEFAULT_MODEL)
        if max_tokens is None:
            max_tokens = int(os.getenv("ANTHROPIC_MAX_TOKENS", DEFAULT_MAX_TOKENS))
        self.max_tokens = max_tokens

    async def complete(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        payload = translate_request(request, model=self.model, max_tokens=self.max_tokens)

        log.info(
            "Anthropic API call (model %s, %d messages, %d tools)",
            self.model, len(payload["messages"]), len(payload.get("tools", [])),
        )
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Request to anthropic:\n%s", json.dumps(payload, indent=2))

        try:
            response = await self.client.messages.create(**payload)
        except anthropic.APIError as e:
            log.error("Claude API error", exc_info=True)
            raise VendorCallError(f"Anthropic call failed: {e}") from e

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Response from anthropic:\n%s", response.model_dump_json(indent=2))

        return translate_response(response)
