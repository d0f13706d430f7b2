"""Abstract base class for chat-completion providers."""
from __future__ import annotations

from abc import ABC, abstractmethod

from chat_completion import (
    ChatCompletionError,
    ChatCompletionRequest,
    ChatCompletionResponse,
    UserMessage,
)


class ChatCompletion(ABC):
    """Interface that each LLM provider must implement.

    The provider is responsible for:
    - Translating the provider-neutral request into its native format
    - Issuing exactly one vendor call (retries belong to the vendor client)
    - Translating the vendor response back into a ChatCompletionResponse
    """

    @abstractmethod
    async def complete(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Run a single chat completion.

        Args:
            request: Ordered conversation plus the tools the model may call.

        Returns:
            The model's text (if any) and the tool calls it requested (if any).

        Raises:
            TranslationError: The request or response could not be converted.
            VendorCallError: The vendor call itself failed.
        """
        ...

    async def prompt(self, text: str) -> str:
        """Send a single user message and return the model's text."""
        response = await self.complete(ChatCompletionRequest(messages=[UserMessage(content=text)]))
        if response.message is None:
            raise ChatCompletionError("Model returned no text for the prompt")
        return response.message
