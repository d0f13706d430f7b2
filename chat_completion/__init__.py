"""Provider-neutral chat-completion model and errors."""
from .errors import ChatCompletionError, TranslationError, VendorCallError
from .messages import (
    AssistantMessage,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ParamSpec,
    SummaryMessage,
    SystemMessage,
    ToolCall,
    ToolOutputMessage,
    ToolSpec,
    UserMessage,
)

__all__ = [
    "AssistantMessage",
    "ChatCompletionError",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "ParamSpec",
    "SummaryMessage",
    "SystemMessage",
    "ToolCall",
    "ToolOutputMessage",
    "ToolSpec",
    "TranslationError",
    "UserMessage",
    "VendorCallError",
]
