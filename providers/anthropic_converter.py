"""Convert between the provider-neutral chat model and the Anthropic Messages API.

Request:   ChatCompletionRequest -> {"model", "max_tokens", "messages", "tools"?, "tool_choice"?}
Response:  {"content": [{"type": "text"|"tool_use", ...}], ...} -> ChatCompletionResponse

Everything here is pure data transformation: no I/O, no state.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from chat_completion import (
    AssistantMessage,
    ChatCompletionRequest,
    ChatCompletionResponse,
    SummaryMessage,
    SystemMessage,
    ToolCall,
    ToolOutputMessage,
    ToolSpec,
    TranslationError,
    UserMessage,
)

# Anthropic rejects empty tool_result content.
EMPTY_TOOL_OUTPUT = "Success"


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

def _tool_input(tool_call: ToolCall) -> Dict[str, Any]:
    """Decode a tool call's JSON args into the object Anthropic expects as ``input``."""
    if not tool_call.args:
        return {}
    try:
        value = json.loads(tool_call.args)
    except json.JSONDecodeError as e:
        raise TranslationError(
            f"Tool call {tool_call.id!r} ({tool_call.name}) has invalid JSON args"
        ) from e
    if not isinstance(value, dict):
        raise TranslationError(
            f"Tool call {tool_call.id!r} ({tool_call.name}) args must be a JSON object, "
            f"got {type(value).__name__}"
        )
    return value


def message_to_anthropic(message: Any) -> Dict[str, Any]:
    """Convert one conversation message to an Anthropic message dict.

    System, user and summary messages all collapse to the "user" role since
    this binding has no separate system/summary turn. Tool outputs are sent
    back as a ``tool_result`` block in a "user" turn.
    """
    if isinstance(message, (SystemMessage, UserMessage, SummaryMessage)):
        return {"role": "user", "content": message.content}

    if isinstance(message, ToolOutputMessage):
        return {
            "role": "user",
            "content": [
                {
                    "type": "tool_result",
                    "tool_use_id": message.tool_call.id,
                    "content": message.output or EMPTY_TOOL_OUTPUT,
                }
            ],
        }

    if isinstance(message, AssistantMessage):
        content: List[Dict[str, Any]] = []
        if message.content is not None:
            content.append({"type": "text", "text": message.content})
        for tool_call in message.tool_calls or []:
            content.append({
                "type": "tool_use",
                "id": tool_call.id,
                "name": tool_call.name,
                "input": _tool_input(tool_call),
            })
        return {"role": "assistant", "content": content}

    raise TranslationError(f"Unsupported message type: {type(message).__name__}")


def tool_spec_to_anthropic(spec: ToolSpec) -> Dict[str, Any]:
    """Convert a ToolSpec to an Anthropic tool definition.

    Every parameter is declared as a string; richer types are not modelled.
    """
    return {
        "name": spec.name,
        "description": spec.description,
        "input_schema": {
            "type": "object",
            "properties": {
                param.name: {"type": "string", "description": param.description}
                for param in spec.parameters
            },
            "required": [param.name for param in spec.parameters if param.required],
        },
    }


def translate_request(request: ChatCompletionRequest, *, model: str, max_tokens: int) -> Dict[str, Any]:
    """Build the keyword arguments for ``client.messages.create``.

    Fails on the first message that cannot be converted; no partial request
    is ever returned.
    """
    messages = []
    for index, message in enumerate(request.messages):
        try:
            messages.append(message_to_anthropic(message))
        except TranslationError:
            raise
        except (TypeError, ValueError, AttributeError) as e:
            raise TranslationError(f"Failed to build message {index}") from e

    payload: Dict[str, Any] = {
        "model": model,
        "max_tokens": max_tokens,
        "messages": messages,
    }

    if request.tools_spec:
        payload["tools"] = [tool_spec_to_anthropic(spec) for spec in request.tools_spec]
        payload["tool_choice"] = {"type": "auto"}

    return payload


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------

def _field(block: Any, key: str) -> Any:
    if isinstance(block, dict):
        return block[key]
    return getattr(block, key)


def _content_blocks(response: Any) -> List[Any]:
    content = response.get("content") if isinstance(response, dict) else getattr(response, "content", None)
    if content is None:
        raise TranslationError("Anthropic response has no content")
    return list(content)


def _scan_content(blocks: List[Any]) -> Tuple[Optional[str], List[ToolCall]]:
    """Single pass: first text block wins, every tool_use block is collected."""
    text: Optional[str] = None
    tool_calls: List[ToolCall] = []
    for block in blocks:
        block_type = _field(block, "type")
        if block_type == "text":
            if text is None:
                text = _field(block, "text")
        elif block_type == "tool_use":
            tool_calls.append(ToolCall(
                id=_field(block, "id"),
                name=_field(block, "name"),
                args=json.dumps(_field(block, "input"), separators=(",", ":"), ensure_ascii=False),
            ))
    return text, tool_calls


def translate_response(response: Any) -> ChatCompletionResponse:
    """Convert an Anthropic message (SDK object or plain dict) to a ChatCompletionResponse."""
    try:
        text, tool_calls = _scan_content(_content_blocks(response))
        return ChatCompletionResponse(message=text, tool_calls=tool_calls or None)
    except TranslationError:
        raise
    except (KeyError, AttributeError, TypeError, ValueError, ValidationError) as e:
        raise TranslationError("Failed to build chat completion response") from e
