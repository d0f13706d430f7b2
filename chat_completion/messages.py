"""Provider-neutral conversation model for chat completions."""
from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Annotated


# ------------------------------------------------------------------------------
# Tools
# ------------------------------------------------------------------------------

class ToolCall(BaseModel):
    """A tool invocation requested by the model."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    args: Optional[str] = Field(None, description="JSON-encoded arguments object")


class ParamSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    required: bool = False


class ToolSpec(BaseModel):
    """A tool the model may call. Parameter names must be unique."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    parameters: List[ParamSpec] = Field(default_factory=list)

    @field_validator("parameters")
    @classmethod
    def _unique_parameter_names(cls, parameters: List[ParamSpec]) -> List[ParamSpec]:
        seen = set()
        for param in parameters:
            if param.name in seen:
                raise ValueError(f"Duplicate parameter name: {param.name!r}")
            seen.add(param.name)
        return parameters


# ------------------------------------------------------------------------------
# Messages
# ------------------------------------------------------------------------------

class SystemMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["system"] = "system"
    content: str


class UserMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    content: str


class SummaryMessage(BaseModel):
    """Condensed summary of earlier turns, sent as plain content."""
    model_config = ConfigDict(frozen=True)

    role: Literal["summary"] = "summary"
    content: str


class AssistantMessage(BaseModel):
    """Prior model output: optional text and optional tool calls."""
    model_config = ConfigDict(frozen=True)

    role: Literal["assistant"] = "assistant"
    content: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None


class ToolOutputMessage(BaseModel):
    """Result of running the tool requested by ``tool_call``."""
    model_config = ConfigDict(frozen=True)

    role: Literal["tool_output"] = "tool_output"
    tool_call: ToolCall
    output: Optional[str] = None


ChatMessage = Annotated[
    Union[SystemMessage, UserMessage, SummaryMessage, AssistantMessage, ToolOutputMessage],
    Field(discriminator="role"),
]


# ------------------------------------------------------------------------------
# Request / response
# ------------------------------------------------------------------------------

class ChatCompletionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    messages: List[ChatMessage]
    tools_spec: List[ToolSpec] = Field(default_factory=list)

    @field_validator("tools_spec")
    @classmethod
    def _unique_tool_names(cls, tools_spec: List[ToolSpec]) -> List[ToolSpec]:
        names = [spec.name for spec in tools_spec]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate tool names: {', '.join(duplicates)}")
        return tools_spec


class ChatCompletionResponse(BaseModel):
    """Normalized model output.

    ``tool_calls`` is either ``None`` or a non-empty list; an empty list is
    normalized to ``None`` so callers only ever check for absence.
    """
    model_config = ConfigDict(frozen=True)

    message: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None

    @field_validator("tool_calls")
    @classmethod
    def _empty_tool_calls_to_none(cls, tool_calls: Optional[List[ToolCall]]) -> Optional[List[ToolCall]]:
        return tool_calls or None
