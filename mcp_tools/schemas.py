from typing import List

from pydantic import BaseModel, Field

from chat_completion import ChatMessage, ToolSpec


# ------------------------------------------------------------------------------
# Schemas
# ------------------------------------------------------------------------------

class ChatCompletionArgs(BaseModel):
    messages: List[ChatMessage] = Field(
        ...,
        min_length=1,
        description='Ordered conversation, e.g. [{"role": "user", "content": "hello"}]. '
                    'Roles: system, user, summary, assistant, tool_output',
    )
    tools_spec: List[ToolSpec] = Field(default_factory=list, description="Tools the model may call (unique names)")


class PromptArgs(BaseModel):
    prompt: str = Field(..., min_length=1, description="Single user message to send")
