from typing import Any, Callable, Dict, Optional

from mcp.server.fastmcp import FastMCP

from chat_completion import ChatCompletionRequest
from mcp_tools.schemas import ChatCompletionArgs, PromptArgs
from providers import get_provider
from providers.base import ChatCompletion


async def run_chat_completion(provider: ChatCompletion, args: ChatCompletionArgs) -> Dict[str, Any]:
    """Complete the conversation in ``args`` and return the response as plain data."""
    request = ChatCompletionRequest(messages=args.messages, tools_spec=args.tools_spec)
    response = await provider.complete(request)
    return response.model_dump()


def register_chat_tools(mcp: FastMCP, provider_factory: Callable[[], ChatCompletion] = get_provider):
    """Register chat-completion tools.

    The provider is created on first use so the server can start without
    vendor credentials.
    """

    # Track chat tools for list_tools() function
    if not hasattr(mcp, '_chat_tools_registry'):
        mcp._chat_tools_registry = []

    provider: Optional[ChatCompletion] = None

    def _provider() -> ChatCompletion:
        nonlocal provider
        if provider is None:
            provider = provider_factory()
        return provider

    # ------------------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------------------

    @mcp.tool()
    async def chat_completion(args: ChatCompletionArgs) -> Any:
        """Run one chat completion; returns {"message", "tool_calls"}."""
        return await run_chat_completion(_provider(), args)

    mcp._chat_tools_registry.append({
        "name": "chat_completion",
        "description": "Run one chat completion; returns {\"message\", \"tool_calls\"}.",
        "category": "completion"
    })

    @mcp.tool()
    async def prompt(args: PromptArgs) -> Any:
        """Send a single user message and return the model's text."""
        return await _provider().prompt(args.prompt)

    mcp._chat_tools_registry.append({
        "name": "prompt",
        "description": "Send a single user message and return the model's text.",
        "category": "completion"
    })

    @mcp.tool()
    def list_tools() -> Any:
        """List the tools registered on this server."""
        return list(mcp._chat_tools_registry)

    mcp._chat_tools_registry.append({
        "name": "list_tools",
        "description": "List the tools registered on this server.",
        "category": "meta"
    })
