"""
Shared pytest fixtures for anthropic-chat tests
"""
import json

import anthropic
import httpx
import pytest
import pytest_asyncio
from mcp.server.fastmcp import FastMCP

from chat_completion import ParamSpec, ToolSpec

TEST_BASE_URL = "https://api.test.example.com"


@pytest.fixture
def mcp_server():
    """Create a fresh FastMCP server instance for testing"""
    return FastMCP("test-anthropic-chat")


@pytest.fixture
def weather_tool_spec():
    """Tool spec for a weather lookup with one required parameter"""
    return ToolSpec(
        name="get_weather",
        description="Gets the weather",
        parameters=[ParamSpec(name="location", description="Location", required=True)],
    )


def _message(content, stop_reason="end_turn"):
    return {
        "id": "msg_016zKNb88WhhgBQXhSaQf1rs",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-5-sonnet-20241022",
        "content": content,
        "stop_reason": stop_reason,
        "stop_sequence": None,
        "usage": {"input_tokens": 403, "output_tokens": 71},
    }


@pytest.fixture
def message_data():
    """Factory for full Messages API response bodies wrapping the given content blocks"""
    return _message


@pytest.fixture
def text_response_data():
    """Vendor response with a single text block"""
    return _message([{"type": "text", "text": "mocked response"}])


@pytest.fixture
def tool_use_response_data():
    """Vendor response with a text block followed by a tool_use block"""
    return _message(
        [
            {
                "type": "text",
                "text": "I'll check the current weather in San Francisco, CA for you."
            },
            {
                "type": "tool_use",
                "id": "toolu_01E1yxpxXU4hBgCMLzPL1FuR",
                "name": "get_weather",
                "input": {"location": "San Francisco, CA"}
            }
        ],
        stop_reason="tool_use",
    )


@pytest_asyncio.fixture
async def mock_anthropic():
    """Build AsyncAnthropic clients whose HTTP traffic is served by a handler.

    Returns a factory ``(status_code, body) -> (client, captured_requests)``.
    ``body`` is either the JSON reply, a callable building the reply from the
    request body, or an exception raised by the transport. Every request body
    sent by the SDK is appended to ``captured_requests``. Clients are closed
    on teardown.
    """
    clients = []

    def factory(status_code, body):
        captured = []

        def handler(request: httpx.Request):
            request_body = json.loads(request.content.decode())
            captured.append({
                "path": request.url.path,
                "body": request_body,
            })
            if isinstance(body, Exception):
                raise body
            reply = body(request_body) if callable(body) else body
            return httpx.Response(status_code, json=reply)

        client = anthropic.AsyncAnthropic(
            api_key="test-key",
            base_url=TEST_BASE_URL,
            max_retries=0,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
        clients.append(client)
        return client, captured

    yield factory

    for client in clients:
        await client.close()
