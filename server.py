from __future__ import annotations
import sys, logging

from mcp.server.fastmcp import FastMCP

from mcp_tools.tools import register_chat_tools

# Log to STDERR only (stdio transport cannot receive stdout noise)
logging.basicConfig(stream=sys.stderr, level=logging.INFO)
log = logging.getLogger("anthropic-chat")

mcp = FastMCP("anthropic-chat")

register_chat_tools(mcp)

if __name__ == "__main__":
    log.info("Starting anthropic-chat MCP server (stdio)")
    mcp.run(transport="stdio")
