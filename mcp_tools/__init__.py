"""MCP tools exposing chat completion."""
