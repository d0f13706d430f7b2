"""Chat-completion provider factory.

Reads LLM_PROVIDER from the environment (default: "anthropic") and returns
the corresponding provider instance. Provider-specific API keys and model
overrides are also read from env vars (see .env.example).
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .base import ChatCompletion

# Load env from a local .env (works whether launched from the project dir or elsewhere)
load_dotenv()
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env", override=False)

log = logging.getLogger("anthropic-chat")

SUPPORTED_PROVIDERS = ("anthropic",)


def get_provider(name: str | None = None) -> ChatCompletion:
    """Return a ChatCompletion provider for the given (or configured) provider name.

    Args:
        name: Currently only "anthropic".
              Falls back to the LLM_PROVIDER env var, then to "anthropic".
    """
    provider_name = (name or os.getenv("LLM_PROVIDER", "anthropic")).lower().strip()

    if provider_name == "anthropic":
        from .anthropic_provider import AnthropicProvider, DEFAULT_MODEL
        log.info("Using Anthropic (Claude) provider, model: %s", os.getenv("ANTHROPIC_MODEL", DEFAULT_MODEL))
        return AnthropicProvider()

    raise ValueError(
        f"Unknown LLM_PROVIDER: {provider_name!r}. "
        f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
    )
