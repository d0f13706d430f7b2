"""Exceptions raised by chat-completion providers."""
from __future__ import annotations


class ChatCompletionError(Exception):
    """Base class for every chat-completion failure."""


class TranslationError(ChatCompletionError):
    """A message, tool spec or vendor response could not be converted.

    Raised for one call only and never retried; the underlying cause is
    chained as ``__cause__``.
    """


class VendorCallError(ChatCompletionError):
    """The vendor API call failed (network, auth, rate limit, bad response).

    The SDK exception is chained as ``__cause__`` and left uninterpreted.
    """
