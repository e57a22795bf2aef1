"""Completion provider adapters and the default fallback order."""

from __future__ import annotations

from ..config.provider_config import ProviderConfig, get_provider_config
from .base import ProviderAdapter
from .chat_completion import ChatCompletionAdapter, GroqAdapter, OpenAIAdapter
from .huggingface import HuggingFaceAdapter

__all__ = [
    "ChatCompletionAdapter",
    "GroqAdapter",
    "HuggingFaceAdapter",
    "OpenAIAdapter",
    "ProviderAdapter",
    "build_default_providers",
]


def build_default_providers(config: ProviderConfig | None = None) -> list[ProviderAdapter]:
    """Return the adapters in priority order: Groq, Hugging Face, OpenAI."""
    config = config or get_provider_config()
    return [
        GroqAdapter.from_config(config),
        HuggingFaceAdapter.from_config(config),
        OpenAIAdapter.from_config(config),
    ]
