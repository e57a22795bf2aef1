"""Adapter for the Hugging Face Inference API text-generation endpoint."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ..config.provider_config import ProviderConfig
from ..models.enums import ResponseSource
from ..prompts.system import HUGGINGFACE_PROMPT_TEMPLATE
from ..utils.api_client import bearer_headers, post
from .base import ProviderAdapter


def extract_generated_text(payload: Any) -> Optional[str]:
    """Pull ``generated_text`` out of either response shape the API uses.

    The endpoint answers with a list of generations for most models and
    with a single object for some; anything else yields ``None``.
    """
    if isinstance(payload, list):
        payload = payload[0] if payload else None
    if isinstance(payload, dict):
        text = payload.get("generated_text")
        return text if isinstance(text, str) else None
    return None


class HuggingFaceAdapter(ProviderAdapter):
    name = "Hugging Face"
    source = ResponseSource.HUGGINGFACE
    credential_env = "HF_API_KEY"

    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str,
        base_url: str,
        temperature: float,
        max_new_tokens: int,
        timeout: float,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(api_key, timeout=timeout)
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.temperature = temperature
        self.max_new_tokens = max_new_tokens
        self._transport = transport

    @classmethod
    def from_config(
        cls, config: ProviderConfig, transport: Optional[httpx.BaseTransport] = None
    ) -> "HuggingFaceAdapter":
        return cls(
            config.hf_api_key,
            model=config.hf_model,
            base_url=config.hf_base_url,
            temperature=config.temperature,
            max_new_tokens=config.hf_max_new_tokens,
            timeout=config.hf_timeout,
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/{self.model}"

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "inputs": HUGGINGFACE_PROMPT_TEMPLATE.format(prompt=prompt),
            "parameters": {
                "max_new_tokens": self.max_new_tokens,
                "temperature": self.temperature,
                "return_full_text": False,
            },
        }

    def _complete(self, prompt: str) -> Optional[str]:
        response = post(
            self.endpoint,
            json=self.build_payload(prompt),
            headers=bearer_headers(self.api_key or ""),
            timeout=self.timeout,
            transport=self._transport,
        )
        return extract_generated_text(response.json())
