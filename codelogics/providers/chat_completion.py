"""Adapters for OpenAI-compatible chat completion APIs (Groq, OpenAI).

Requests go through LangChain's :class:`~langchain_openai.ChatOpenAI`
with retries disabled, so every adapter makes exactly one attempt
bounded by its own timeout.
"""

from __future__ import annotations

from typing import Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI

from ..config.provider_config import ProviderConfig
from ..models.enums import ResponseSource
from ..prompts.system import GROQ_SYSTEM_PROMPT, OPENAI_SYSTEM_PROMPT
from .base import ProviderAdapter


class ChatCompletionAdapter(ProviderAdapter):
    """Sends a system instruction plus the user prompt to a chat model."""

    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str,
        system_prompt: str,
        temperature: float,
        max_tokens: int,
        timeout: float,
        base_url: Optional[str] = None,
    ) -> None:
        super().__init__(api_key, timeout=timeout)
        self.model = model
        self.system_prompt = system_prompt
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.base_url = base_url
        self._llm: ChatOpenAI | None = None
        self._prompt_template = ChatPromptTemplate.from_messages(
            [
                ("system", "{system_prompt}"),
                ("human", "{user_prompt}"),
            ]
        )

    def _build_llm(self) -> ChatOpenAI:
        llm_kwargs: dict[str, object] = {
            "api_key": self.api_key,
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "timeout": self.timeout,
            "max_retries": 0,
        }
        if self.base_url:
            llm_kwargs["base_url"] = self.base_url
        return ChatOpenAI(**llm_kwargs)

    def _complete(self, prompt: str) -> Optional[str]:
        if self._llm is None:
            self._llm = self._build_llm()
        messages = self._prompt_template.format_messages(
            system_prompt=self.system_prompt,
            user_prompt=prompt,
        )
        reply = self._llm.invoke(messages)
        content = getattr(reply, "content", None)
        return content if isinstance(content, str) else None


class GroqAdapter(ChatCompletionAdapter):
    name = "Groq"
    source = ResponseSource.GROQ
    credential_env = "GROQ_API_KEY"

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "GroqAdapter":
        return cls(
            config.groq_api_key,
            model=config.groq_model,
            system_prompt=GROQ_SYSTEM_PROMPT,
            temperature=config.temperature,
            max_tokens=config.groq_max_tokens,
            timeout=config.groq_timeout,
            base_url=config.groq_base_url,
        )


class OpenAIAdapter(ChatCompletionAdapter):
    name = "OpenAI"
    source = ResponseSource.OPENAI
    credential_env = "OPENAI_API_KEY"

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "OpenAIAdapter":
        return cls(
            config.openai_api_key,
            model=config.openai_model,
            system_prompt=OPENAI_SYSTEM_PROMPT,
            temperature=config.temperature,
            max_tokens=config.openai_max_tokens,
            timeout=config.openai_timeout,
            base_url=config.openai_base_url,
        )
