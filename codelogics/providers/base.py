"""Common behaviour of the completion provider adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from loguru import logger

from ..models.enums import ResponseSource
from ..utils.error_handler import unavailable_on_error


class ProviderAdapter(ABC):
    """One outbound completion call to an external provider.

    Subclasses implement :meth:`_complete`.  :meth:`call` never raises:
    a missing credential, a transport failure, a timeout, an error
    status or a reply without usable text all come back as ``None``.
    """

    name: str = "provider"
    source: ResponseSource
    credential_env: str = ""

    def __init__(self, api_key: Optional[str], *, timeout: float) -> None:
        self.api_key = api_key
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @unavailable_on_error
    def call(self, prompt: str) -> Optional[str]:
        """Return the provider's reply to ``prompt`` or ``None`` if unavailable."""
        if not self.configured:
            logger.warning("{} not configured", self.credential_env or self.name)
            return None

        text = self._complete(prompt)
        if not isinstance(text, str) or not text.strip():
            logger.warning("{} returned no text", self.name)
            return None

        logger.info("{} success ({} characters)", self.name, len(text))
        return text

    @abstractmethod
    def _complete(self, prompt: str) -> Optional[str]:
        """Issue the request and extract the generated text."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(configured={self.configured}, timeout={self.timeout})"
