"""Orchestration service behind the code generation endpoint.

The CodeService asks each configured provider in turn for an answer and
falls back to the local templates when none of them replies.  Apart
from an empty prompt, nothing a caller passes in makes it fail: every
unexpected error degrades to a template answer and, if even that is
impossible, to a fixed static reply.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

from loguru import logger

from ..models.enums import ResponseSource
from ..models.generation import GenerationResult
from ..providers import ProviderAdapter, build_default_providers
from ..utils.error_handler import PromptValidationError
from .template_service import TemplateService
from .topic_classifier import classify_topic, is_development_related

INVALID_PROMPT_MESSAGE = "Please provide a valid prompt"


class CodeService:
    """Coordinates the provider fallback chain and the local templates.

    Providers are tried sequentially in the order given; a lower priority
    provider is only asked after every earlier one came back empty.
    """

    def __init__(
        self,
        providers: Sequence[ProviderAdapter] | None = None,
        templates: TemplateService | None = None,
    ) -> None:
        self.providers: list[ProviderAdapter] = list(
            providers if providers is not None else build_default_providers()
        )
        self.templates = templates or TemplateService()

    def generate(self, raw_prompt: str) -> GenerationResult:
        """Produce an answer for a developer prompt.

        Parameters
        ----------
        raw_prompt: str
            The prompt as received; surrounding whitespace is removed.

        Returns
        -------
        GenerationResult
            Non-empty reply text and the stage that produced it.

        Raises
        ------
        PromptValidationError
            If the prompt is not a string or is blank.
        """
        prompt = self._clean_prompt(raw_prompt)
        logger.info("Received prompt: {!r}", prompt[:80])
        try:
            return self._run_chain(prompt)
        except Exception:
            logger.exception("Generation failed, recovering with a local template")
            return self._recover(prompt)

    @staticmethod
    def _clean_prompt(raw_prompt: object) -> str:
        if not isinstance(raw_prompt, str) or not raw_prompt.strip():
            raise PromptValidationError(INVALID_PROMPT_MESSAGE)
        return raw_prompt.strip()

    def _run_chain(self, prompt: str) -> GenerationResult:
        if not is_development_related(prompt):
            logger.info("Prompt is not development related")
            return GenerationResult(
                self.templates.non_development_response(),
                ResponseSource.TEMPLATE_FALLBACK,
            )

        for provider in self.providers:
            text = provider.call(prompt)
            if text:
                return GenerationResult(text, provider.source)

        logger.info("No provider available, using template fallback")
        return self._template_result(prompt)

    def _template_result(self, prompt: str) -> GenerationResult:
        category = classify_topic(prompt)
        logger.debug("Prompt classified as {}", category.value)
        return GenerationResult(self.templates.respond(category), ResponseSource.TEMPLATE_FALLBACK)

    def _recover(self, prompt: str) -> GenerationResult:
        try:
            return self._template_result(prompt)
        except Exception:
            logger.exception("Template fallback failed, using emergency fallback")
        return GenerationResult(
            TemplateService.ultimate_fallback(),
            ResponseSource.EMERGENCY_FALLBACK,
        )


@lru_cache()
def get_code_service() -> CodeService:
    """Return a cached CodeService built from the environment."""
    return CodeService()
