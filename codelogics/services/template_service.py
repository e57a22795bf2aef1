"""Local answers used when no provider produced a reply."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..models.enums import TopicCategory
from ..prompts.templates import (
    BINARY_SEARCH_TREE_RESPONSE,
    GENERIC_RESPONSE,
    NON_DEV_RESPONSE,
    REST_API_CRUD_RESPONSE,
    SORTING_ALGORITHM_RESPONSE,
    ULTIMATE_FALLBACK_RESPONSE,
    UI_COMPONENT_WITH_STATE_RESPONSE,
)

TEMPLATES: Mapping[TopicCategory, str] = MappingProxyType(
    {
        TopicCategory.BINARY_SEARCH_TREE: BINARY_SEARCH_TREE_RESPONSE,
        TopicCategory.SORTING_ALGORITHM: SORTING_ALGORITHM_RESPONSE,
        TopicCategory.UI_COMPONENT_WITH_STATE: UI_COMPONENT_WITH_STATE_RESPONSE,
        TopicCategory.REST_API_CRUD: REST_API_CRUD_RESPONSE,
        TopicCategory.GENERIC: GENERIC_RESPONSE,
    }
)


class TemplateService:
    """Looks up the canned answer for a topic."""

    def __init__(self, templates: Mapping[TopicCategory, str] | None = None) -> None:
        self._templates = templates if templates is not None else TEMPLATES

    def respond(self, category: TopicCategory) -> str:
        """Return the template for ``category``, or the generic one if it has none."""
        return self._templates.get(category) or self._templates[TopicCategory.GENERIC]

    @staticmethod
    def non_development_response() -> str:
        return NON_DEV_RESPONSE

    @staticmethod
    def ultimate_fallback() -> str:
        return ULTIMATE_FALLBACK_RESPONSE
