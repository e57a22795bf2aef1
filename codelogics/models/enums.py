"""Enumerations used across models."""

from enum import Enum


class ResponseSource(str, Enum):
    """Stage of the fallback chain that produced a reply.

    The three providers are listed in the order they are tried.
    ``TEMPLATE_FALLBACK`` marks a canned local answer and
    ``EMERGENCY_FALLBACK`` the static text used when even the templates
    could not be produced.
    """

    GROQ = "groq"
    HUGGINGFACE = "huggingface"
    OPENAI = "openai"
    TEMPLATE_FALLBACK = "template_fallback"
    EMERGENCY_FALLBACK = "emergency_fallback"


class TopicCategory(str, Enum):
    """Topics with a pre-authored local answer."""

    BINARY_SEARCH_TREE = "binary-search-tree"
    SORTING_ALGORITHM = "sorting-algorithm"
    UI_COMPONENT_WITH_STATE = "ui-component-with-state"
    REST_API_CRUD = "rest-api-crud"
    GENERIC = "generic"


class MessageSender(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
