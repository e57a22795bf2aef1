"""Static text: provider system instructions and local answer templates."""

from .system import (  # noqa: F401
    GROQ_SYSTEM_PROMPT,
    HUGGINGFACE_PROMPT_TEMPLATE,
    OPENAI_SYSTEM_PROMPT,
)
from .templates import (  # noqa: F401
    BINARY_SEARCH_TREE_RESPONSE,
    GENERIC_RESPONSE,
    NON_DEV_RESPONSE,
    REST_API_CRUD_RESPONSE,
    SORTING_ALGORITHM_RESPONSE,
    ULTIMATE_FALLBACK_RESPONSE,
    UI_COMPONENT_WITH_STATE_RESPONSE,
)
