"""Memory package holding the persisted chat session collection."""

from .session_store import STORAGE_NAMESPACE, ChatSessionStore  # noqa: F401
