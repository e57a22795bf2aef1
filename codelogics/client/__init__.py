"""Client side of the chat: talks to the API and keeps the session history."""

from .chat_client import ChatClient  # noqa: F401
