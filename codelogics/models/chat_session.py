"""Models representing stored chat sessions."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field

from .enums import MessageSender

TITLE_LENGTH = 40


def title_from(text: str) -> str:
    """Derive a session title from the leading characters of a message."""
    return text[:TITLE_LENGTH] + "..."


class ChatMessage(BaseModel):
    """A single turn in a chat session."""

    text: str
    sender: MessageSender
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ChatSession(BaseModel):
    """A conversation between the user and the assistant.

    The ``id`` is the creation time in milliseconds, so sessions sort
    chronologically by identifier as well as by position in the store.
    ``messages`` holds the turns in the order they were exchanged.
    """

    id: str = Field(..., description="Unique identifier for the session.")
    title: str = Field(..., description="Label shown in the chat history list.")
    messages: List[ChatMessage] = Field(default_factory=list)

    def add_message(self, text: str, sender: MessageSender) -> ChatMessage:
        """Append a new message and return it."""
        message = ChatMessage(text=text, sender=sender)
        self.messages.append(message)
        return message

    def refresh_title(self) -> None:
        """Recompute the title from the first message, if there is one."""
        if self.messages:
            self.title = title_from(self.messages[0].text)
