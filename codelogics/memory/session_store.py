"""Persistent collection of chat sessions.

The whole collection lives in one JSON document under a fixed namespace
key.  It is always loaded and written back as a whole; there is a single
writer, so no locking is involved.  A missing file, a missing key or an
unreadable document all read as an empty collection.
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from pydantic import ValidationError

from ..config.app_config import AppConfig, get_app_config
from ..models.chat_session import ChatMessage, ChatSession, title_from
from ..models.enums import MessageSender

STORAGE_NAMESPACE = "codeLogicsLabsChats"


class ChatSessionStore:
    """Ordered list of chat sessions, oldest first.

    When saved, only the most recent ``max_sessions`` sessions are kept.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        max_sessions: int = 50,
        namespace: str = STORAGE_NAMESPACE,
    ) -> None:
        self._path = Path(path)
        self._namespace = namespace
        self.max_sessions = max_sessions
        self._sessions: list[ChatSession] = []
        self.load()

    @classmethod
    def from_config(cls, app_config: AppConfig | None = None) -> "ChatSessionStore":
        app_config = app_config or get_app_config()
        return cls(app_config.chat_store_path, max_sessions=app_config.chat_history_limit)

    @property
    def sessions(self) -> list[ChatSession]:
        return list(self._sessions)

    # ------------------------------------------------------------------
    # Queries

    def get(self, session_id: str) -> Optional[ChatSession]:
        for session in self._sessions:
            if session.id == session_id:
                return session
        return None

    def latest(self) -> Optional[ChatSession]:
        return self._sessions[-1] if self._sessions else None

    def recent(self, limit: int = 8) -> list[ChatSession]:
        """Return the last ``limit`` sessions, oldest first."""
        if limit <= 0:
            return []
        return self._sessions[-limit:]

    # ------------------------------------------------------------------
    # Mutations

    def create_session(self, first_message: str) -> ChatSession:
        """Start a session whose first turn is the user's ``first_message``."""
        session_id = str(int(time.time() * 1000))
        while self.get(session_id) is not None:
            session_id = str(int(session_id) + 1)
        session = ChatSession(id=session_id, title=title_from(first_message))
        session.add_message(first_message, MessageSender.USER)
        self._sessions.append(session)
        logger.debug("Created chat session {}", session_id)
        return session

    def add_message(self, session_id: str, text: str, sender: MessageSender) -> ChatMessage:
        session = self.get(session_id)
        if session is None:
            raise KeyError(f"Unknown chat session {session_id}")
        return session.add_message(text, sender)

    def refresh_title(self, session_id: str) -> None:
        session = self.get(session_id)
        if session is not None:
            session.refresh_title()

    def delete(self, session_id: str) -> bool:
        before = len(self._sessions)
        self._sessions = [s for s in self._sessions if s.id != session_id]
        return len(self._sessions) != before

    # ------------------------------------------------------------------
    # Persistence helpers

    def load(self) -> list[ChatSession]:
        """Replace the in-memory collection with the persisted one."""
        self._sessions = []
        document = self._read_document()
        raw_sessions = document.get(self._namespace)
        if not isinstance(raw_sessions, list):
            return self.sessions
        for payload in raw_sessions:
            try:
                self._sessions.append(ChatSession.model_validate(payload))
            except ValidationError as exc:
                logger.warning("Skipping unreadable chat session in {}: {}", self._path, exc)
        return self.sessions

    def save(self) -> None:
        """Write the whole collection back, evicting the oldest sessions."""
        if len(self._sessions) > self.max_sessions:
            self._sessions = self._sessions[-self.max_sessions:]
        document = self._read_document()
        document[self._namespace] = [s.model_dump(mode="json") for s in self._sessions]
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(document, handle, ensure_ascii=False, indent=2)
        tmp_path.replace(self._path)

    def _read_document(self) -> dict[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to read chat sessions from {}: {}", self._path, exc)
            return {}
        return document if isinstance(document, dict) else {}
