"""Chat client for the code generation API.

Keeps track of the current conversation, sends prompts to
``POST /api/code/generate`` and stores both sides of every exchange in a
:class:`~codelogics.memory.session_store.ChatSessionStore`.  A reply is
rendered to HTML on demand with the markdown renderer.
"""

from __future__ import annotations

import html
from typing import Optional

import httpx
from loguru import logger

from ..config.app_config import get_app_config
from ..memory.session_store import ChatSessionStore
from ..models.chat_session import ChatSession
from ..models.enums import MessageSender
from ..utils.api_client import post
from ..utils.markdown_renderer import render

EMPTY_REPLY_MESSAGE = "Sorry, I could not generate a response."
CONNECTION_ERROR_MESSAGE = "Sorry, there was an error connecting to the AI. Please try again."


class ChatClient:
    """Sends one prompt at a time and records the conversation.

    While a request is in flight :attr:`pending` is set and further calls
    to :meth:`send` are ignored.
    """

    def __init__(
        self,
        store: ChatSessionStore,
        base_url: str | None = None,
        *,
        timeout: float = 90.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.store = store
        self.base_url = (base_url or get_app_config().api_base_url).rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self.current_session_id: Optional[str] = None
        self.pending = False

    @property
    def current_session(self) -> Optional[ChatSession]:
        if self.current_session_id is None:
            return None
        return self.store.get(self.current_session_id)

    def send(self, message: str) -> Optional[str]:
        """Send ``message`` and return the assistant's reply.

        Returns ``None`` without doing anything when the message is blank
        or another request is still pending.  An error status with a JSON
        body is treated like any other reply.  A failure to reach the
        server, or a body that is not JSON, yields the connection apology,
        which is not stored.
        """
        message = message.strip()
        if not message or self.pending:
            return None

        if self.current_session is None:
            session = self.store.create_session(message)
            self.current_session_id = session.id
        else:
            self.store.add_message(self.current_session_id, message, MessageSender.USER)

        self.pending = True
        try:
            reply = self._request_reply(message)
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Request to {} failed: {}", self.base_url, exc)
            return CONNECTION_ERROR_MESSAGE
        finally:
            self.pending = False

        self.store.add_message(self.current_session_id, reply, MessageSender.ASSISTANT)
        self.store.refresh_title(self.current_session_id)
        self.store.save()
        return reply

    def _request_reply(self, message: str) -> str:
        try:
            response = post(
                f"{self.base_url}/api/code/generate",
                json={"prompt": message},
                timeout=self.timeout,
                transport=self._transport,
            )
        except httpx.HTTPStatusError as exc:
            # The server answered; its body decides the reply.
            logger.warning("Server replied {} to the prompt", exc.response.status_code)
            response = exc.response
        data = response.json()
        reply = data.get("code") if isinstance(data, dict) else None
        return reply if isinstance(reply, str) and reply else EMPTY_REPLY_MESSAGE

    def new_chat(self) -> None:
        """Forget the current session; the next message starts a new one."""
        self.current_session_id = None

    def load_chat(self, session_id: str) -> Optional[ChatSession]:
        session = self.store.get(session_id)
        if session is not None:
            self.current_session_id = session.id
        return session

    def load_last_chat(self) -> Optional[ChatSession]:
        session = self.store.latest()
        if session is not None:
            self.current_session_id = session.id
        return session

    def recent_sessions(self, limit: int = 8) -> list[ChatSession]:
        return self.store.recent(limit)

    @staticmethod
    def render_message(text: str, sender: MessageSender) -> str:
        """Return the HTML for one message as it appears in the transcript."""
        if sender == MessageSender.ASSISTANT:
            return render(text)
        return html.escape(text, quote=False).replace("\n", "<br>")
