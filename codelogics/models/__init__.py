"""Expose commonly used model classes at the package level.

Importing these classes here allows consumers to write concise imports like::

    from codelogics.models import CodeRequest, GenerationResult, ChatSession
"""

from .chat_session import ChatMessage, ChatSession  # noqa: F401
from .code_request import CodeRequest  # noqa: F401
from .code_response import CodeHealthResponse, CodeResponse, HealthResponse  # noqa: F401
from .enums import MessageSender, ResponseSource, TopicCategory  # noqa: F401
from .generation import GenerationResult  # noqa: F401
