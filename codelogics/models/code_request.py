"""Request model for the code generation API."""

import re

from pydantic import BaseModel, Field, field_validator

PROMPT_MIN_LENGTH = 3
PROMPT_MAX_LENGTH = 5000
_ALLOWED_PROMPT = re.compile(r"^[a-zA-Z0-9\s.,!?;:()\[\]{}'\"\-_+=*/\\<>@#$%&]*$")


class CodeRequest(BaseModel):
    """Represents a request payload for ``POST /api/code/generate``.

    The prompt is trimmed before any check.  It must then hold between
    3 and 5000 characters drawn from printable ASCII letters, digits,
    whitespace and common punctuation.  Violations are reported by the
    application's validation handler as HTTP 400.
    """

    prompt: str = Field(..., description="The developer's question or request.")

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Prompt is required")
        if not PROMPT_MIN_LENGTH <= len(value) <= PROMPT_MAX_LENGTH:
            raise ValueError(
                f"Prompt must be between {PROMPT_MIN_LENGTH} and {PROMPT_MAX_LENGTH} characters"
            )
        if not _ALLOWED_PROMPT.match(value):
            raise ValueError("Prompt contains invalid characters")
        return value
