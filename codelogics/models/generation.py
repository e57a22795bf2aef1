"""Result returned by the code generation service."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ResponseSource


@dataclass(frozen=True)
class GenerationResult:
    """Reply text together with the stage that produced it."""

    text: str
    source: ResponseSource

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("GenerationResult text must not be empty")
