"""Prompt construction for screenshot-based interview questions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from interview_solver.images import EncodedImage

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True)
class TextPart:
    """Plain text segment of a message."""

    text: str


MessagePart = TextPart | EncodedImage


@dataclass(frozen=True)
class MultimodalMessage:
    """A single user message mixing text instructions and images."""

    parts: tuple[MessagePart, ...] = field(default_factory=tuple)
    role: str = "user"

    @property
    def texts(self) -> list[str]:
        """Text segments in message order."""
        return [part.text for part in self.parts if isinstance(part, TextPart)]

    @property
    def images(self) -> list[EncodedImage]:
        """Images in message order."""
        return [part for part in self.parts if isinstance(part, EncodedImage)]


def get_system_prompt(target_language: str) -> str:
    """
    Get the framing instruction for the model.

    Args:
        target_language: Programming language the solution should use.

    Returns:
        System prompt string defining the assistant's role.
    """
    return (
        "You are an expert coding interview assistant. Analyze the coding question "
        f"from the screenshots and provide a solution in {target_language}."
    )


def get_user_prompt() -> str:
    """Get the task instruction listing the four required output facets."""
    return (
        "Here is a coding interview question. Please analyze and provide a solution with: "
        "1) A detailed approach to solve the problem that the interviewee will speak out "
        "loud in easy explanatory words, "
        "2) The complete solution code, "
        "3) Big O analysis of time complexity with the reason, "
        "4) Big O analysis of space complexity with the reason."
    )


def build_message(target_language: str, images: Sequence[EncodedImage]) -> MultimodalMessage:
    """
    Assemble the message sent to the model.

    Args:
        target_language: Programming language the solution should use.
        images: Encoded screenshots in submission order.

    Returns:
        MultimodalMessage with both instructions followed by every image.
    """
    return MultimodalMessage(
        parts=(
            TextPart(get_system_prompt(target_language)),
            TextPart(get_user_prompt()),
            *images,
        )
    )
