"""Screenshot loading and encoding.

Screenshots are read concurrently and handed to the prompt builder as
base64-encoded images, in the order the caller submitted them.
"""

from __future__ import annotations

import asyncio
import base64
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from interview_solver.exceptions import ImageReadFailure
from interview_solver.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

logger = get_logger(__name__)

DEFAULT_MIME_TYPE = "image/png"

# (magic prefix, mime type)
_IMAGE_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)


@dataclass(frozen=True)
class ScreenshotReference:
    """A screenshot file supplied for a single request."""

    path: str

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> ScreenshotReference:
        """Create a reference from a string or path-like object."""
        return cls(path=os.fspath(path))


@dataclass(frozen=True)
class EncodedImage:
    """Base64-encoded screenshot ready to be attached to a message."""

    payload: str
    mime_type: str = DEFAULT_MIME_TYPE
    media_kind: str = "image"

    def to_bytes(self) -> bytes:
        """Decode the payload back to raw image bytes."""
        return base64.b64decode(self.payload)


def detect_mime_type(data: bytes) -> str:
    """Guess the image MIME type from its leading bytes."""
    for signature, mime_type in _IMAGE_SIGNATURES:
        if data.startswith(signature):
            return mime_type
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return DEFAULT_MIME_TYPE


def encode_image(data: bytes) -> EncodedImage:
    """Encode raw image bytes for transport."""
    return EncodedImage(
        payload=base64.b64encode(data).decode("utf-8"),
        mime_type=detect_mime_type(data),
    )


async def read_screenshot(path: str) -> bytes:
    """Read a screenshot file without blocking the event loop."""
    return await asyncio.to_thread(Path(path).read_bytes)


async def _load_one(
    screenshot: ScreenshotReference,
    reader: Callable[[str], Awaitable[bytes]],
) -> EncodedImage:
    try:
        data = await reader(screenshot.path)
    except OSError as e:
        logger.warning("screenshot_read_failed", path=screenshot.path, error=str(e))
        raise ImageReadFailure(screenshot.path, e.strerror or str(e)) from e
    return encode_image(data)


async def load_images(
    screenshots: Sequence[ScreenshotReference],
    *,
    reader: Callable[[str], Awaitable[bytes]] = read_screenshot,
) -> list[EncodedImage]:
    """
    Read and encode screenshots concurrently.

    The first failed read cancels the reads still in flight.

    Args:
        screenshots: Screenshots in submission order.
        reader: Coroutine function returning the bytes stored at a path.

    Returns:
        Encoded images in the same order as ``screenshots``.

    Raises:
        ImageReadFailure: If any screenshot cannot be read.
    """
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(_load_one(s, reader)) for s in screenshots]
    except ExceptionGroup as eg:
        failures = [e for e in eg.exceptions if isinstance(e, ImageReadFailure)]
        if len(failures) != len(eg.exceptions):
            raise
        # Report the earliest submitted screenshot among those that failed
        position = {s.path: i for i, s in reversed(list(enumerate(screenshots)))}
        failure = min(failures, key=lambda e: position[e.path])
        raise failure from failure.__cause__

    images = [task.result() for task in tasks]

    logger.debug(
        "screenshots_loaded",
        count=len(images),
        payload_size=sum(len(image.payload) for image in images),
    )
    return images
