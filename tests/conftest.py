"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from interview_solver.config import ConfigStore
from interview_solver.schemas import SolutionSchema

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

# Smallest valid PNG header, enough for MIME sniffing
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 16


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests (requires GEMINI_API_KEY)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly enabled."""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Remove solver environment variables and any .env file from scope."""
    for var in ("GEMINI_API_KEY", "LANGUAGE", "LOG_LEVEL", "LOG_JSON_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def configured_store() -> ConfigStore:
    """Store configured with a test credential and Python."""
    store = ConfigStore()
    store.update("sk-test")
    return store


@pytest.fixture
def screenshot_files(tmp_path: Path) -> list[Path]:
    """Three screenshot files on disk."""
    paths = []
    for name, data in (("a.png", PNG_BYTES + b"A"), ("b.jpg", JPEG_BYTES), ("c.png", b"C")):
        path = tmp_path / name
        path.write_bytes(data)
        paths.append(path)
    return paths


@pytest.fixture
def sample_solution() -> SolutionSchema:
    """Schema-conformant solution."""
    return SolutionSchema(
        approach="Walk the array once keeping a hash map of seen values.",
        code="def two_sum(nums, target):\n    ...",
        time_complexity="O(n): single pass",
        space_complexity="O(n): hash map of seen values",
    )


@pytest.fixture
def fake_generator(sample_solution: SolutionSchema) -> MagicMock:
    """Generator double returning ``sample_solution``."""
    generator = MagicMock()
    generator.generate = AsyncMock(return_value=sample_solution)
    return generator


@pytest.fixture
def png_bytes() -> bytes:
    """Bytes that sniff as a PNG image."""
    return PNG_BYTES


@pytest.fixture
def jpeg_bytes() -> bytes:
    """Bytes that sniff as a JPEG image."""
    return JPEG_BYTES
