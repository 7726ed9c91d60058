"""Process-wide solver configuration.

A :class:`ConfigStore` holds exactly one :class:`SolverConfig` at a time.
Updates replace the whole value under a lock, so readers always see a
credential and target language that were written together.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from interview_solver.exceptions import InvalidConfiguration
from interview_solver.logging import get_logger
from interview_solver.settings import SolverSettings, get_settings

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "Python"


@dataclass(frozen=True)
class SolverConfig:
    """Credential and target language captured by a single request."""

    credential: str
    target_language: str = DEFAULT_LANGUAGE

    def __repr__(self) -> str:
        return f"SolverConfig(credential='***', target_language={self.target_language!r})"


class ConfigStore:
    """Thread-safe holder for the current configuration (last write wins)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._config: SolverConfig | None = None

    @property
    def is_configured(self) -> bool:
        """Whether a valid configuration has been stored."""
        return self.snapshot() is not None

    def snapshot(self) -> SolverConfig | None:
        """Return the current configuration, or None if unconfigured."""
        with self._lock:
            return self._config

    def update(self, credential: str | None, target_language: str | None = None) -> SolverConfig:
        """
        Replace the stored configuration.

        Args:
            credential: Gemini API key. Surrounding whitespace is removed.
            target_language: Language for the generated code. Empty or
                missing values fall back to "Python".

        Returns:
            The newly stored configuration.

        Raises:
            InvalidConfiguration: If the credential is empty after trimming.
                The previous configuration is kept.
        """
        cleaned = (credential or "").strip()
        if not cleaned:
            raise InvalidConfiguration()

        config = SolverConfig(
            credential=cleaned,
            target_language=target_language or DEFAULT_LANGUAGE,
        )
        with self._lock:
            self._config = config

        logger.info("config_updated", target_language=config.target_language)
        return config


def bootstrap_from_environment(
    store: ConfigStore,
    settings: SolverSettings | None = None,
) -> bool:
    """
    Initialize a store from GEMINI_API_KEY / LANGUAGE if they are set.

    A failure here is logged but never raised: the store stays unconfigured
    and callers get NotConfigured on first use.

    Args:
        store: Store to initialize.
        settings: Settings to read from. Defaults to the cached environment settings.

    Returns:
        True if the store was configured from the environment.
    """
    if settings is None:
        settings = get_settings()

    if not settings.gemini_api_key:
        logger.debug("config_bootstrap_skipped", reason="GEMINI_API_KEY not set")
        return False

    try:
        store.update(settings.gemini_api_key, settings.language)
    except InvalidConfiguration as e:
        logger.error("config_bootstrap_failed", error=str(e))
        return False

    return True
