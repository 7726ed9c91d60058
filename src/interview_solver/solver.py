"""Screenshot-to-solution pipeline.

The host application owns a :class:`ScreenshotSolver` and its
:class:`~interview_solver.config.ConfigStore`. Each call captures the
configuration once, loads the screenshots, builds the prompt and asks the
generator for a schema-conformant solution.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Mapping
from typing import TYPE_CHECKING

import structlog

from interview_solver.config import ConfigStore, SolverConfig, bootstrap_from_environment
from interview_solver.exceptions import InvalidRequest, NotConfigured
from interview_solver.images import ScreenshotReference, load_images, read_screenshot
from interview_solver.llm.gemini import GeminiSolutionGenerator
from interview_solver.logging import configure_logging, get_logger
from interview_solver.settings import get_settings
from interview_solver.prompts import build_message
from interview_solver.schemas import ProcessedSolution, SolutionSchema, to_processed_solution

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from interview_solver.llm.base import SolutionGenerator
    from interview_solver.settings import SolverSettings

logger = get_logger(__name__)

ScreenshotInput = ScreenshotReference | Mapping[str, str] | str | os.PathLike[str]


def default_generator_factory(config: SolverConfig) -> SolutionGenerator:
    """Create a Gemini generator bound to the captured credential."""
    return GeminiSolutionGenerator(api_key=config.credential)


def _as_reference(screenshot: ScreenshotInput) -> ScreenshotReference:
    if isinstance(screenshot, ScreenshotReference):
        return screenshot
    if isinstance(screenshot, Mapping):
        if "path" not in screenshot:
            raise InvalidRequest("Screenshot mapping has no 'path' key")
        return ScreenshotReference.from_path(screenshot["path"])
    return ScreenshotReference.from_path(screenshot)


class ScreenshotSolver:
    """Turns interview-question screenshots into a structured solution."""

    def __init__(
        self,
        store: ConfigStore | None = None,
        *,
        generator_factory: Callable[[SolverConfig], SolutionGenerator] | None = None,
        reader: Callable[[str], Awaitable[bytes]] | None = None,
    ) -> None:
        """
        Initialize the solver.

        Args:
            store: Configuration store. A new, unconfigured store is created if omitted.
            generator_factory: Builds a generator from the captured configuration.
            reader: Coroutine function used to read screenshot bytes.
        """
        self.store = store if store is not None else ConfigStore()
        self._generator_factory = generator_factory or default_generator_factory
        self._reader = reader or read_screenshot

    def update_config(self, credential: str | None, target_language: str | None = None) -> None:
        """Replace the credential and target language used by subsequent calls."""
        self.store.update(credential, target_language)

    async def process_screenshots(
        self,
        screenshots: Sequence[ScreenshotInput],
    ) -> ProcessedSolution:
        """
        Solve the interview question shown in ``screenshots``.

        Args:
            screenshots: Screenshot paths in the order the model should see them.

        Returns:
            ProcessedSolution with approach, code and complexity analysis.

        Raises:
            NotConfigured: If no valid configuration exists. Nothing is read or sent.
            InvalidRequest: If ``screenshots`` is empty.
            ImageReadFailure: If any screenshot cannot be read.
            UpstreamFailure: If the Gemini call fails.
            SchemaViolation: If the Gemini output does not match the schema.
        """
        config = self.store.snapshot()
        if config is None:
            raise NotConfigured()

        references = [_as_reference(s) for s in screenshots]
        if not references:
            raise InvalidRequest("At least one screenshot is required")

        with structlog.contextvars.bound_contextvars(call_id=uuid.uuid4().hex[:12]):
            logger.info(
                "process_screenshots_started",
                screenshot_count=len(references),
                target_language=config.target_language,
            )

            images = await load_images(references, reader=self._reader)
            message = build_message(config.target_language, images)

            generator = self._generator_factory(config)
            result = await generator.generate(message, SolutionSchema)

            logger.info("process_screenshots_completed", screenshot_count=len(references))
        return to_processed_solution(result)


def create_solver_from_environment(settings: SolverSettings | None = None) -> ScreenshotSolver:
    """
    Create a solver whose store is initialized from GEMINI_API_KEY / LANGUAGE.

    Logging is configured from LOG_LEVEL / LOG_JSON_FORMAT first, so bootstrap
    failures are reported in the configured format. The returned solver is then
    unconfigured until ``update_config`` succeeds.
    """
    if settings is None:
        settings = get_settings()

    configure_logging(log_level=settings.log_level, json_format=settings.log_json_format)

    solver = ScreenshotSolver()
    bootstrap_from_environment(solver.store, settings)
    return solver
