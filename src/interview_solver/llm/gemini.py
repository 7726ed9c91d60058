"""Google Gemini generator with structured output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import aiohttp
import httpx
from google import genai
from google.auth import exceptions as auth_exceptions
from google.genai import errors, types
from pydantic import ValidationError

from interview_solver.exceptions import SchemaViolation, UpstreamFailure
from interview_solver.llm.config import GEMINI_CONFIG
from interview_solver.llm.models import GenerationUsage
from interview_solver.logging import get_logger
from interview_solver.prompts import TextPart
from interview_solver.schemas import SolutionSchema

if TYPE_CHECKING:
    from interview_solver.prompts import MultimodalMessage

logger = get_logger(__name__)

# Transport and response-decoding failures from either async HTTP backend
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (
    httpx.HTTPError,
    aiohttp.ClientError,
    auth_exceptions.TransportError,
    errors.UnknownApiResponseError,
    TimeoutError,
)


def to_contents(message: MultimodalMessage) -> list[types.Content]:
    """Convert a message into Gemini content, keeping part order."""
    parts: list[types.Part] = []
    for part in message.parts:
        if isinstance(part, TextPart):
            parts.append(types.Part.from_text(text=part.text))
        else:
            parts.append(types.Part.from_bytes(data=part.to_bytes(), mime_type=part.mime_type))
    return [types.Content(role=message.role, parts=parts)]


class GeminiSolutionGenerator:
    """Generates interview solutions with Gemini's JSON schema output mode."""

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            api_key: Gemini API key.
            model: Model name to use. Defaults to config default.
        """
        self._api_key = api_key
        self._model = model or GEMINI_CONFIG.default_model
        self._client: genai.Client | None = None

    @property
    def name(self) -> str:
        """Return the provider name."""
        return "google"

    @property
    def model(self) -> str:
        """Return the model name."""
        return self._model

    @property
    def temperature(self) -> float:
        """Return the sampling temperature."""
        return GEMINI_CONFIG.temperature

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def _get_config(self, schema: type[SolutionSchema]) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema,
            temperature=self.temperature,
        )

    def _extract_usage(self, response: Any) -> GenerationUsage:
        input_tokens = 0
        output_tokens = 0
        if hasattr(response, "usage_metadata") and response.usage_metadata:
            input_tokens = getattr(response.usage_metadata, "prompt_token_count", 0) or 0
            output_tokens = getattr(response.usage_metadata, "candidates_token_count", 0) or 0
        return GenerationUsage(
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=self._model,
        )

    async def generate(
        self,
        message: MultimodalMessage,
        schema: type[SolutionSchema] = SolutionSchema,
    ) -> SolutionSchema:
        """
        Generate a solution for the screenshots in ``message``.

        A single request is made; there is no retry.

        Args:
            message: Instructions and screenshots to send.
            schema: Output schema the result must satisfy.

        Returns:
            Validated schema instance.

        Raises:
            UpstreamFailure: On network, authentication, quota or empty-response errors.
            SchemaViolation: If the returned JSON does not satisfy ``schema``.
        """
        client = self._get_client()

        logger.debug(
            "gemini_generate_request",
            model=self._model,
            temperature=self.temperature,
            image_count=len(message.images),
        )

        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=to_contents(message),
                config=self._get_config(schema),
            )
        except errors.APIError as e:
            logger.error("gemini_generate_failed", model=self._model, code=e.code, error=str(e))
            raise UpstreamFailure(f"Gemini API request failed: {e}") from e
        except TRANSPORT_ERRORS as e:
            logger.error("gemini_generate_failed", model=self._model, error=str(e))
            raise UpstreamFailure(f"Gemini request failed: {e}") from e

        usage = self._extract_usage(response)
        logger.info(
            "gemini_generate_response",
            model=self._model,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
            estimated_cost_usd=str(usage.estimated_cost),
        )

        text = response.text
        if not text:
            raise UpstreamFailure("Gemini returned an empty response")

        return self._validate(text, schema)

    def _validate(self, text: str, schema: type[SolutionSchema]) -> SolutionSchema:
        """Validate raw model output against ``schema``."""
        try:
            return schema.model_validate_json(text)
        except ValidationError as e:
            fields = sorted(
                {".".join(str(loc) for loc in err["loc"]) for err in e.errors() if err["loc"]}
            )
            logger.warning("gemini_schema_violation", fields=fields)
            raise SchemaViolation(
                f"Model output does not match {schema.__name__}: {', '.join(fields) or e}",
                raw_output=text,
            ) from e
