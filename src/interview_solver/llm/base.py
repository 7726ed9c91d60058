"""Protocol for schema-constrained generators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from interview_solver.schemas import SolutionSchema

if TYPE_CHECKING:
    from interview_solver.prompts import MultimodalMessage


@runtime_checkable
class SolutionGenerator(Protocol):
    """Produces a schema-conformant solution from a multimodal message."""

    async def generate(
        self,
        message: MultimodalMessage,
        schema: type[SolutionSchema] = SolutionSchema,
    ) -> SolutionSchema:
        """
        Generate a structured solution.

        Args:
            message: Instructions and screenshots to send.
            schema: Output schema the result must satisfy.

        Returns:
            Validated schema instance.

        Raises:
            UpstreamFailure: If the provider call fails.
            SchemaViolation: If the output does not satisfy ``schema``.
        """
        ...
