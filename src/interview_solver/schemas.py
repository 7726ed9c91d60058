"""Solution schema sent to the model and the public result type."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class SolutionSchema(BaseModel):
    """Structured output the model must return."""

    model_config = ConfigDict(populate_by_name=True)

    approach: str = Field(
        ...,
        min_length=1,
        description=(
            "Detailed approach to solve the problem, explained in easy words "
            "that the interviewee will speak out loud"
        ),
    )
    code: str = Field(..., min_length=1, description="The complete solution code")
    time_complexity: str = Field(
        ...,
        alias="timeComplexity",
        min_length=1,
        description="Big O analysis of time complexity with the reason",
    )
    space_complexity: str = Field(
        ...,
        alias="spaceComplexity",
        min_length=1,
        description="Big O analysis of space complexity with the reason",
    )


@dataclass(frozen=True)
class ProcessedSolution:
    """Solution returned to callers."""

    approach: str
    code: str
    time_complexity: str
    space_complexity: str

    def to_dict(self) -> dict[str, str]:
        """Return the solution keyed by its camelCase field names."""
        return {
            "approach": self.approach,
            "code": self.code,
            "timeComplexity": self.time_complexity,
            "spaceComplexity": self.space_complexity,
        }


def to_processed_solution(value: SolutionSchema) -> ProcessedSolution:
    """Map a validated schema value to the public result type."""
    return ProcessedSolution(
        approach=value.approach,
        code=value.code,
        time_complexity=value.time_complexity,
        space_complexity=value.space_complexity,
    )
