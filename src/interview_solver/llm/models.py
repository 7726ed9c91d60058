"""Generation usage models."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from interview_solver.llm.config import calculate_cost


@dataclass
class GenerationUsage:
    """Token usage reported for one generation call."""

    input_tokens: int
    output_tokens: int
    model: str

    @property
    def total_tokens(self) -> int:
        """Total tokens used."""
        return self.input_tokens + self.output_tokens

    @property
    def estimated_cost(self) -> Decimal:
        """Estimate cost in USD based on token usage."""
        return calculate_cost(self.model, self.input_tokens, self.output_tokens)
