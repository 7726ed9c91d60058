"""Gemini provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType


@dataclass(frozen=True)
class ProviderConfig:
    """Configuration for the generation provider."""

    default_model: str
    temperature: float = 0.7


GEMINI_CONFIG = ProviderConfig(
    default_model="gemini-2.5-flash",
    temperature=0.7,
)


# Model pricing per million tokens
MODEL_PRICING: MappingProxyType[str, MappingProxyType[str, Decimal]] = MappingProxyType(
    {
        "gemini-2.5-flash": MappingProxyType({"input": Decimal("0.30"), "output": Decimal("2.50")}),
        "gemini-2.5-pro": MappingProxyType({"input": Decimal("1.25"), "output": Decimal("10.00")}),
        "gemini-2.0-flash": MappingProxyType({"input": Decimal("0.10"), "output": Decimal("0.40")}),
    }
)

# Fallback when the model is not in MODEL_PRICING
DEFAULT_INPUT_COST = Decimal("0.30")
DEFAULT_OUTPUT_COST = Decimal("2.50")


def calculate_cost(model: str, input_tokens: int, output_tokens: int) -> Decimal:
    """
    Calculate cost for a given model and token usage.

    Args:
        model: Model name.
        input_tokens: Number of input tokens.
        output_tokens: Number of output tokens.

    Returns:
        Cost in USD as Decimal.
    """
    pricing = MODEL_PRICING.get(model, {})
    input_cost_per_million = pricing.get("input", DEFAULT_INPUT_COST)
    output_cost_per_million = pricing.get("output", DEFAULT_OUTPUT_COST)

    input_cost = (Decimal(input_tokens) * input_cost_per_million) / Decimal("1000000")
    output_cost = (Decimal(output_tokens) * output_cost_per_million) / Decimal("1000000")

    return input_cost + output_cost
