"""Schema-constrained generation with Gemini."""

from interview_solver.llm.base import SolutionGenerator
from interview_solver.llm.config import GEMINI_CONFIG, ProviderConfig, calculate_cost
from interview_solver.llm.gemini import GeminiSolutionGenerator
from interview_solver.llm.models import GenerationUsage

__all__ = [
    "SolutionGenerator",
    "GeminiSolutionGenerator",
    "GenerationUsage",
    "GEMINI_CONFIG",
    "ProviderConfig",
    "calculate_cost",
]
