"""Interview Solver - structured solutions for coding-interview screenshots."""

__version__ = "0.1.0"

from interview_solver.config import ConfigStore, SolverConfig, bootstrap_from_environment
from interview_solver.exceptions import (
    ImageReadFailure,
    InvalidConfiguration,
    InvalidRequest,
    NotConfigured,
    SchemaViolation,
    SolverError,
    UpstreamFailure,
)
from interview_solver.images import EncodedImage, ScreenshotReference
from interview_solver.schemas import ProcessedSolution, SolutionSchema
from interview_solver.solver import ScreenshotSolver, create_solver_from_environment

__all__ = [
    "ConfigStore",
    "SolverConfig",
    "bootstrap_from_environment",
    "ScreenshotSolver",
    "create_solver_from_environment",
    "ScreenshotReference",
    "EncodedImage",
    "SolutionSchema",
    "ProcessedSolution",
    "SolverError",
    "InvalidConfiguration",
    "NotConfigured",
    "InvalidRequest",
    "ImageReadFailure",
    "UpstreamFailure",
    "SchemaViolation",
]
