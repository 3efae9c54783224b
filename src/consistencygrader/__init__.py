"""Content Consistency Grader - scores how consistently a brand message reads across platforms."""

__version__ = "1.0.0"
__author__ = "Content Consistency Grader Team"

from .core.models import *
from .core.config import settings
from .core.errors import ConsistencyGraderError, InputValidationError, InternalComputationError
from .pipeline import analyze_consistency

__all__ = [
    "settings",
    "analyze_consistency",
    "AnalysisReport",
    "ConsistencyGraderError",
    "InputValidationError",
    "InternalComputationError",
]
