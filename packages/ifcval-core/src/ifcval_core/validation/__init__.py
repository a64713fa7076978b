from .base import BaseChecker
from .estimate import TimeEstimator, estimate_accuracy
from .header import HeaderChecker
from .industry import IndustryPracticeChecker
from .normative import NormativeRuleChecker
from .pipeline import CHECKERS, ValidationPipeline, validate_content
from .progress import ProgressEmitter, ProgressSink
from .report import aggregate
from .schema import SchemaChecker
from .syntax import SyntaxChecker

__all__ = [
    "CHECKERS",
    "BaseChecker",
    "HeaderChecker",
    "IndustryPracticeChecker",
    "NormativeRuleChecker",
    "ProgressEmitter",
    "ProgressSink",
    "SchemaChecker",
    "SyntaxChecker",
    "TimeEstimator",
    "ValidationPipeline",
    "aggregate",
    "estimate_accuracy",
    "validate_content",
]
