"""
Validation pipeline for IFC / STEP physical-file text.

Runs the section scan once, then the five checkers in a fixed order
(syntax, header, schema, normative, industry), and aggregates every outcome
into a single ValidationReport.

Usage:

    from ifcval_core.validation import ValidationPipeline

    pipeline = ValidationPipeline(progress=print).initialize()
    report = pipeline.validate(content, "model.ifc")

A pipeline instance is single-threaded. To validate files concurrently, give
each worker its own pipeline; the policy may be shared.
"""

from __future__ import annotations

import logging
import time

from ifcval_core.data.policy import load_validation_policy
from ifcval_core.errors import ContentDecodeError, PipelineNotInitializedError, decode_content
from ifcval_core.models.outcome import Outcome
from ifcval_core.models.policy import ValidationPolicy
from ifcval_core.models.report import ValidationReport
from ifcval_core.scanning.sections import scan_sections
from ifcval_core.validation.base import BaseChecker
from ifcval_core.validation.estimate import TimeEstimator
from ifcval_core.validation.header import HeaderChecker
from ifcval_core.validation.industry import IndustryPracticeChecker
from ifcval_core.validation.normative import NormativeRuleChecker
from ifcval_core.validation.progress import ProgressEmitter, ProgressSink
from ifcval_core.validation.report import aggregate
from ifcval_core.validation.schema import SchemaChecker
from ifcval_core.validation.syntax import SyntaxChecker

_logger = logging.getLogger("ifcval.pipeline")

CHECKERS: tuple[type[BaseChecker], ...] = (
    SyntaxChecker,
    HeaderChecker,
    SchemaChecker,
    NormativeRuleChecker,
    IndustryPracticeChecker,
)


class ValidationPipeline:
    def __init__(self, policy: ValidationPolicy | None = None, progress: ProgressSink | None = None):
        self.policy = policy
        self.progress = progress
        self.estimator: TimeEstimator | None = None
        self.outcomes: list[Outcome] = []
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> ValidationPipeline:
        """Resolve the policy (bundled default if none was given). Safe to call twice."""
        if self._initialized:
            return self
        if self.policy is None:
            self.policy = load_validation_policy()
        self.estimator = TimeEstimator(self.policy.estimator)
        self._initialized = True
        return self

    def validate(self, content: str | bytes, filename: str = "unknown.ifc") -> ValidationReport:
        """Validate one file's content and return the completed report.

        Non-conformant content never raises; it is reported as outcomes. Raises
        PipelineNotInitializedError before initialize(), and ContentDecodeError
        when the content cannot be treated as text.
        """
        self._require_initialized()
        text = self._as_text(content, filename)

        started = time.perf_counter()
        estimated_time = self.estimator.estimate(text)
        emitter = ProgressEmitter(self.progress, estimated_time)
        emitter.started()

        scan = scan_sections(text)
        self.outcomes = []
        for checker_cls in CHECKERS:
            checker = checker_cls(self.policy, emitter)
            found = checker.check(scan)
            _logger.debug("%s: %s produced %d outcomes", filename, checker_cls.__name__, len(found))
            self.outcomes.extend(found)

        emitter.finalizing()
        report = aggregate(
            filename,
            self.outcomes,
            validation_time=time.perf_counter() - started,
            estimated_time=estimated_time,
        )
        emitter.completed()

        _logger.info(
            "validated %s: valid=%s errors=%d warnings=%d passed=%d",
            filename,
            report.is_valid,
            report.summary.errors,
            report.summary.warnings,
            report.summary.passed,
        )
        return report

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise PipelineNotInitializedError("ValidationPipeline.initialize() must be called before use")

    @staticmethod
    def _as_text(content: str | bytes, filename: str) -> str:
        if isinstance(content, str):
            return content
        if isinstance(content, (bytes, bytearray)):
            return decode_content(bytes(content), filename)
        raise ContentDecodeError(filename, f"expected text, got {type(content).__name__}")


def validate_content(
    content: str | bytes,
    filename: str = "unknown.ifc",
    *,
    policy: ValidationPolicy | None = None,
    progress: ProgressSink | None = None,
) -> ValidationReport:
    """Top-level convenience: build, initialize and run a fresh pipeline."""
    return ValidationPipeline(policy=policy, progress=progress).initialize().validate(content, filename)
