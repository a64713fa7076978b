from abc import ABC, abstractmethod
from typing import ClassVar, Iterator

from ifcval_core.models.outcome import Feature, Outcome, OutcomeCode, Severity
from ifcval_core.models.policy import ValidationPolicy
from ifcval_core.models.report import Stage
from ifcval_core.scanning.sections import SectionScan
from ifcval_core.validation.progress import STAGE_PROGRESS, ProgressEmitter


class BaseChecker(ABC):
    STAGE: ClassVar[Stage]
    # rule name -> description, listed by `ifcval rules`
    RULES: ClassVar[dict[str, str]] = {}

    def __init__(self, policy: ValidationPolicy, progress: ProgressEmitter | None = None):
        self.policy = policy
        self.progress = progress or ProgressEmitter()

    def check(self, scan: SectionScan) -> list[Outcome]:
        """Run the checker and report entry/exit progress for its stage."""
        start, end = STAGE_PROGRESS[self.STAGE]
        self.progress.emit(self.STAGE, start)
        outcomes = list(self.run(scan))
        self.progress.emit(self.STAGE, end)
        return outcomes

    @abstractmethod
    def run(self, scan: SectionScan) -> Iterator[Outcome]:
        """Scan the content and yield outcomes in a stable order."""
        ...

    def _outcome(
        self,
        severity: Severity,
        code: OutcomeCode,
        observed: str,
        rule: str | None = None,
        *,
        description: str | None = None,
        line: int | None = None,
        expected: str | None = None,
        instance_id: str | None = None,
    ) -> Outcome:
        feature = None
        if rule is not None:
            feature = Feature(rule=rule, description=description or self.RULES.get(rule, ""), line=line)
        return Outcome(
            severity=severity,
            outcome_code=code,
            observed=observed,
            expected=expected,
            feature=feature,
            instance_id=instance_id,
        )

    def _passed(self, observed: str, rule: str, **kwargs) -> Outcome:
        return self._outcome(Severity.PASSED, OutcomeCode.PASSED, observed, rule, **kwargs)

    def _warning(self, code: OutcomeCode, observed: str, rule: str, **kwargs) -> Outcome:
        return self._outcome(Severity.WARNING, code, observed, rule, **kwargs)

    def _error(self, code: OutcomeCode, observed: str, rule: str, **kwargs) -> Outcome:
        return self._outcome(Severity.ERROR, code, observed, rule, **kwargs)
