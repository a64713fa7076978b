from typing import Iterator

from ifcval_core.models.outcome import Outcome, OutcomeCode
from ifcval_core.models.report import Stage
from ifcval_core.scanning.sections import SectionScan
from ifcval_core.validation.base import BaseChecker


class IndustryPracticeChecker(BaseChecker):
    """Best-practice advisories. Never produces an ERROR."""

    STAGE = Stage.INDUSTRY_PRACTICES
    RULES = {
        "INDUSTRY_OWNER_HISTORY": "owner history is recommended for traceability",
        "INDUSTRY_UNITS": "an explicit unit assignment is recommended",
        "INDUSTRY_MATERIALS": "material information is recommended for BIM workflows",
    }

    def run(self, scan: SectionScan) -> Iterator[Outcome]:
        practices = self.policy.industry_practices

        yield self._presence(
            scan,
            (practices.owner_history,),
            OutcomeCode.WARNING,
            "INDUSTRY_OWNER_HISTORY",
            found=f"{practices.owner_history} found",
            missing=f"{practices.owner_history} is missing; best practice for traceability",
        )
        yield self._presence(
            scan,
            (practices.unit_assignment,),
            OutcomeCode.UNITS_ERROR,
            "INDUSTRY_UNITS",
            found=f"{practices.unit_assignment} found",
            missing=f"{practices.unit_assignment} is missing; best practice for unambiguous units",
        )
        yield self._presence(
            scan,
            practices.materials,
            OutcomeCode.WARNING,
            "INDUSTRY_MATERIALS",
            found="Material information found",
            missing="No material information found; best practice for BIM workflows",
        )

    def _presence(
        self,
        scan: SectionScan,
        entities: tuple[str, ...],
        code: OutcomeCode,
        rule: str,
        *,
        found: str,
        missing: str,
    ) -> Outcome:
        if any(entity in scan.content_upper for entity in entities):
            return self._passed(found, rule)
        return self._warning(code, missing, rule, expected=" or ".join(entities))
