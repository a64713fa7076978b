"""
Normative business rules over the raw file text.

Each rule is a case-insensitive substring presence/count check; there is no
STEP parsing here, so e.g. every occurrence of the root entity name counts.

- SPS001: spatial structure (exactly one root, container recommended)
- PSE001: standard property set naming
- GEM001: presence of a geometric representation
"""

import re
from typing import Iterator

from ifcval_core.models.outcome import Outcome, OutcomeCode
from ifcval_core.models.report import Stage
from ifcval_core.scanning.sections import SectionScan, line_at
from ifcval_core.validation.base import BaseChecker


class NormativeRuleChecker(BaseChecker):
    STAGE = Stage.NORMATIVE_RULES
    RULES = {
        "SPS001_PROJECT_REQUIRED": "every IFC file must contain exactly one spatial structure root",
        "SPS001_SINGLE_PROJECT": "only one spatial structure root is allowed per file",
        "SPS001_SITE_RECOMMENDED": "a site container is recommended for a complete spatial structure",
        "PSE001_STANDARD_PSETS": "property sets should use standard names",
        "GEM001_GEOMETRY_PRESENT": "geometric representations are recommended for complete BIM models",
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        psets = self.policy.property_sets
        self.pset_pattern = re.compile(
            rf"{re.escape(psets.container)}\s*\([^)]*'({re.escape(psets.prefix)}[^']*)",
            re.IGNORECASE,
        )
        self.standard_psets = self.policy.standard_property_sets

    def run(self, scan: SectionScan) -> Iterator[Outcome]:
        yield from self.spatial_structure(scan)
        yield from self.property_sets(scan)
        yield from self.geometry_representation(scan)

    def spatial_structure(self, scan: SectionScan) -> Iterator[Outcome]:
        """SPS001"""
        root = self.policy.spatial_structure.root
        container = self.policy.spatial_structure.container

        count = scan.content_upper.count(root)
        if count == 0:
            yield self._error(
                OutcomeCode.RELATIONSHIP_ERROR,
                f"{root} is missing; it is required as the root of the spatial structure",
                "SPS001_PROJECT_REQUIRED",
                expected=f"exactly one {root}",
            )
        elif count > 1:
            yield self._error(
                OutcomeCode.CARDINALITY_ERROR,
                f"Multiple {root} instances found ({count}); only one is allowed",
                "SPS001_SINGLE_PROJECT",
                expected=f"exactly one {root}",
            )
        else:
            yield self._passed(f"{root} present (exactly one instance)", "SPS001_PROJECT_REQUIRED")

        if container not in scan.content_upper:
            yield self._warning(
                OutcomeCode.RELATIONSHIP_ERROR,
                f"{container} is missing; recommended for a complete spatial structure",
                "SPS001_SITE_RECOMMENDED",
            )
        else:
            yield self._passed(f"{container} found", "SPS001_SITE_RECOMMENDED")

    def property_sets(self, scan: SectionScan) -> Iterator[Outcome]:
        """PSE001"""
        matches = list(self.pset_pattern.finditer(scan.content))
        if not matches:
            yield self._warning(
                OutcomeCode.RESOURCE_ERROR,
                f"No standard property sets ({self.policy.property_sets.prefix}*) found",
                "PSE001_STANDARD_PSETS",
                description="standard property sets are recommended",
            )
            return

        for m in matches:
            name = m.group(1)
            line = line_at(scan.content, m.start())
            if name.upper() in self.standard_psets:
                yield self._passed(f"Standard property set found: {name}", "PSE001_STANDARD_PSETS", line=line)
            else:
                yield self._warning(
                    OutcomeCode.NAMING_ERROR,
                    f"Non-standard property set found: {name}",
                    "PSE001_STANDARD_PSETS",
                    line=line,
                    expected="a standard property set name",
                )

    def geometry_representation(self, scan: SectionScan) -> Iterator[Outcome]:
        """GEM001"""
        for entity in self.policy.geometry.entities:
            if entity in scan.content_upper:
                yield self._passed(f"Geometric representation found: {entity}", "GEM001_GEOMETRY_PRESENT")
                return

        yield self._warning(
            OutcomeCode.GEOMETRY_ERROR,
            "No geometric representations found",
            "GEM001_GEOMETRY_PRESENT",
        )
