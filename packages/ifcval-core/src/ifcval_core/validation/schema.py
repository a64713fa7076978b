from typing import Iterator

from ifcval_core.models.outcome import Outcome, OutcomeCode
from ifcval_core.models.report import Stage
from ifcval_core.scanning.sections import Instance, SectionScan
from ifcval_core.validation.base import BaseChecker


class SchemaChecker(BaseChecker):
    """Entity instances in the DATA section against the known-entity allow-list."""

    STAGE = Stage.SCHEMA_VALIDATION
    RULES = {
        "DATA_SECTION_REQUIRED": "STEP physical file must contain a DATA; ... ENDSEC; section",
        "ENTITY_INSTANCES_PRESENT": "DATA section should declare entity instances",
        "ENTITY_TYPE_VALIDATION": "all entities should be known IFC types",
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.known_entities = self.policy.known_entities

    def run(self, scan: SectionScan) -> Iterator[Outcome]:
        if scan.data is None:
            yield self._error(
                OutcomeCode.SYNTAX_ERROR,
                "No DATA section found",
                "DATA_SECTION_REQUIRED",
                line=scan.data_line,
                expected="DATA; ... ENDSEC;",
            )
            return

        instances = scan.instances()
        if not instances:
            yield self._warning(
                OutcomeCode.SCHEMA_ERROR,
                "No IFC entities found in the DATA section",
                "ENTITY_INSTANCES_PRESENT",
                line=scan.data.start_line,
            )
            return

        yield self._passed(f"{len(instances)} IFC entities found and recognized", "ENTITY_INSTANCES_PRESENT")

        unknown = self._unknown_types(instances)
        if unknown:
            yield self._unknown_types_warning(unknown)

    def _unknown_types(self, instances: list[Instance]) -> list[Instance]:
        """First instance of every unknown type, deduplicated case-insensitively in file order."""
        seen: dict[str, Instance] = {}
        for instance in instances:
            key = instance.type_name.upper()
            if key not in self.known_entities and key not in seen:
                seen[key] = instance
        return list(seen.values())

    def _unknown_types_warning(self, unknown: list[Instance]) -> Outcome:
        limit = self.policy.entities.unknown_preview_limit
        names = [instance.type_name for instance in unknown]
        listed = ", ".join(names[:limit])
        if len(names) > limit:
            listed += f" and {len(names) - limit} more"

        first = unknown[0]
        return self._warning(
            OutcomeCode.TYPE_ERROR,
            f"Unknown or uncommon IFC entity types found: {listed}",
            "ENTITY_TYPE_VALIDATION",
            line=first.line,
            instance_id=first.label,
            expected="entity types from the known IFC entity list",
        )
