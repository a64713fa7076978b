from .sections import INSTANCE_PATTERN, Instance, Section, SectionScan, count_instances, scan_sections

__all__ = [
    "INSTANCE_PATTERN",
    "Instance",
    "Section",
    "SectionScan",
    "count_instances",
    "scan_sections",
]
