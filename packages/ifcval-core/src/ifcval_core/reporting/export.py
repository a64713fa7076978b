"""
Plain-data export of validation reports.

Reports are dumped through ``model_dump(mode="json")`` so enums become their
wire values and tuples become lists, then rendered as YAML or JSON.
"""

import json
from pathlib import Path
from typing import Iterable, Literal

import yaml

from ifcval_core.models.report import ValidationReport
from ifcval_core.validation.estimate import estimate_accuracy

ExportFormat = Literal["yaml", "json"]
EXPORT_FORMATS: tuple[str, ...] = ("yaml", "json")


def report_payload(report: ValidationReport) -> dict:
    payload = report.model_dump(mode="json")
    payload["estimate_accuracy"] = estimate_accuracy(report.validation_time, report.estimated_time)
    return payload


def batch_payload(reports: Iterable[ValidationReport]) -> dict:
    reports = list(reports)
    actual = sum(r.validation_time for r in reports)
    estimated = sum(r.estimated_time for r in reports)
    return {
        "summary": {
            "files": len(reports),
            "valid_files": sum(1 for r in reports if r.is_valid),
            "errors": sum(r.summary.errors for r in reports),
            "warnings": sum(r.summary.warnings for r in reports),
            "validation_time": actual,
            "estimated_time": estimated,
            "estimate_accuracy": estimate_accuracy(actual, estimated),
        },
        "reports": [report_payload(r) for r in reports],
    }


def _render(payload: dict, fmt: ExportFormat) -> str:
    if fmt == "yaml":
        return yaml.dump(payload, default_flow_style=False, sort_keys=True, allow_unicode=True)
    if fmt == "json":
        return json.dumps(payload, indent=2, sort_keys=True) + "\n"
    raise ValueError(f"Unsupported export format: {fmt!r}; expected one of {', '.join(EXPORT_FORMATS)}")


def dump_report(report: ValidationReport, fmt: ExportFormat = "yaml") -> str:
    return _render(report_payload(report), fmt)


def dump_batch(reports: Iterable[ValidationReport], fmt: ExportFormat = "yaml") -> str:
    return _render(batch_payload(reports), fmt)


def write_export(path: Path, reports: list[ValidationReport], fmt: ExportFormat = "yaml") -> Path:
    """Write one report, or a batch document when several reports are given."""
    text = dump_report(reports[0], fmt) if len(reports) == 1 else dump_batch(reports, fmt)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
