"""Pydantic data models for manifests and validation results."""

from manifestcheck.models.manifest import ManifestInfo
from manifestcheck.models.results import (
    ReportStatus,
    RuleFailure,
    ValidationLevel,
    ValidationReport,
    ValidationResult,
)

__all__ = [
    "ManifestInfo",
    "ValidationLevel",
    "ValidationResult",
    "ReportStatus",
    "RuleFailure",
    "ValidationReport",
]
