"""manifestcheck - Pluggable validation of web application manifests.

manifestcheck discovers validation rules from rule directories and platform
packs, runs them against a W3C manifest and merges their findings into a
single report.
"""

__version__ = "0.1.0"
__author__ = "manifestcheck contributors"
__description__ = "Pluggable validation of web application manifests"

from manifestcheck.config import ManifestCheckConfig
from manifestcheck.models import ManifestInfo, ValidationLevel, ValidationReport, ValidationResult
from manifestcheck.validation import (
    load_validation_rules,
    require_any_icon_size,
    require_icon_sizes,
    run_validation_rules,
    validate_manifest,
)

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "ManifestCheckConfig",
    "ManifestInfo",
    "ValidationLevel",
    "ValidationResult",
    "ValidationReport",
    "validate_manifest",
    "load_validation_rules",
    "run_validation_rules",
    "require_icon_sizes",
    "require_any_icon_size",
]
