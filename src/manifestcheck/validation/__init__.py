"""Rule discovery, execution and aggregation for manifest validation.

Rules are plain callables checking one concern of a manifest. They come from
rule directories, from platform packs, or from the icon rule factories, and
a failing rule never aborts the run.
"""

from .coordinator import BUILTIN_RULES_DIR, ManifestValidator, check_manifest, validate_manifest
from .errors import (
    DirectoryReadError,
    EmptyDocumentError,
    ManifestCheckError,
    RuleExecutionError,
    RuleLoadError,
    WrongFormatError,
)
from .executor import run_validation_rules
from .icons import check_any_icon_size, check_icon_sizes, require_any_icon_size, require_icon_sizes
from .loader import load_validation_rules
from .rule import RuleFunction
from .sources import FilesystemRuleSource, PlatformRuleSource, StaticRuleSource

__all__ = [
    "BUILTIN_RULES_DIR",
    "ManifestValidator",
    "check_manifest",
    "validate_manifest",
    "load_validation_rules",
    "run_validation_rules",
    "require_icon_sizes",
    "require_any_icon_size",
    "check_icon_sizes",
    "check_any_icon_size",
    "RuleFunction",
    "PlatformRuleSource",
    "FilesystemRuleSource",
    "StaticRuleSource",
    "ManifestCheckError",
    "DirectoryReadError",
    "RuleLoadError",
    "EmptyDocumentError",
    "WrongFormatError",
    "RuleExecutionError",
]
