"""Icon presence checks and the rule factories built on them.

``require_icon_sizes`` demands every listed size; ``require_any_icon_size``
is satisfied by a single matching icon.
"""

from typing import Any, Iterable

from manifestcheck.constants import ManifestMembers, ResultCodes
from manifestcheck.models.results import ValidationLevel, ValidationResult

from .rule import RuleFunction


def _icons(manifest_content: dict[str, Any] | None) -> list[Any]:
    if not manifest_content:
        return []
    icons = manifest_content.get("icons")
    return icons if isinstance(icons, list) else []


def _declared_size(icon: Any) -> Any:
    return icon.get("sizes") if isinstance(icon, dict) else None


def check_icon_sizes(
    manifest_content: dict[str, Any] | None,
    description: str,
    platform: str,
    level: ValidationLevel | str,
    required_sizes: Iterable[Any],
) -> ValidationResult | None:
    """Report the required icon sizes the manifest does not declare.

    Returns:
        A ``missingImage`` result carrying the missing sizes, or None when
        every required size is present
    """
    required_sizes = list(required_sizes)
    icons = _icons(manifest_content)

    if icons:
        declared = [_declared_size(icon) for icon in icons]
        missing = [size for size in required_sizes if size not in declared]
    else:
        missing = required_sizes

    if not missing:
        return None

    return ValidationResult(
        description=description,
        platform=platform,
        level=ValidationLevel(level),
        member=ManifestMembers.ICONS,
        code=ResultCodes.MISSING_IMAGE,
        data=missing,
    )


def check_any_icon_size(
    manifest_content: dict[str, Any] | None,
    description: str,
    platform: str,
    valid_sizes: Iterable[Any],
) -> ValidationResult | None:
    """Warn unless at least one icon has one of the valid sizes."""
    valid_sizes = list(valid_sizes)

    for icon in _icons(manifest_content):
        if _declared_size(icon) in valid_sizes:
            return None

    return ValidationResult(
        description=description,
        platform=platform,
        level=ValidationLevel.WARNING,
        member=ManifestMembers.ICONS,
        code=ResultCodes.MISSING_IMAGE_GROUP,
        data=valid_sizes,
    )


def require_icon_sizes(
    description: str,
    platform: str,
    level: ValidationLevel | str,
    required_sizes: Iterable[Any],
) -> RuleFunction:
    """Build a rule requiring all of ``required_sizes``."""
    required_sizes = list(required_sizes)

    def rule(manifest_content: dict[str, Any]) -> ValidationResult | None:
        return check_icon_sizes(manifest_content, description, platform, level, required_sizes)

    rule.__qualname__ = f"require_icon_sizes[{platform}:{description}]"
    return rule


def require_any_icon_size(
    description: str,
    platform: str,
    valid_sizes: Iterable[Any],
) -> RuleFunction:
    """Build a rule requiring at least one of ``valid_sizes``."""
    valid_sizes = list(valid_sizes)

    def rule(manifest_content: dict[str, Any]) -> ValidationResult | None:
        return check_any_icon_size(manifest_content, description, platform, valid_sizes)

    rule.__qualname__ = f"require_any_icon_size[{platform}:{description}]"
    return rule
