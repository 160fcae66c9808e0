"""The display mode must be one the W3C manifest defines."""

from manifestcheck.constants import VALID_DISPLAY_MODES, ManifestMembers, ResultCodes
from manifestcheck.models.results import ValidationLevel, ValidationResult


def display_mode_valid(manifest_content):
    display = manifest_content.get(ManifestMembers.DISPLAY)
    if display is None or display in VALID_DISPLAY_MODES:
        return None

    return ValidationResult(
        description="The display mode is not supported, it will fall back to 'browser'",
        platform="all",
        level=ValidationLevel.WARNING,
        member=ManifestMembers.DISPLAY,
        code=ResultCodes.INVALID_VALUE,
        data=sorted(VALID_DISPLAY_MODES),
    )


rule = display_mode_valid
