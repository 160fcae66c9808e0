"""Name checks shared by every platform."""

from manifestcheck.constants import ManifestMembers, ResultCodes
from manifestcheck.models.results import ValidationLevel, ValidationResult

# Launchers truncate longer short names
MAX_SHORT_NAME_LENGTH = 12


def name_required(manifest_content):
    if manifest_content.get(ManifestMembers.NAME) or manifest_content.get(ManifestMembers.SHORT_NAME):
        return None

    return ValidationResult(
        description="A name or short name for the application is required",
        platform="all",
        level=ValidationLevel.ERROR,
        member=ManifestMembers.NAME,
        code=ResultCodes.REQUIRED_VALUE,
    )


def short_name_length(manifest_content):
    short_name = manifest_content.get(ManifestMembers.SHORT_NAME)
    if not isinstance(short_name, str) or len(short_name) <= MAX_SHORT_NAME_LENGTH:
        return None

    return ValidationResult(
        description=f"The short name should not exceed {MAX_SHORT_NAME_LENGTH} characters",
        platform="all",
        level=ValidationLevel.WARNING,
        member=ManifestMembers.SHORT_NAME,
        code=ResultCodes.INVALID_VALUE,
        data=[short_name],
    )


rules = [name_required, short_name_length]
