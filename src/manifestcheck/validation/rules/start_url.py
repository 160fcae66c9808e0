"""A manifest must say where the application starts."""

from manifestcheck.constants import ManifestMembers, ResultCodes
from manifestcheck.models.results import ValidationLevel, ValidationResult


def start_url_required(manifest_content):
    start_url = manifest_content.get(ManifestMembers.START_URL)
    if isinstance(start_url, str) and start_url.strip():
        return None

    return ValidationResult(
        description="The start URL for the target web site is required",
        platform="all",
        level=ValidationLevel.ERROR,
        member=ManifestMembers.START_URL,
        code=ResultCodes.REQUIRED_VALUE,
    )


rules = start_url_required
