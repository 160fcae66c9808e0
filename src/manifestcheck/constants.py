"""Constants shared by manifest validation rules.

Format tags, manifest member names and result codes are centralized here so
rule authors and platform packs agree on the same vocabulary.
"""

from typing import Set, Tuple

# Format tag a manifest must carry before any rule runs
BASE_MANIFEST_FORMAT: str = "w3c"

# Platform tags a rule directory may partition its rules by
ALL_PLATFORMS: Tuple[str, ...] = (
    "android",
    "ios",
    "windows",
    "web",
    "chrome",
    "firefox",
)


class ManifestMembers:
    """W3C manifest members that results can point at."""
    NAME = "name"
    SHORT_NAME = "short_name"
    START_URL = "start_url"
    ICONS = "icons"
    DISPLAY = "display"
    ORIENTATION = "orientation"
    THEME_COLOR = "theme_color"
    BACKGROUND_COLOR = "background_color"
    SCOPE = "scope"
    LANG = "lang"
    DIR = "dir"
    DESCRIPTION = "description"


class ResultCodes:
    """Classification codes carried by validation results."""
    REQUIRED_VALUE = "requiredValue"
    INVALID_VALUE = "invalidValue"
    MISSING_IMAGE = "missingImage"
    MISSING_IMAGE_GROUP = "missingImageGroup"


VALID_DISPLAY_MODES: Set[str] = {
    "fullscreen",
    "standalone",
    "minimal-ui",
    "browser",
}
