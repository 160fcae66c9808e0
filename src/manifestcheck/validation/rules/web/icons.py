"""Icons browsers use when installing the application."""

from manifestcheck.validation.icons import require_any_icon_size, require_icon_sizes

rules = [
    require_icon_sizes(
        "An icon usable as a favicon is required",
        "web",
        "warning",
        ["32x32"],
    ),
    require_any_icon_size(
        "A large icon is recommended for install prompts and splash screens",
        "web",
        ["192x192", "512x512"],
    ),
]
