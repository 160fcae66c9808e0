"""Exceptions raised while loading and running validation rules."""

from pathlib import Path


class ManifestCheckError(Exception):
    """Base class for manifestcheck errors."""
    pass


class DirectoryReadError(ManifestCheckError):
    """Raised when a rule directory cannot be listed."""

    def __init__(self, directory: Path, cause: BaseException):
        self.directory = Path(directory)
        self.cause = cause
        super().__init__(
            f"Failed to read validation rules from the specified folder: '{directory}'. {cause}"
        )


class RuleLoadError(ManifestCheckError):
    """Raised when a single rule file cannot be loaded."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to load validation rule from file: '{self.path.name}'. {cause}")


class EmptyDocumentError(ManifestCheckError):
    """Raised when there is no manifest content to validate."""

    def __init__(self, message: str = "Manifest content is empty or invalid."):
        super().__init__(message)


class WrongFormatError(ManifestCheckError):
    """Raised when the manifest is not in the base format."""

    def __init__(self, format: str | None, expected: str):
        self.format = format
        self.expected = expected
        super().__init__(
            f"The manifest passed as argument is not a {expected} manifest (format: {format!r})."
        )


class RuleExecutionError(ManifestCheckError):
    """Raised when a rule fails while checking a manifest."""

    def __init__(self, rule: str, cause: BaseException):
        self.rule = rule
        self.cause = cause
        super().__init__(f"Validation rule '{rule}' failed: {type(cause).__name__}: {cause}")
