"""Model for the manifest handed to the validation core."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from manifestcheck.constants import BASE_MANIFEST_FORMAT


class ManifestInfo(BaseModel):
    """A parsed manifest together with the format tag its loader declared."""
    content: dict[str, Any] | None = None
    format: str = Field(default=BASE_MANIFEST_FORMAT)

    @classmethod
    def from_file(cls, manifest_path: Path, format: str = BASE_MANIFEST_FORMAT) -> "ManifestInfo":
        """Read a JSON manifest from disk.

        Args:
            manifest_path: Path to the manifest JSON file
            format: Format tag to attach to the loaded content

        Raises:
            FileNotFoundError: If the manifest file does not exist
            ValueError: If the file is not a JSON object
        """
        with open(manifest_path, encoding="utf-8") as f:
            try:
                content = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in manifest {manifest_path}: {e}")

        if not isinstance(content, dict):
            raise ValueError(f"Manifest {manifest_path} must contain a JSON object")

        return cls(content=content, format=format)
