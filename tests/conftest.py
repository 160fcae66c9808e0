"""Shared fixtures for manifestcheck tests."""

import textwrap
from pathlib import Path

import pytest

from manifestcheck.models import ManifestInfo


@pytest.fixture
def write_rule():
    """Write a rule module into a rule directory."""
    def _write(directory: Path, file_name: str, source: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / file_name
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def complete_manifest():
    """Manifest that satisfies every built-in rule."""
    return {
        "name": "Sample Application",
        "short_name": "Sample",
        "start_url": "/index.html",
        "display": "standalone",
        "icons": [
            {"src": "favicon.png", "sizes": "32x32", "type": "image/png"},
            {"src": "icon-192.png", "sizes": "192x192", "type": "image/png"},
        ],
    }


@pytest.fixture
def manifest_info(complete_manifest):
    return ManifestInfo(content=complete_manifest, format="w3c")
