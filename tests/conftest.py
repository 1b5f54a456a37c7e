from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for translation documents and project directories.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def home_document() -> Dict[str, Any]:
    """The canonical two-key example document."""
    return {"home": {"title": "Welcome Home", "description": "This is the home page."}}


@pytest.fixture
def nested_document() -> Dict[str, Any]:
    """A document mixing depths, leaf types and an empty node."""
    return {
        "common": {
            "ok": "OK",
            "cancel": "Cancel",
        },
        "home": {
            "title": "Welcome",
            "cards": {
                "news": {"title": "News", "empty": "Nothing yet"},
                "count": 3,
            },
        },
        "placeholder": {},
        "tags": ["a", "b"],
        "footer": "Bye",
    }


@pytest.fixture
def write_locale() -> Callable[..., Path]:
    """Return a helper writing a JSON locale file into a directory."""
    def _write(directory: Path, document: Any, name: str = "en.json") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project(tmp_path: Path, write_locale: Callable[..., Path], home_document: Dict[str, Any]) -> Path:
    """
    Create a project root with a locale directory and an output directory.

    Structure:
    /project
      /locales
        en.json
      /src/i18n
    """
    root = tmp_path / "project"
    write_locale(root / "locales", home_document)
    (root / "src" / "i18n").mkdir(parents=True)
    return root
