from __future__ import annotations

"""
Unit tests for artifact persistence.
"""

import os
from pathlib import Path
from unittest.mock import patch

from rntranslationgen.core.pipeline.components.writer import write_artifacts
from rntranslationgen.domain.pipeline_models import Artifact


def test_writes_in_order(tmp_path: Path) -> None:
    """TC-01: Every artifact is written and reported in input order."""
    artifacts = [
        Artifact("translations.d.ts", "export type TranslationKey = never;\n"),
        Artifact("translations.ts", "export const TRANSLATION_KEYS = {};\n"),
    ]

    written = write_artifacts(artifacts, str(tmp_path))

    assert written == [str(tmp_path / "translations.d.ts"), str(tmp_path / "translations.ts")]
    assert (tmp_path / "translations.ts").read_text(encoding="utf-8") == "export const TRANSLATION_KEYS = {};\n"


def test_unchanged_file_not_rewritten(tmp_path: Path) -> None:
    """TC-02: Identical content keeps the existing file in place."""
    target = tmp_path / "translations.ts"
    target.write_text("same\n", encoding="utf-8")
    os.utime(target, ns=(1_000_000_000, 1_000_000_000))

    write_artifacts([Artifact("translations.ts", "same\n")], str(tmp_path))

    assert os.stat(target).st_mtime_ns == 1_000_000_000


def test_non_ascii_content_is_utf8(tmp_path: Path) -> None:
    write_artifacts([Artifact("translations.ts", '"título"\n')], str(tmp_path))
    assert (tmp_path / "translations.ts").read_bytes() == '"título"\n'.encode("utf-8")


def test_comparison_disabled_always_writes(tmp_path: Path) -> None:
    """TC-03: Without the comparison an identical file is still replaced."""
    target = tmp_path / "translations.ts"
    target.write_text("same\n", encoding="utf-8")
    os.utime(target, ns=(1_000_000_000, 1_000_000_000))

    with patch("rntranslationgen.core.pipeline.components.writer.read_bytes") as mock_read:
        write_artifacts([Artifact("translations.ts", "same\n")], str(tmp_path), skip_unchanged=False)

    mock_read.assert_not_called()
    assert os.stat(target).st_mtime_ns != 1_000_000_000
