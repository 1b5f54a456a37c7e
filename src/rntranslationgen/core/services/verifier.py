from __future__ import annotations

"""
Drift Verifier.

Stages freshly rendered artifacts in a temporary directory, applies the
same formatting a real run would, and compares them byte for byte with the
artifacts committed in the output directory. The real output directory is
only ever read.
"""

import logging
import os
import tempfile
from typing import Callable, List, Optional

from rntranslationgen.domain.pipeline_models import Artifact, VerificationResult
from rntranslationgen.infra.fs import read_bytes, write_bytes_atomic

logger = logging.getLogger(__name__)

FormatHook = Callable[[List[str]], bool]


def verify_artifacts(
        artifacts: List[Artifact],
        output_dir: str,
        format_hook: Optional[FormatHook] = None,
) -> VerificationResult:
    """
    Compare rendered artifacts against their committed counterparts.

    The staging directory is removed on every exit path, including
    exceptions raised while staging or formatting.

    Args:
        artifacts: Rendered artifacts of the current input.
        output_dir: Directory holding the committed artifacts.
        format_hook: Optional callable applied to the staged file paths.

    Returns:
        VerificationResult: MATCH when `ok` is True, MISMATCH otherwise.
    """
    checked: List[str] = []
    mismatched: List[str] = []
    missing: List[str] = []

    with tempfile.TemporaryDirectory(prefix="rntranslationgen-") as staging_dir:
        logger.debug(f"Staging artifacts for verification in {staging_dir}")

        staged: List[str] = []
        for artifact in artifacts:
            staged_path = os.path.join(staging_dir, artifact.name)
            write_bytes_atomic(staged_path, artifact.encode())
            staged.append(staged_path)

        if format_hook is not None:
            format_hook(staged)

        for artifact, staged_path in zip(artifacts, staged):
            checked.append(artifact.name)
            committed = read_bytes(os.path.join(output_dir, artifact.name))
            if committed is None:
                logger.debug(f"Committed artifact missing: {artifact.name}")
                missing.append(artifact.name)
                continue
            fresh = read_bytes(staged_path)
            if committed != fresh:
                logger.debug(f"Committed artifact differs: {artifact.name}")
                mismatched.append(artifact.name)

    ok = not mismatched and not missing
    return VerificationResult(
        ok=ok,
        checked=checked,
        mismatched=mismatched,
        missing=missing,
        message=_describe(ok, output_dir, mismatched, missing),
    )


def _describe(ok: bool, output_dir: str, mismatched: List[str], missing: List[str]) -> str:
    if ok:
        return f"Translation artifacts in '{output_dir}' are up to date."
    parts: List[str] = []
    if mismatched:
        parts.append("differs: " + ", ".join(mismatched))
    if missing:
        parts.append("missing: " + ", ".join(missing))
    return "Translation artifacts are out of date (" + "; ".join(parts) + ")."
