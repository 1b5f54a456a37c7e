from __future__ import annotations

"""
External Formatter Adapter.

Rewrites emitted artifacts in place with an external code formatter
(prettier by default). Formatting is cosmetic: a missing or failing
formatter never fails the run.
"""

import logging
import os
import shutil
import subprocess
from typing import List, Optional

from rntranslationgen.domain.constants import (
    DEFAULT_FORMATTER,
    FORMATTER_ISOLATION_ARGS,
    FORMATTER_STYLE_ARGS,
)
from rntranslationgen.domain.errors import ExternalToolMissingError

logger = logging.getLogger(__name__)


def resolve_formatter(executable: Optional[str] = None) -> str:
    """
    Locate the formatter executable on PATH.

    Args:
        executable: Executable name or path. Defaults to prettier.

    Returns:
        str: Absolute path to the executable.

    Raises:
        ExternalToolMissingError: If the executable cannot be found.
    """
    name = executable or DEFAULT_FORMATTER
    resolved = shutil.which(name)
    if not resolved:
        raise ExternalToolMissingError(f"Formatter '{name}' is not installed.")
    return resolved


def build_format_command(executable: str, paths: List[str]) -> List[str]:
    """
    Build the formatter invocation for `paths`.

    Project-level `.prettierrc`, `.editorconfig` and ignore files are not
    consulted, so a file formats identically wherever it lives. Verification
    formats copies outside the project and relies on this.
    """
    return [
        executable,
        "--write",
        *FORMATTER_ISOLATION_ARGS,
        "--ignore-path", os.devnull,
        *FORMATTER_STYLE_ARGS,
        *paths,
    ]


def format_files(paths: List[str], executable: Optional[str] = None) -> bool:
    """
    Format `paths` in place.

    The call blocks until the formatter exits; no timeout is applied.

    Args:
        paths: Files to rewrite.
        executable: Formatter executable name or path.

    Returns:
        bool: True if the formatter ran and succeeded, False if it was skipped
              or reported an error.
    """
    if not paths:
        return False

    try:
        resolved = resolve_formatter(executable)
    except ExternalToolMissingError as e:
        logger.debug(f"{e.message} Skipping formatting.")
        return False

    cmd = build_format_command(resolved, paths)
    logger.debug(f"Running formatter: {' '.join(cmd)}")
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        logger.warning(f"Formatter could not be started: {e}")
        return False

    if proc.returncode != 0:
        detail = (proc.stderr or proc.stdout or "").strip()
        logger.warning(f"Formatter exited with {proc.returncode}: {detail}")
        return False

    logger.info(f"Formatted {len(paths)} file(s).")
    return True
