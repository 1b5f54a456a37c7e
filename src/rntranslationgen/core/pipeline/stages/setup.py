from __future__ import annotations

"""
Pipeline Setup & Environment Preparation Stage.

Checks that the declared directories exist and maps the artifact names the
selected output mode will produce. Nothing is created here: the generator
never invents an output directory on the user's behalf.
"""

import logging
import os
from typing import Any, Dict, List

from rntranslationgen.domain.config import GenerationConfig
from rntranslationgen.domain.constants import KEYS_FILE_NAME, OUTPUT_MODE_DUAL, TYPES_FILE_NAME
from rntranslationgen.domain.errors import DirectoryNotFoundError
from rntranslationgen.infra.fs import check_existing_output_files

logger = logging.getLogger(__name__)


def expected_artifact_names(output_mode: str) -> List[str]:
    """Predict the artifact file names for an output mode."""
    if output_mode == OUTPUT_MODE_DUAL:
        return [TYPES_FILE_NAME, KEYS_FILE_NAME]
    return [KEYS_FILE_NAME]


def prepare_environment(cfg: GenerationConfig) -> Dict[str, Any]:
    """
    Validate the filesystem state required by a run.

    Args:
        cfg: Resolved generation configuration.

    Returns:
        Dict[str, Any]: Environment context for downstream stages.

    Raises:
        DirectoryNotFoundError: If the input or output directory is missing.
    """
    if not os.path.isdir(cfg.input_path):
        raise DirectoryNotFoundError(f"Translation directory '{cfg.input_path}' does not exist.")

    if not os.path.isdir(cfg.output_path):
        raise DirectoryNotFoundError(
            f"Output directory '{cfg.output_path}' does not exist. Please create it first."
        )

    expected = expected_artifact_names(cfg.output_mode)
    existing = check_existing_output_files(cfg.output_path, expected)
    if existing:
        logger.debug(f"Artifacts already present: {existing}")

    logger.debug("Pipeline environment setup complete.")
    return {
        "input_path": cfg.input_path,
        "output_path": cfg.output_path,
        "expected_files": expected,
        "existing_files": existing,
    }
