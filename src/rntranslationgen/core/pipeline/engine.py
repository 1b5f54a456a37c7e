from __future__ import annotations

"""
Core generation pipeline.

This module coordinates one generation run:
1. Validates the input and output directories.
2. Loads the translation document and unwraps the optional root key.
3. Flattens the leaf paths and builds the mirror tree.
4. Renders the artifacts for the selected output mode.
5. Writes and formats them, or verifies them against the committed copies.
"""

import logging
from functools import partial
from typing import List, Tuple

from rntranslationgen.core.analysis.mirror_builder import build_mirror
from rntranslationgen.core.analysis.path_flattener import flatten_paths
from rntranslationgen.core.analysis.tree_loader import load_translation_tree
from rntranslationgen.core.pipeline.components.writer import write_artifacts
from rntranslationgen.core.pipeline.stages.setup import prepare_environment
from rntranslationgen.core.rendering.ts_emitter import render_artifacts
from rntranslationgen.core.services.formatter import format_files
from rntranslationgen.core.services.verifier import verify_artifacts
from rntranslationgen.domain.config import GenerationConfig
from rntranslationgen.domain.errors import DriftMismatchError, TranslationGenError
from rntranslationgen.domain.pipeline_models import (
    Artifact,
    PipelineResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def generate_artifacts(cfg: GenerationConfig) -> Tuple[str, int, List[Artifact]]:
    """
    Run the pure part of the pipeline: load, flatten, mirror and render.

    Args:
        cfg: Resolved generation configuration.

    Returns:
        Tuple: (selected input file, number of keys, rendered artifacts).
    """
    input_file, tree = load_translation_tree(cfg.input_path, cfg.exclude_key)
    paths = flatten_paths(tree)
    mirror = build_mirror(tree)
    if not paths:
        logger.warning("Translation document has no leaf keys; emitting an empty key union.")
    else:
        logger.info(f"Discovered {len(paths)} translation keys.")

    artifacts = render_artifacts(
        paths,
        mirror,
        output_mode=cfg.output_mode,
        disable_eslint_quotes=cfg.disable_eslint_quotes,
    )
    return input_file, len(paths), artifacts


def run_pipeline(cfg: GenerationConfig) -> PipelineResult:
    """
    Execute a full generation or verification run.

    Fatal conditions raised by the stages are converted into an error
    result; nothing is written to the output directory unless rendering
    completed for every artifact.

    Args:
        cfg: Resolved generation configuration.

    Returns:
        PipelineResult: Object containing status, artifacts and summary.
    """
    logger.info("Pipeline execution started.")
    cfg_dict = cfg.to_dict()
    input_file = ""

    try:
        env = prepare_environment(cfg)
        input_file, key_count, artifacts = generate_artifacts(cfg)

        format_hook = partial(format_files, executable=cfg.formatter) if cfg.format else None

        if cfg.no_emit:
            verification = verify_artifacts(artifacts, cfg.output_path, format_hook=format_hook)
            if not verification.ok:
                logger.error(verification.message)
                return create_error_result(
                    verification.message,
                    DriftMismatchError.kind,
                    cfg_dict,
                    input_file=input_file,
                    verification=verification,
                )
            logger.info("Verification completed: artifacts match.")
            return create_success_result(
                cfg_dict,
                input_file,
                key_count,
                verification.checked,
                formatted=format_hook is not None,
                verification=verification,
                summary_extra={"expected_files": env["expected_files"]},
            )

        written = write_artifacts(artifacts, cfg.output_path, skip_unchanged=format_hook is None)
        formatted = format_hook(written) if format_hook is not None else False

    except TranslationGenError as e:
        logger.error(e.message)
        return create_error_result(e.message, e.kind, cfg_dict, input_file=input_file)
    except OSError as e:
        msg = f"Failed to write artifacts to '{cfg.output_path}': {e}"
        logger.error(msg)
        return create_error_result(msg, TranslationGenError.kind, cfg_dict, input_file=input_file)

    logger.info("Pipeline completed successfully.")
    return create_success_result(
        cfg_dict,
        input_file,
        key_count,
        written,
        formatted=formatted,
        summary_extra={
            "expected_files": env["expected_files"],
            "existing_files_before_run": env["existing_files"],
        },
    )
