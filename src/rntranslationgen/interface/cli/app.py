from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the
option layers (defaults, project config file, CLI flags), pipeline
execution and result rendering with the process exit contract.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from rntranslationgen.core.pipeline.engine import run_pipeline
from rntranslationgen.core.pipeline.stages.validator import validate_config
from rntranslationgen.domain.config import load_project_config
from rntranslationgen.domain.constants import (
    EXIT_DRIFT,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
)
from rntranslationgen.domain.errors import TranslationGenError
from rntranslationgen.domain.pipeline_models import PipelineResult
from rntranslationgen.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from rntranslationgen.interface.cli import args as cli_args
from rntranslationgen.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on generation failure, 3 on drift.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: Any) -> int:
    project_root = os.path.abspath(args.project_root or os.getcwd())
    logger.debug(f"Project root: {project_root}")

    try:
        file_conf, config_file, file_warnings = load_project_config(project_root, args.config_path)
        raw_conf = _merge_config(file_conf, cli_args.args_to_overrides(args))
        cfg, warnings = validate_config(raw_conf, project_root=project_root)
    except TranslationGenError as e:
        return _fail(e.message)

    for w in file_warnings + warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        payload = cfg.to_dict()
        payload["config_file"] = config_file
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return EXIT_SUCCESS

    try:
        result = run_pipeline(cfg)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return exit_code_for(result)


def exit_code_for(result: PipelineResult) -> int:
    """Map a pipeline result onto the process exit contract."""
    if result.ok:
        return EXIT_SUCCESS
    if result.drift_detected:
        return EXIT_DRIFT
    return EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Layer CLI overrides on top of config file values.

    Args:
        base: Values read from the config file.
        overrides: Values explicitly set on the command line.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _fail(message: str) -> int:
    print(i18n.t("cli.errors.prefix", message=message), file=sys.stderr)
    return EXIT_FAILURE


def _print_human_summary(result: PipelineResult) -> None:
    """
    Print the execution result: status lines on stdout, failures on stderr.

    Args:
        result: The pipeline result to render.
    """
    if not result.ok:
        print(i18n.t("cli.errors.prefix", message=result.error), file=sys.stderr)
        return

    if result.verification is not None:
        print(i18n.t("cli.status.verified", message=result.verification.message))
        return

    print(i18n.t("cli.status.success", path=result.output_path))
    print(i18n.t("cli.status.source", path=result.input_file))
    print(i18n.t("cli.status.keys", count=result.key_count))
    for path in result.artifacts:
        print(f"  - {path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
