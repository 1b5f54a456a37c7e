from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides. Flags the user did not pass are
left out of the overrides so config file values can fill them in.
"""

import argparse
from typing import Any, Dict

from rntranslationgen.domain.constants import OUTPUT_MODES
from rntranslationgen.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the rn-translation-gen CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="rn-translation-gen",
        description=i18n.t("app.description"),
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help=i18n.t("cli.args.input"),
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help=i18n.t("cli.args.output"),
    )
    p.add_argument(
        "--cwd",
        dest="project_root",
        default=None,
        help=i18n.t("cli.args.cwd"),
    )
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help=i18n.t("cli.args.config"),
    )

    # --- Tree Shaping ---
    p.add_argument(
        "--exclude-key",
        dest="exclude_key",
        default=None,
        help=i18n.t("cli.args.exclude_key"),
    )

    # --- Output Strategies ---
    # Validated downstream so that CLI and config file values fail the same way
    p.add_argument(
        "--output-mode",
        dest="output_mode",
        default=None,
        metavar="{" + ",".join(OUTPUT_MODES) + "}",
        help=i18n.t("cli.args.output_mode"),
    )
    p.add_argument(
        "--disable-eslint-quotes",
        action="store_true",
        default=None,
        help=i18n.t("cli.args.disable_eslint_quotes"),
    )
    p.add_argument(
        "--format",
        action="store_true",
        default=None,
        help=i18n.t("cli.args.format"),
    )
    p.add_argument(
        "--no-emit",
        action="store_true",
        default=None,
        help=i18n.t("cli.args.no_emit"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump_config"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Only the options explicitly set on the command line.
    """
    overrides: Dict[str, Any] = {}

    for key in ("input_path", "output_path", "exclude_key", "output_mode"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value

    if args.disable_eslint_quotes:
        overrides["disable_eslint_quotes"] = True
    if args.format:
        overrides["format"] = True
    if args.no_emit:
        overrides["no_emit"] = True

    return overrides
