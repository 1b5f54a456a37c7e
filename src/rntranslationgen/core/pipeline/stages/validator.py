from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between the merged option dict (defaults, config file, CLI) and
the engine. Coerces loosely typed values coming from YAML/JSON files,
resolves paths against the project root and produces the immutable
GenerationConfig used for the rest of the run.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from rntranslationgen.domain.config import GenerationConfig, get_default_config
from rntranslationgen.domain.constants import OUTPUT_MODES
from rntranslationgen.domain.errors import InvalidOutputModeError, MissingConfigurationError
from rntranslationgen.infra.fs import normalize_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        project_root: Optional[str] = None,
        strict: bool = False,
) -> Tuple[GenerationConfig, List[str]]:
    """
    Validate and normalize the merged configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        project_root: Base directory for relative paths (defaults to cwd).
        strict: If True, raises TypeError on type mismatch instead of coercing.

    Returns:
        Tuple[GenerationConfig, List[str]]: The resolved configuration and
                                            a list of warnings.

    Raises:
        MissingConfigurationError: If input or output directory is missing.
        InvalidOutputModeError: If the output mode is not recognized.
    """
    warnings: List[str] = []
    defaults = get_default_config()
    root = project_root or os.getcwd()

    if config is None:
        config = {}
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    # Schema Definition (Declarative mapping)
    string_fields = ["input_path", "output_path", "exclude_key", "output_mode", "formatter"]
    bool_fields = ["disable_eslint_quotes", "format", "no_emit"]

    for field in string_fields:
        merged[field] = _as_str(merged.get(field), defaults.get(field), field, warnings, strict)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults.get(field, False), field, warnings, strict)

    # Domain-Specific Normalization
    input_path = normalize_path(merged["input_path"], root)
    if not input_path:
        raise MissingConfigurationError("No input directory specified. Use --input <path>.")

    output_path = normalize_path(merged["output_path"], root)
    if not output_path:
        raise MissingConfigurationError("No output directory specified. Use --output <path>.")

    output_mode = (merged["output_mode"] or "").lower()
    if output_mode not in OUTPUT_MODES:
        raise InvalidOutputModeError(
            f"Invalid output mode '{merged['output_mode']}'. "
            f"Expected one of: {', '.join(OUTPUT_MODES)}."
        )

    generation_config = GenerationConfig(
        input_path=input_path,
        output_path=output_path,
        exclude_key=merged["exclude_key"],
        output_mode=output_mode,
        disable_eslint_quotes=merged["disable_eslint_quotes"],
        format=merged["format"],
        no_emit=merged["no_emit"],
        formatter=merged["formatter"] or defaults["formatter"],
    )
    return generation_config, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(
        value: Any,
        fallback: Optional[str],
        field: str,
        warnings: List[str],
        strict: bool,
) -> Optional[str]:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback
    # YAML turns unquoted numbers into ints; keys and paths may legitimately be numeric
    if isinstance(value, (int, float)) and not isinstance(value, bool) and not strict:
        warnings.append(f"Field '{field}' converted from number {value} to string.")
        return str(value)

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
