from __future__ import annotations

"""
Configuration Domain Management.

Holds the default option set, the immutable GenerationConfig record that
drives a single run, and the reader for project-level config files
(`rn-translation-gen.yml` / `.yaml` / `.json`). Config files only supply
fallback values; command line flags always take precedence.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

import yaml

from rntranslationgen.domain.constants import (
    CONFIG_FILE_NAMES,
    CONFIG_KEY_ALIASES,
    CONFIG_SECTION_NAME,
    DEFAULT_FORMATTER,
    DEFAULT_OUTPUT_MODE,
)
from rntranslationgen.domain.errors import MissingConfigurationError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Models
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GenerationConfig:
    """
    Immutable option record resolved once per run.

    Attributes:
        input_path: Directory holding the translation documents.
        output_path: Directory receiving the generated artifacts.
        exclude_key: Optional top-level key whose subtree replaces the root.
        output_mode: 'single' (one file) or 'dual' (type file + constant file).
        disable_eslint_quotes: Prefix artifacts with the lint suppression header.
        format: Run the external formatter over the artifacts.
        no_emit: Verify committed artifacts instead of writing new ones.
        formatter: Executable name of the external formatter.
    """
    input_path: str
    output_path: str
    exclude_key: Optional[str] = None
    output_mode: str = DEFAULT_OUTPUT_MODE
    disable_eslint_quotes: bool = False
    format: bool = False
    no_emit: bool = False
    formatter: str = DEFAULT_FORMATTER

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default option set.

    Input and output directories have no default: they must come from the
    command line or a config file.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": None,
        "output_path": None,

        # Tree shaping
        "exclude_key": None,

        # Output Format
        "output_mode": DEFAULT_OUTPUT_MODE,
        "disable_eslint_quotes": False,

        # Post-processing
        "format": False,
        "formatter": DEFAULT_FORMATTER,

        # Verification
        "no_emit": False,
    }


# -----------------------------------------------------------------------------
# Config File Discovery
# -----------------------------------------------------------------------------
def find_config_file(project_root: str) -> Optional[str]:
    """
    Locate the first known config file inside the project root.

    Args:
        project_root: Directory to inspect (never inferred from install location).

    Returns:
        Optional[str]: Absolute path of the config file, or None.
    """
    for name in CONFIG_FILE_NAMES:
        candidate = os.path.join(project_root, name)
        if os.path.isfile(candidate):
            logger.debug(f"Config file discovered: {candidate}")
            return os.path.abspath(candidate)
    return None


def load_config_file(path: str) -> Tuple[Dict[str, Any], List[str]]:
    """
    Read a config file into a flat dict of internal option names.

    YAML files go through `yaml.safe_load`, everything else through `json`.
    Only flat scalar entries are honoured, optionally wrapped in a single
    `rn-translation-gen` section.

    Args:
        path: Config file path.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Recognized options and warnings.

    Raises:
        MissingConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.endswith((".yml", ".yaml")):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise MissingConfigurationError(f"Config file '{path}' could not be read: {e}") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise MissingConfigurationError(f"Config file '{path}' is not valid: {e}") from e

    if data is None:
        return {}, []
    if not isinstance(data, dict):
        raise MissingConfigurationError(
            f"Config file '{path}' must contain a mapping, found {type(data).__name__}."
        )

    return _normalize_config_mapping(data, path)


def load_project_config(
        project_root: str,
        config_path: Optional[str] = None,
) -> Tuple[Dict[str, Any], Optional[str], List[str]]:
    """
    Resolve the fallback option layer for a project.

    Args:
        project_root: Explicit project root directory.
        config_path: Explicit config file; must exist when given.

    Returns:
        Tuple: (options from file, path of file used or None, warnings).
    """
    if config_path:
        resolved = config_path
        if not os.path.isabs(resolved):
            resolved = os.path.join(project_root, resolved)
        if not os.path.isfile(resolved):
            raise MissingConfigurationError(f"Config file '{resolved}' does not exist.")
    else:
        resolved = find_config_file(project_root)
        if resolved is None:
            logger.debug(f"No config file found in {project_root}")
            return {}, None, []

    options, warnings = load_config_file(resolved)
    logger.info(f"Loaded configuration from {resolved}")
    return options, resolved, warnings


# -----------------------------------------------------------------------------
# Private Helpers
# -----------------------------------------------------------------------------
def _normalize_config_mapping(data: Dict[str, Any], path: str) -> Tuple[Dict[str, Any], List[str]]:
    warnings: List[str] = []

    section = data.get(CONFIG_SECTION_NAME)
    if isinstance(section, dict):
        data = section

    out: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = CONFIG_KEY_ALIASES.get(str(raw_key))
        if key is None:
            warnings.append(f"Unknown option '{raw_key}' in '{path}' ignored.")
            continue
        if isinstance(value, (dict, list)):
            warnings.append(f"Option '{raw_key}' in '{path}' must be a scalar; ignored.")
            continue
        out[key] = value

    return out, warnings
