from __future__ import annotations

"""
Domain Constants.

Centralizes artifact names, header annotations, configuration discovery
names and process exit codes shared by the pipeline and the CLI.
"""

from typing import Dict, List, Tuple

# -----------------------------------------------------------------------------
# KEY ADDRESSING
# -----------------------------------------------------------------------------
PATH_SEPARATOR = "."

# -----------------------------------------------------------------------------
# OUTPUT MODES
# -----------------------------------------------------------------------------
OUTPUT_MODE_SINGLE = "single"
OUTPUT_MODE_DUAL = "dual"
OUTPUT_MODES: Tuple[str, ...] = (OUTPUT_MODE_SINGLE, OUTPUT_MODE_DUAL)
DEFAULT_OUTPUT_MODE = OUTPUT_MODE_DUAL

# -----------------------------------------------------------------------------
# EMITTED ARTIFACTS
# -----------------------------------------------------------------------------
TYPES_FILE_NAME = "translations.d.ts"
KEYS_FILE_NAME = "translations.ts"

# Module specifier used by the constant file to re-export the union type
TYPES_MODULE_SPECIFIER = "./translations.d"

TYPE_NAME = "TranslationKey"
CONST_NAME = "TRANSLATION_KEYS"
EMPTY_UNION = "never"

ESLINT_DISABLE_QUOTES = "/* eslint-disable quotes */"
PLAIN_HEADER = "/* This file is auto-generated. */"
TYPES_LINT_HEADER = (
    "/* This file is auto-generated. Disabling quotes rule to avoid "
    "conflicts with extracted translation keys. */"
)
KEYS_LINT_HEADER = (
    "/* This file is auto-generated. Contains actual translation key values. */"
)

# -----------------------------------------------------------------------------
# INPUT DISCOVERY
# -----------------------------------------------------------------------------
INPUT_FILE_SUFFIX = ".json"

# -----------------------------------------------------------------------------
# CONFIGURATION FILE DISCOVERY
# -----------------------------------------------------------------------------
CONFIG_FILE_NAMES: List[str] = [
    "rn-translation-gen.yml",
    "rn-translation-gen.yaml",
    "rn-translation-gen.json",
]
CONFIG_SECTION_NAME = "rn-translation-gen"

# Every spelling accepted in a config file, mapped to the internal field name
CONFIG_KEY_ALIASES: Dict[str, str] = {
    "input": "input_path",
    "input_path": "input_path",
    "inputPath": "input_path",
    "output": "output_path",
    "output_path": "output_path",
    "outputPath": "output_path",
    "excludeKey": "exclude_key",
    "exclude-key": "exclude_key",
    "exclude_key": "exclude_key",
    "outputMode": "output_mode",
    "output-mode": "output_mode",
    "output_mode": "output_mode",
    "disableEslintQuotes": "disable_eslint_quotes",
    "disable-eslint-quotes": "disable_eslint_quotes",
    "disable_eslint_quotes": "disable_eslint_quotes",
    "format": "format",
    "formatter": "formatter",
    "noEmit": "no_emit",
    "no-emit": "no_emit",
    "no_emit": "no_emit",
}

# -----------------------------------------------------------------------------
# FORMATTER
# -----------------------------------------------------------------------------
DEFAULT_FORMATTER = "prettier"
# Style comes from the arguments below only, never from files near the output
FORMATTER_ISOLATION_ARGS: List[str] = ["--no-config", "--no-editorconfig"]
FORMATTER_STYLE_ARGS: List[str] = [
    "--print-width", "100",
    "--single-quote",
    "--trailing-comma", "all",
    "--tab-width", "2",
]

# -----------------------------------------------------------------------------
# PROCESS EXIT CODES
# -----------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_DRIFT = 3
EXIT_INTERRUPTED = 130
