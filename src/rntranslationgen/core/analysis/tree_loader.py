from __future__ import annotations

"""
Translation Tree Loader.

Selects the translation document that defines the key schema, parses it
into a KeyedTree and applies the optional root unwrapping. Only the first
document of the input directory is read: every locale is expected to share
the same key shape.
"""

import json
import logging
import os
from typing import Any, List, Optional, Tuple

from rntranslationgen.domain.constants import INPUT_FILE_SUFFIX, PATH_SEPARATOR
from rntranslationgen.domain.errors import (
    DirectoryNotFoundError,
    InvalidKeyNameError,
    MalformedInputError,
    NoInputFoundError,
)
from rntranslationgen.domain.tree_models import KeyedTree, is_node
from rntranslationgen.infra.fs import list_files_with_suffix

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_translation_tree(
        input_dir: str,
        exclude_key: Optional[str] = None,
) -> Tuple[str, KeyedTree]:
    """
    Discover, parse and shape the translation document of `input_dir`.

    Args:
        input_dir: Directory holding one or more `*.json` locale files.
        exclude_key: Optional top-level key to unwrap.

    Returns:
        Tuple[str, KeyedTree]: The selected file path and the shaped tree.
    """
    source_file = discover_input_file(input_dir)
    tree = parse_tree_file(source_file)
    tree = unwrap_root(tree, exclude_key)
    validate_key_names(tree)
    return source_file, tree


def discover_input_file(input_dir: str) -> str:
    """
    Select the first JSON document in `input_dir` (sorted by file name).

    Raises:
        DirectoryNotFoundError: If `input_dir` is not a readable directory.
        NoInputFoundError: If it contains no `*.json` file.
    """
    if not os.path.isdir(input_dir):
        raise DirectoryNotFoundError(f"Translation directory '{input_dir}' does not exist.")

    try:
        candidates = list_files_with_suffix(input_dir, INPUT_FILE_SUFFIX)
    except OSError as e:
        raise DirectoryNotFoundError(
            f"Translation directory '{input_dir}' cannot be read: {e}"
        ) from e
    if not candidates:
        raise NoInputFoundError(f"No JSON translation files found in '{input_dir}'.")

    selected = candidates[0]
    if len(candidates) > 1:
        logger.debug(
            f"{len(candidates)} translation files found; using {os.path.basename(selected)} "
            f"as key schema."
        )
    logger.info(f"Reading translation keys from: {selected}")
    return selected


def parse_tree_file(path: str) -> KeyedTree:
    """
    Parse a UTF-8 JSON document whose root must be an object.

    Raises:
        MalformedInputError: On unreadable files, invalid JSON or a non-object root.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data: Any = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"JSON format error in '{path}': {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"Cannot read '{path}': {e}") from e

    if not is_node(data):
        raise MalformedInputError(
            f"JSON format error in '{path}': root must be an object, found {type(data).__name__}."
        )
    return data


def unwrap_root(tree: KeyedTree, exclude_key: Optional[str]) -> KeyedTree:
    """
    Replace the root with the subtree stored under `exclude_key`.

    Sibling keys of `exclude_key` are dropped. An absent key, or an unset
    `exclude_key`, leaves the tree unchanged.

    Raises:
        MalformedInputError: If the unwrapped value is not an object.
    """
    if not exclude_key or exclude_key not in tree:
        if exclude_key:
            logger.debug(f"Exclude key '{exclude_key}' not present at root; tree used unchanged.")
        return tree

    subtree = tree[exclude_key]
    if not is_node(subtree):
        raise MalformedInputError(
            f"Exclude key '{exclude_key}' must hold an object, found {type(subtree).__name__}."
        )
    logger.debug(f"Unwrapped root key '{exclude_key}'.")
    return subtree


def validate_key_names(tree: KeyedTree) -> None:
    """
    Reject key names that would break dotted path addressing.

    Raises:
        InvalidKeyNameError: For empty keys or keys containing the separator.
    """
    invalid = _collect_invalid_keys(tree, [])
    if not invalid:
        return
    shown = ", ".join(f"'{loc}'" for loc in invalid[:5])
    more = f" (and {len(invalid) - 5} more)" if len(invalid) > 5 else ""
    raise InvalidKeyNameError(
        f"Key names must be non-empty and must not contain '{PATH_SEPARATOR}': {shown}{more}."
    )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _collect_invalid_keys(node: KeyedTree, parents: List[str]) -> List[str]:
    found: List[str] = []
    for key, value in node.items():
        segments = parents + [key]
        if not key or PATH_SEPARATOR in key:
            # Brackets keep the offending segment readable inside the location
            found.append(PATH_SEPARATOR.join(parents + [f"[{key}]"]))
        if is_node(value):
            found.extend(_collect_invalid_keys(value, segments))
    return found
