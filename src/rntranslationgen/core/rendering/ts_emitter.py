from __future__ import annotations

"""
TypeScript Artifact Emitter.

Renders the flattened key list and the mirror tree into TypeScript source:
a string-literal union type over every key and a nested constant object
whose leaves are the keys themselves. Rendering is pure; nothing here
touches the filesystem.
"""

import json
from typing import List

from rntranslationgen.domain.constants import (
    CONST_NAME,
    EMPTY_UNION,
    ESLINT_DISABLE_QUOTES,
    KEYS_FILE_NAME,
    KEYS_LINT_HEADER,
    OUTPUT_MODE_DUAL,
    OUTPUT_MODE_SINGLE,
    PLAIN_HEADER,
    TYPE_NAME,
    TYPES_FILE_NAME,
    TYPES_LINT_HEADER,
    TYPES_MODULE_SPECIFIER,
)
from rntranslationgen.domain.errors import InvalidOutputModeError
from rntranslationgen.domain.pipeline_models import Artifact
from rntranslationgen.domain.tree_models import MirrorTree, PathList

INDENT = "  "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_artifacts(
        paths: PathList,
        mirror: MirrorTree,
        *,
        output_mode: str,
        disable_eslint_quotes: bool = False,
) -> List[Artifact]:
    """
    Render every artifact required by `output_mode`.

    'dual' yields the type definition file followed by the constant file,
    which re-exports the type. 'single' yields one constant file with the
    union inlined.

    Args:
        paths: Ordered dotted paths from the flattener.
        mirror: Mirror tree from the mirror builder.
        output_mode: 'single' or 'dual'.
        disable_eslint_quotes: Use the lint suppression header.

    Returns:
        List[Artifact]: Rendered artifacts in write order.

    Raises:
        InvalidOutputModeError: For any other mode value.
    """
    union = render_type_union(paths)
    constant = render_key_constant(mirror)

    if output_mode == OUTPUT_MODE_DUAL:
        types_text = _join_blocks(
            render_header(TYPES_LINT_HEADER, disable_eslint_quotes),
            [union],
        )
        keys_text = _join_blocks(
            render_header(KEYS_LINT_HEADER, disable_eslint_quotes),
            [render_type_reexport(), constant],
        )
        return [
            Artifact(name=TYPES_FILE_NAME, content=types_text),
            Artifact(name=KEYS_FILE_NAME, content=keys_text),
        ]

    if output_mode == OUTPUT_MODE_SINGLE:
        keys_text = _join_blocks(
            render_header(KEYS_LINT_HEADER, disable_eslint_quotes),
            [union, constant],
        )
        return [Artifact(name=KEYS_FILE_NAME, content=keys_text)]

    raise InvalidOutputModeError(f"Unknown output mode '{output_mode}'.")


def render_header(lint_description: str, disable_eslint_quotes: bool) -> List[str]:
    """Return the leading comment lines of an artifact."""
    if disable_eslint_quotes:
        return [ESLINT_DISABLE_QUOTES, lint_description]
    return [PLAIN_HEADER]


def render_type_union(paths: PathList) -> str:
    """
    Render the key union type, one literal per line in path order.

    With no paths the union has no members and degrades to `never`.
    """
    if not paths:
        return f"export type {TYPE_NAME} = {EMPTY_UNION};"
    members = [f"{INDENT}| {_ts_string(p)}" for p in paths]
    return f"export type {TYPE_NAME} =\n" + "\n".join(members) + ";"


def render_key_constant(mirror: MirrorTree) -> str:
    """Render the nested key constant with two-space indentation."""
    body = json.dumps(mirror, indent=len(INDENT), ensure_ascii=False)
    return f"export const {CONST_NAME} = {body};"


def render_type_reexport() -> str:
    return f"export type {{ {TYPE_NAME} }} from '{TYPES_MODULE_SPECIFIER}';"

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ts_string(value: str) -> str:
    # JSON string literals are valid TypeScript string literals
    return json.dumps(value, ensure_ascii=False)


def _join_blocks(header: List[str], blocks: List[str]) -> str:
    return "\n".join(header) + "\n" + "\n\n".join(blocks) + "\n"
