from __future__ import annotations

"""
Unit tests for the TypeScript Artifact Emitter.

Verifies output-mode policy, header selection, literal escaping and the
degenerate empty union.
"""

import json
from typing import Any, Dict

import pytest

from rntranslationgen.core.analysis.mirror_builder import build_mirror
from rntranslationgen.core.analysis.path_flattener import flatten_paths
from rntranslationgen.core.rendering.ts_emitter import (
    render_artifacts,
    render_key_constant,
    render_type_union,
)
from rntranslationgen.domain.errors import InvalidOutputModeError

HOME = {"home": {"title": "Welcome Home", "description": "This is the home page."}}


def _render(tree: Dict[str, Any], mode: str, lint: bool = False):
    return render_artifacts(
        flatten_paths(tree), build_mirror(tree), output_mode=mode, disable_eslint_quotes=lint
    )


def test_type_union_layout() -> None:
    """TC-01: One literal per line, order preserved, terminated by ';'."""
    assert render_type_union(["home.title", "home.description"]) == (
        "export type TranslationKey =\n"
        '  | "home.title"\n'
        '  | "home.description";'
    )


def test_empty_union_is_never() -> None:
    """TC-02: Zero keys render a valid `never` type."""
    assert render_type_union([]) == "export type TranslationKey = never;"


def test_literals_are_escaped() -> None:
    """TC-03: Quotes and backslashes inside keys stay valid string literals."""
    union = render_type_union(['say "hi"', "back\\slash"])
    assert '| "say \\"hi\\""' in union
    assert '| "back\\\\slash"' in union


def test_key_constant_is_nested_object() -> None:
    """TC-04: The constant body is the mirror tree with two-space indentation."""
    text = render_key_constant(build_mirror(HOME))

    assert text.startswith("export const TRANSLATION_KEYS = {\n")
    assert text.endswith("};")
    body = text[len("export const TRANSLATION_KEYS = "):-1]
    assert json.loads(body) == {"home": {"title": "home.title", "description": "home.description"}}
    assert '\n  "home": {\n    "title": "home.title",' in text


def test_dual_mode_artifacts() -> None:
    """TC-05: Dual mode writes a type file and a constant file re-exporting the type."""
    types_file, keys_file = _render(HOME, "dual")

    assert types_file.name == "translations.d.ts"
    assert keys_file.name == "translations.ts"

    assert types_file.content == (
        "/* This file is auto-generated. */\n"
        "export type TranslationKey =\n"
        '  | "home.title"\n'
        '  | "home.description";\n'
    )
    assert "TRANSLATION_KEYS" not in types_file.content

    assert keys_file.content.startswith(
        "/* This file is auto-generated. */\n"
        "export type { TranslationKey } from './translations.d';\n\n"
        "export const TRANSLATION_KEYS = {\n"
    )
    assert "| \"home.title\"" not in keys_file.content
    assert keys_file.content.endswith("};\n")


def test_single_mode_inlines_union() -> None:
    """TC-06: Single mode emits exactly one file with type and constant."""
    artifacts = _render(HOME, "single")

    assert [a.name for a in artifacts] == ["translations.ts"]
    content = artifacts[0].content
    assert "export type TranslationKey =\n" in content
    assert "from './translations.d'" not in content
    assert content.index("export type TranslationKey") < content.index("export const TRANSLATION_KEYS")


def test_lint_suppression_header() -> None:
    """TC-07: Every emitted file starts with the eslint marker when enabled."""
    types_file, keys_file = _render(HOME, "dual", lint=True)

    for artifact in (types_file, keys_file):
        assert artifact.content.startswith("/* eslint-disable quotes */\n/* This file is auto-generated.")
    assert "Disabling quotes rule" in types_file.content
    assert "Contains actual translation key values" in keys_file.content


def test_plain_header_without_lint_flag() -> None:
    for artifact in _render(HOME, "dual", lint=False):
        assert "eslint-disable" not in artifact.content


def test_empty_tree_still_emits() -> None:
    """TC-08: An empty document yields valid artifacts with `never` and `{}`."""
    types_file, keys_file = _render({}, "dual")

    assert "export type TranslationKey = never;" in types_file.content
    assert "export const TRANSLATION_KEYS = {};" in keys_file.content


def test_unicode_emitted_verbatim() -> None:
    artifacts = _render({"größe": {"名前": "x"}}, "single")
    assert '"größe.名前"' in artifacts[0].content


def test_render_is_deterministic() -> None:
    assert _render(HOME, "dual") == _render(HOME, "dual")


def test_unknown_mode_rejected() -> None:
    with pytest.raises(InvalidOutputModeError, match="triple"):
        _render(HOME, "triple")
