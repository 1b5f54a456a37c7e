from __future__ import annotations

"""
Keyed Tree Data Models.

Provides the recursive type definitions for localization documents and
their mirrored key trees. Nodes are plain dicts so that JSON insertion
order is carried through every traversal untouched.
"""

from typing import Any, Dict, List, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

# A Leaf is any JSON value that is not an object; its content is opaque.
Leaf = Any

KeyedTree = Dict[str, Union["KeyedTree", Leaf]]

# Same shape as the source tree, every Leaf replaced by its own dotted path.
MirrorTree = Dict[str, Union["MirrorTree", str]]

DottedPath = str
PathList = List[DottedPath]


def is_node(value: Any) -> bool:
    """Return True when `value` is an interior Node of a KeyedTree."""
    return isinstance(value, dict)
