from __future__ import annotations

"""
Path Flattener.

Walks a KeyedTree depth-first and lists the dotted path of every Leaf.
"""

from typing import List

from rntranslationgen.domain.constants import PATH_SEPARATOR
from rntranslationgen.domain.tree_models import KeyedTree, PathList, is_node


def join_path(parents: List[str], key: str) -> str:
    """Build the dotted path of `key` below the `parents` segments."""
    return PATH_SEPARATOR.join(parents + [key])


def flatten_paths(tree: KeyedTree) -> PathList:
    """
    List every Leaf path in depth-first pre-order.

    Children are visited in insertion order at every level. Nodes without
    leaves contribute nothing, so an empty tree yields an empty list.

    Args:
        tree: Source tree.

    Returns:
        PathList: Dotted paths, one per Leaf.
    """
    paths: PathList = []
    _walk(tree, [], paths)
    return paths


def _walk(node: KeyedTree, parents: List[str], out: PathList) -> None:
    for key, value in node.items():
        if is_node(value):
            _walk(value, parents + [key], out)
        else:
            out.append(join_path(parents, key))
