from __future__ import annotations

"""
Mirror Builder.

Rebuilds a KeyedTree with the same Nodes, key names and key order, where
each Leaf is replaced by the dotted path that addresses it. Paths are
produced with the same join as the Path Flattener so that both outputs
always agree.
"""

from typing import List

from rntranslationgen.core.analysis.path_flattener import join_path
from rntranslationgen.domain.tree_models import KeyedTree, MirrorTree, is_node


def build_mirror(tree: KeyedTree) -> MirrorTree:
    """
    Return the mirror of `tree`.

    Args:
        tree: Source tree.

    Returns:
        MirrorTree: Isomorphic tree whose leaves hold their own paths.
    """
    return _mirror(tree, [])


def _mirror(node: KeyedTree, parents: List[str]) -> MirrorTree:
    out: MirrorTree = {}
    for key, value in node.items():
        if is_node(value):
            out[key] = _mirror(value, parents + [key])
        else:
            out[key] = join_path(parents, key)
    return out
