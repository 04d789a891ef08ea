"""
Named field access on key file token trees.

A field is a child node shaped like ``(name value)``. The first child of a
record names the record kind (e.g. ``private-key``).

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..keyfile.tree import Leaf, TokenTree, is_leaf, is_node, make_field
from .constants import COMMENT_FIELD

logger = logging.getLogger(__name__)


def _matches(child: TokenTree, name: Leaf) -> bool:
    return (
        is_node(child)
        and len(child.children) > 0
        and child.children[0] == name
    )


def get_field(tree: TokenTree, name: Union[str, bytes]) -> Optional[str]:
    """
    Return the value of field ``name``, decoded as UTF-8.

    The record kind (first child) is skipped. The first child node whose
    first element equals ``name`` decides the result: its second element if
    that is a leaf, otherwise None. Invalid UTF-8 is replaced, not rejected.
    """
    if not is_node(tree):
        return None
    key = Leaf(name)
    for child in tree.children[1:]:
        if not _matches(child, key):
            continue
        if len(child.children) > 1 and is_leaf(child.children[1]):
            return child.children[1].value.decode("utf-8", errors="replace")
        logger.debug(f"Field {key.value!r} has no leaf value")
        return None
    return None


def upsert_field(
    tree: TokenTree, name: Union[str, bytes], value: Union[str, bytes]
) -> None:
    """
    Set field ``name`` to ``value`` in place.

    Replaces the content of the first matching child node, or appends a new
    ``(name value)`` node. Does nothing when tree is a Leaf.
    """
    if not is_node(tree):
        logger.debug("Cannot set a field on a leaf; ignoring")
        return
    key = Leaf(name)
    for child in tree.children:
        if _matches(child, key):
            child.children[:] = [key, Leaf(value)]
            return
    tree.children.append(make_field(key.value, value))


def get_comment(tree: TokenTree) -> Optional[str]:
    """Return the key comment, or None."""
    return get_field(tree, COMMENT_FIELD)


def upsert_comment(tree: TokenTree, value: Union[str, bytes]) -> None:
    """Set the key comment in place."""
    upsert_field(tree, COMMENT_FIELD, value)
