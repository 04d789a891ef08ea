"""
Token tree models.

A key file is a single token tree: either an opaque byte string (Leaf) or an
ordered list of token trees (Node).

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class Leaf:
    """Opaque byte string token, e.g. ``7:comment``."""

    value: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_bytes(self.value))


@dataclass
class Node:
    """Ordered sequence of child trees, e.g. ``(11:private-key(...))``."""

    children: List["TokenTree"] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Always own the child list so callers can't alias it.
        self.children = list(self.children)


TokenTree = Union[Leaf, Node]


def is_leaf(tree: TokenTree) -> bool:
    """Return True if tree is a Leaf."""
    return isinstance(tree, Leaf)


def is_node(tree: TokenTree) -> bool:
    """Return True if tree is a Node."""
    return isinstance(tree, Node)


def _to_bytes(value: Union[bytes, bytearray, memoryview, str]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Leaf value must be bytes-like or str, got {type(value).__name__}")


def make_field(name: Union[bytes, str], value: Union[bytes, str]) -> Node:
    """Build a ``(name value)`` field node."""
    return Node([Leaf(name), Leaf(value)])
